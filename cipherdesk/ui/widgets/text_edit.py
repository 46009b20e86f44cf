# cipherdesk/ui/widgets/text_edit.py

from PySide6.QtWidgets import QTextEdit, QSizePolicy
from PySide6.QtCore import Slot
from PySide6.QtGui import QKeySequence, QFontDatabase, QTextOption


class ResultTextEdit(QTextEdit):
    """Read-only text edit for displaying the cipher output."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setAcceptRichText(False)
        self.setLineWrapMode(QTextEdit.LineWrapMode.WidgetWidth)

        fixed_font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        self.setFont(fixed_font)
        self.setWordWrapMode(QTextOption.WrapMode.WrapAnywhere)
        self.setPlaceholderText("The result appears here as you type.")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def keyPressEvent(self, event):
        # Only copy and select-all make sense on a read-only result
        if event.matches(QKeySequence.StandardKey.Copy) or \
           event.matches(QKeySequence.StandardKey.SelectAll):
            super().keyPressEvent(event)
        else:
            event.ignore()

    @Slot(str)
    def setPlainText(self, text: str):
        super().setPlainText(text)
        cursor = self.textCursor()
        cursor.movePosition(cursor.MoveOperation.Start)
        self.setTextCursor(cursor)
