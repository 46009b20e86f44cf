# cipherdesk/services/clipboard.py
from PySide6.QtWidgets import QApplication, QTextEdit
from PySide6.QtCore import QObject, QTimer, Signal
from loguru import logger

def _copy_via_selection(text: str, widget: QTextEdit) -> bool:
    """Fallback: select the displayed text and let the widget copy its selection."""
    if widget.toPlainText() != text:
        widget.setPlainText(text)
    widget.selectAll()
    widget.copy()
    # Drop the selection again, the copy is what mattered
    cursor = widget.textCursor()
    cursor.clearSelection()
    widget.setTextCursor(cursor)
    return True

def copy_text(text: str, fallback_widget: QTextEdit | None = None) -> bool:
    """
    Copies `text` to the system clipboard.

    Writes through QClipboard first; when no clipboard is available or the
    write does not take, falls back to a select-and-copy on `fallback_widget`.
    Returns True if either path copied something.
    """
    if not text:
        logger.warning("Attempted to copy empty result.")
        return False

    clipboard = QApplication.clipboard()
    if clipboard is not None:
        try:
            clipboard.setText(text)
            if clipboard.text() == text:
                logger.info(f"Copied {len(text)} characters to clipboard.")
                return True
            logger.warning("Clipboard write did not take, trying selection fallback.")
        except RuntimeError as e:
            logger.warning(f"Clipboard write failed ({e}), trying selection fallback.")

    if fallback_widget is None:
        logger.error("Clipboard unavailable and no fallback widget given.")
        return False

    copied = _copy_via_selection(text, fallback_widget)
    logger.info(f"Copied {len(text)} characters via selection fallback.")
    return copied


class CopiedIndicator(QObject):
    """Short-lived "copied" flag that clears itself after a fixed delay."""

    changed = Signal(bool)

    def __init__(self, clear_after_ms: int = 2000, parent: QObject | None = None):
        super().__init__(parent)
        self.clear_after_ms = clear_after_ms
        self.copied = False

    def mark(self):
        self._set(True)
        # A timer left over from an earlier copy just clears again, which is harmless
        QTimer.singleShot(self.clear_after_ms, self.clear)

    def clear(self):
        self._set(False)

    def _set(self, value: bool):
        self.copied = value
        self.changed.emit(value)
