# cipherdesk/ui/widgets/letter_slots.py
from functools import partial
from typing import List, Sequence

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
                               QLineEdit, QToolButton, QScrollArea, QFrame)
from PySide6.QtCore import Signal, Slot
from loguru import logger

from ...core.letter_slots import edit_slot, initial_slots, remove_slot

class LetterSlotsWidget(QWidget):
    """Grid of one-letter inputs that make up the custom alphabet."""

    letters_changed = Signal() # Emitted after any accepted edit or removal

    COLUMNS = 6

    def __init__(self, slots: Sequence[str] | None = None, parent: QWidget | None = None):
        super().__init__(parent)
        self._slots: List[str] = list(slots) if slots else initial_slots()
        if self._slots[-1]:
            # Keep a trailing empty slot to type into
            self._slots.append("")
        self._editors: List[QLineEdit] = []
        self._remove_buttons: List[QToolButton] = []

        self._setup_ui()
        self._rebuild_rows()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        main_layout.addWidget(scroll_area)

        container = QWidget()
        scroll_area.setWidget(container)
        self.grid = QGridLayout(container)
        self.grid.setSpacing(4)

    def _rebuild_rows(self):
        """Recreates the editors so they match the current slot list."""
        while self.grid.count():
            item = self.grid.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._editors.clear()
        self._remove_buttons.clear()

        can_remove = len(self._slots) > 1
        for index, value in enumerate(self._slots):
            cell = QWidget()
            cell_layout = QHBoxLayout(cell)
            cell_layout.setContentsMargins(0, 0, 0, 0)
            cell_layout.setSpacing(1)

            editor = QLineEdit(value)
            editor.setMaxLength(2) # Room for the overwrite keystroke, normalized back to one
            editor.setFixedWidth(32)
            editor.textEdited.connect(partial(self._on_letter_edited, index))
            cell_layout.addWidget(editor)

            remove_button = QToolButton()
            remove_button.setText("×")
            remove_button.setToolTip("Remove this letter")
            remove_button.setEnabled(can_remove)
            remove_button.clicked.connect(partial(self._on_remove_clicked, index))
            cell_layout.addWidget(remove_button)

            self.grid.addWidget(cell, index // self.COLUMNS, index % self.COLUMNS)
            self._editors.append(editor)
            self._remove_buttons.append(remove_button)

    @Slot(int, str)
    def _on_letter_edited(self, index: int, raw: str):
        previous_count = len(self._slots)
        self._slots = edit_slot(self._slots, index, raw)

        # Write the normalized value back without re-triggering an edit
        editor = self._editors[index]
        editor.blockSignals(True)
        editor.setText(self._slots[index])
        editor.blockSignals(False)

        if len(self._slots) != previous_count:
            logger.debug(f"Letter slot added, now {len(self._slots)} slots.")
            self._rebuild_rows()
            self._editors[index + 1].setFocus()
        self.letters_changed.emit()

    @Slot(int, bool) # index, checked
    def _on_remove_clicked(self, index: int, checked: bool = False):
        if len(self._slots) <= 1:
            return
        self._slots = remove_slot(self._slots, index)
        logger.debug(f"Removed letter slot {index}, {len(self._slots)} slots remain.")
        self._rebuild_rows()
        self.letters_changed.emit()

    # --- Public API ---

    def get_slots(self) -> List[str]:
        """Returns a copy of the raw slot values."""
        return list(self._slots)

    def clear_slots(self):
        self._slots = initial_slots()
        self._rebuild_rows()
        self.letters_changed.emit()
