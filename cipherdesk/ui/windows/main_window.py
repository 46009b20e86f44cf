# cipherdesk/ui/windows/main_window.py
from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QFormLayout, QGroupBox, QComboBox, QPushButton,
                               QCheckBox, QSpinBox, QPlainTextEdit, QLabel,
                               QMessageBox, QStatusBar)
from PySide6.QtGui import QKeySequence, QFontDatabase
from PySide6.QtCore import Slot
from loguru import logger

from ..widgets.letter_slots import LetterSlotsWidget
from ..widgets.text_edit import ResultTextEdit
from ...config.loader import get_config
from ...core.alphabet import format_alphabet
from ...core.cipher_engine import compute_result
from ...core.models import Action, Algorithm, CipherSettings
from ...services.clipboard import CopiedIndicator, copy_text

SHIFT_RANGE = 1000 # Spin box bounds; any integer works, it is reduced modulo the alphabet


class MainWindow(QMainWindow):
    """The cipher form: settings on top, message and result below."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("CipherDesk")

        self.config = get_config()
        self.action = self.config.default_action
        self.copied_indicator = CopiedIndicator(self.config.copied_indicator_ms, parent=self)

        self._setup_ui()
        self._setup_menus()
        self._connect_signals()

        self.resize(self.config.window_width, self.config.window_height)
        self.recompute() # Initial result and alphabet display
        logger.info("MainWindow initialized.")

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)

        # --- Settings ---
        settings_group = QGroupBox("Settings")
        form = QFormLayout(settings_group)

        self.algorithm_combo = QComboBox()
        self.algorithm_combo.addItem("Caesar", Algorithm.CAESAR.value)
        self.algorithm_combo.addItem("Atbash", Algorithm.ATBASH.value)
        self.algorithm_combo.setCurrentIndex(self.algorithm_combo.findData(self.config.default_algorithm.value))
        form.addRow("Algorithm:", self.algorithm_combo)

        self.action_button = QPushButton()
        self.action_button.setToolTip("Switch between encrypting and decrypting")
        form.addRow("Action:", self.action_button)

        self.shift_spin = QSpinBox()
        self.shift_spin.setRange(-SHIFT_RANGE, SHIFT_RANGE)
        self.shift_spin.setValue(self.config.default_shift)
        form.addRow("Shift:", self.shift_spin)

        self.custom_alphabet_check = QCheckBox("Use custom alphabet")
        self.custom_alphabet_check.setChecked(bool(self.config.default_custom_alphabet))
        form.addRow(self.custom_alphabet_check)

        self.letter_slots = LetterSlotsWidget(self.config.default_custom_alphabet)
        self.letter_slots.setMaximumHeight(110)
        form.addRow(self.letter_slots)

        self.alphabet_label = QLabel()
        self.alphabet_label.setWordWrap(True)
        self.alphabet_label.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        form.addRow("Active alphabet:", self.alphabet_label)

        main_layout.addWidget(settings_group)

        # --- Message / Result ---
        main_layout.addWidget(QLabel("Message"))
        self.message_edit = QPlainTextEdit()
        self.message_edit.setPlaceholderText("Type the text to transform...")
        main_layout.addWidget(self.message_edit, 1)

        result_header = QHBoxLayout()
        result_label = QLabel("Result")
        result_label.setStyleSheet("font-weight: bold;")
        result_header.addWidget(result_label)
        result_header.addStretch(1)
        self.copied_label = QLabel("Copied!")
        self.copied_label.setVisible(False)
        result_header.addWidget(self.copied_label)
        self.copy_button = QPushButton("Copy")
        result_header.addWidget(self.copy_button)
        main_layout.addLayout(result_header)

        self.result_edit = ResultTextEdit()
        main_layout.addWidget(self.result_edit, 1)

        self.status_bar = QStatusBar(self)
        self.setStatusBar(self.status_bar)

        self._refresh_action_button()
        self._refresh_enabled_state()

    def _setup_menus(self):
        menubar = self.menuBar()
        file_menu = menubar.addMenu("&File")
        file_menu.addAction("&Quit", self.close, QKeySequence.StandardKey.Quit)
        edit_menu = menubar.addMenu("&Edit")
        edit_menu.addAction("&Copy Result", self.copy_result, QKeySequence("Ctrl+Shift+C"))
        edit_menu.addAction("Toggle &Action", self.toggle_action, QKeySequence("Ctrl+T"))
        edit_menu.addAction("C&lear Message", self.message_edit.clear)
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction("&About", self._show_about_dialog)

    def _connect_signals(self):
        self.algorithm_combo.currentIndexChanged.connect(self._on_settings_changed)
        self.action_button.clicked.connect(self.toggle_action)
        self.shift_spin.valueChanged.connect(self._on_settings_changed)
        self.custom_alphabet_check.toggled.connect(self._on_settings_changed)
        self.letter_slots.letters_changed.connect(self.recompute)
        self.message_edit.textChanged.connect(self.recompute)
        self.copy_button.clicked.connect(self.copy_result)
        self.copied_indicator.changed.connect(self.copied_label.setVisible)

    # --- Settings ---

    def current_settings(self) -> CipherSettings:
        """Snapshot of the form as it is right now."""
        return CipherSettings(
            algorithm=self.algorithm_combo.currentData(),
            action=self.action,
            shift=self.shift_spin.value(),
            use_custom_alphabet=self.custom_alphabet_check.isChecked(),
            custom_slots=self.letter_slots.get_slots(),
            message=self.message_edit.toPlainText(),
        )

    @Slot()
    def toggle_action(self):
        self.action = Action.DECRYPT if self.action is Action.ENCRYPT else Action.ENCRYPT
        logger.debug(f"Action toggled to {self.action.value}.")
        self._refresh_action_button()
        self.recompute()

    def _refresh_action_button(self):
        self.action_button.setText("Encrypt" if self.action is Action.ENCRYPT else "Decrypt")

    def _refresh_enabled_state(self):
        is_caesar = self.algorithm_combo.currentData() == Algorithm.CAESAR.value
        # Atbash is its own inverse; shift and direction do not apply
        self.shift_spin.setEnabled(is_caesar)
        self.action_button.setEnabled(is_caesar)
        self.letter_slots.setEnabled(self.custom_alphabet_check.isChecked())

    def _on_settings_changed(self, *_):
        self._refresh_enabled_state()
        self.recompute()

    # --- Result ---

    @Slot()
    def recompute(self):
        """Runs the resolver and engine on the current form state and shows the output."""
        try:
            result = compute_result(self.current_settings())
        except ValueError as e:
            logger.exception("Cipher settings rejected.")
            QMessageBox.warning(self, "Cipher Error", f"Could not apply cipher:\n{e}")
            return
        self.result_edit.setPlainText(result.output)
        self.alphabet_label.setText(format_alphabet(result.alphabet))
        self.status_bar.showMessage(f"{len(result.alphabet)} letters in alphabet, {len(result.output):,} characters", 0)

    @Slot()
    def copy_result(self):
        text = self.result_edit.toPlainText()
        if copy_text(text, fallback_widget=self.result_edit):
            self.copied_indicator.mark()
        else:
            self.status_bar.showMessage("Nothing to copy.", 3000)

    @Slot()
    def _show_about_dialog(self):
        from ... import __version__
        QMessageBox.about(self, "About CipherDesk",
                          f"<b>CipherDesk v{__version__}</b><br><br>"
                          "Caesar and Atbash ciphers over any alphabet.<br>"
                          "For learning only, not for protecting secrets.")
