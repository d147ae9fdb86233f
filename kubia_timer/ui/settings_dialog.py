"""Settings dialog for configuring Kubia Timer preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from kubia_timer.styling.color_palette import Theme
from kubia_timer.ui.preferences import Preferences

_RANDOM_SEED_VALUE = -1


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, parent=None, preferences: Preferences | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)

        self._preferences = preferences or Preferences()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Appearance group
        appearance_group = QGroupBox("Appearance")
        appearance_layout = QVBoxLayout()
        appearance_group.setLayout(appearance_layout)

        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel("Theme:"))
        theme_row.addStretch()
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.value, theme)
        self.theme_combo.setCurrentIndex(list(Theme).index(self._preferences.theme))
        theme_row.addWidget(self.theme_combo)
        appearance_layout.addLayout(theme_row)

        font_row = QHBoxLayout()
        font_label = QLabel("UI Font Size:")
        font_label.setToolTip("Font size for buttons, the solve list and statistics")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(8, 24)
        self.font_spinbox.setValue(self._preferences.ui_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        appearance_layout.addLayout(font_row)

        layout.addWidget(appearance_group)

        # Scramble group
        scramble_group = QGroupBox("Scrambles")
        scramble_layout = QHBoxLayout()
        scramble_group.setLayout(scramble_layout)

        seed_label = QLabel("Scramble seed:")
        seed_label.setToolTip("Fix the seed to replay the same scramble sequence.")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(_RANDOM_SEED_VALUE, 999_999)
        self.seed_spinbox.setSpecialValueText("Random")
        seed = self._preferences.scramble_seed
        self.seed_spinbox.setValue(_RANDOM_SEED_VALUE if seed is None else seed)
        scramble_layout.addWidget(seed_label)
        scramble_layout.addStretch()
        scramble_layout.addWidget(self.seed_spinbox)

        layout.addWidget(scramble_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_preferences(self) -> Preferences:
        """Get the preferences as edited in the dialog."""
        seed = self.seed_spinbox.value()
        return Preferences(
            theme=self.theme_combo.currentData(),
            ui_font_size=self.font_spinbox.value(),
            scramble_seed=None if seed == _RANDOM_SEED_VALUE else seed,
        )
