"""Qt main window hosting the timer, its history and the header bar."""

from __future__ import annotations

import logging
import time

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QBoxLayout,
    QComboBox,
    QFrame,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kubia_timer.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from kubia_timer.constants.timer_constants import TICK_INTERVAL_MS
from kubia_timer.constants.ui_constants import (
    COMPACT_LAYOUT_MAX_WIDTH,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    HEADER_ABOUT_BUTTON,
    HEADER_HELP_BUTTON,
    HEADER_SETTINGS_BUTTON,
    WINDOW_TITLE,
)
from kubia_timer.core.models import Penalty
from kubia_timer.core.timer_manager import TimerManager, Timing
from kubia_timer.styling.color_palette import Theme
from kubia_timer.styling.styles import Styles
from kubia_timer.ui.components.history_panel import HistoryPanel
from kubia_timer.ui.components.timer_panel import TimerPanel
from kubia_timer.ui.dialog_helpers import show_info, show_solve_summary
from kubia_timer.ui.preferences import Preferences
from kubia_timer.ui.qt_scheduler import QtTimeoutScheduler
from kubia_timer.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class TimerMainWindow(QMainWindow):
    """Main Qt window routing keyboard and clock events into the timer."""

    def __init__(self, timer_manager: TimerManager | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.preferences = Preferences()
        self.timer_manager = timer_manager or TimerManager(
            scheduler=QtTimeoutScheduler(self), clock=time.monotonic
        )
        self._compact: bool | None = None

        self._build_ui()
        self._configure_tick_timer()
        self._apply_styles()
        self.timer_manager.add_state_listener(lambda _state: self._sync_view())
        self._apply_layout()
        self._sync_view()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)
        central_widget.setLayout(root_layout)

        self._build_header_bar(root_layout)
        root_layout.addWidget(self._make_rule(QFrame.HLine))

        self.content_layout = QBoxLayout(QBoxLayout.LeftToRight)
        self.content_layout.setSpacing(0)

        self.history_panel = HistoryPanel(
            self.timer_manager.session,
            on_solve_selected=self._handle_solve_selected,
            parent=self,
        )
        self.content_rule = self._make_rule(QFrame.VLine)
        self.timer_panel = TimerPanel(
            self.timer_manager,
            on_penalty_selected=self._handle_penalty_selected,
            parent=self,
        )

        self.content_layout.addWidget(self.history_panel)
        self.content_layout.addWidget(self.content_rule)
        self.content_layout.addWidget(self.timer_panel, stretch=1)
        root_layout.addLayout(self.content_layout, stretch=1)

    def _build_header_bar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.setContentsMargins(4, 4, 4, 4)
        button_row.setSpacing(4)

        self.theme_combo = QComboBox(self)
        for theme in Theme:
            self.theme_combo.addItem(theme.value, theme)
        self.theme_combo.setFocusPolicy(Qt.NoFocus)
        self.theme_combo.currentIndexChanged.connect(self._handle_theme_selected)
        button_row.addWidget(self.theme_combo)
        button_row.addStretch()

        self.help_button = QPushButton(HEADER_HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(HEADER_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.settings_button = QPushButton(HEADER_SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        for button in (self.help_button, self.about_button, self.settings_button):
            button.setFocusPolicy(Qt.NoFocus)

        self.header_bar = QWidget(self)
        self.header_bar.setLayout(button_row)
        layout.addWidget(self.header_bar)

    def _make_rule(self, shape: QFrame.Shape) -> QFrame:
        rule = QFrame(self)
        rule.setFrameShape(shape)
        rule.setFrameShadow(QFrame.Plain)
        return rule

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.setTimerType(Qt.PreciseTimer)
        self.tick_timer.timeout.connect(self._handle_tick)

    # --- Event routing ---

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802 - Qt override
        if event.key() == Qt.Key_Space:
            if not event.isAutoRepeat():
                self.timer_manager.on_press()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:  # noqa: N802 - Qt override
        if event.key() == Qt.Key_Space:
            if not event.isAutoRepeat():
                self.timer_manager.on_release()
            return
        super().keyReleaseEvent(event)

    def _handle_tick(self) -> None:
        self.timer_manager.on_tick(time.monotonic())
        self.timer_panel.refresh_time()

    def _handle_penalty_selected(self, penalty: Penalty) -> None:
        self.timer_manager.on_penalty_selected(penalty)
        self._sync_view()

    def _handle_solve_selected(self, index: int) -> None:
        entry = self.timer_manager.session.get_entry(index)
        if entry is None:
            return
        show_solve_summary(self, index, entry)

    def _sync_view(self) -> None:
        """Bring timers and widgets in line with the timer state."""
        timing = isinstance(self.timer_manager.state, Timing)
        if timing and not self.tick_timer.isActive():
            self.tick_timer.start()
        elif not timing and self.tick_timer.isActive():
            self.tick_timer.stop()

        show_history = not self.timer_manager.hides_history()
        self.history_panel.setVisible(show_history)
        self.content_rule.setVisible(show_history)
        self.history_panel.refresh()
        self.timer_panel.refresh()

    # --- Layout ---

    def resizeEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().resizeEvent(event)
        self._apply_layout()

    def _apply_layout(self) -> None:
        compact = self.width() <= COMPACT_LAYOUT_MAX_WIDTH
        if compact == self._compact:
            return
        self._compact = compact
        if compact:
            self.content_layout.setDirection(QBoxLayout.BottomToTop)
            self.content_rule.setFrameShape(QFrame.HLine)
        else:
            self.content_layout.setDirection(QBoxLayout.LeftToRight)
            self.content_rule.setFrameShape(QFrame.VLine)
        self.history_panel.set_compact(compact)

    # --- Header actions ---

    def _handle_theme_selected(self, index: int) -> None:
        theme = self.theme_combo.itemData(index)
        if theme is None or theme == self.preferences.theme:
            return
        self.preferences.theme = theme
        self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self.preferences)
        if dialog.exec():
            previous_seed = self.preferences.scramble_seed
            self.preferences = dialog.get_preferences()
            if self.preferences.scramble_seed != previous_seed:
                self.timer_manager.set_scramble_seed(self.preferences.scramble_seed)
            logger.info("Preferences updated: %s", self.preferences)
            self._apply_styles()

    def _apply_styles(self) -> None:
        theme = self.preferences.theme
        self.setStyleSheet(Styles.get_main_window_style(theme, self.preferences.ui_font_size))

        self.theme_combo.blockSignals(True)
        self.theme_combo.setCurrentIndex(list(Theme).index(theme))
        self.theme_combo.blockSignals(False)

        self.timer_panel.set_theme(theme)
        self.history_panel.set_theme(theme)
        self.history_panel.refresh(force=True)
        self.timer_panel.refresh()
