"""Component for the central timer readout, penalty selector and averages."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kubia_timer.constants.ui_constants import (
    COMPACT_TIMER_MAX_WIDTH,
    LONG_SOLVE_SECONDS,
    PENALTY_BUTTON_DNF,
    PENALTY_BUTTON_OK,
    PENALTY_BUTTON_PLUS_TWO,
    STATS_FONT_SIZE_LARGE,
    STATS_FONT_SIZE_SMALL,
    STATS_PANEL_WIDTH,
    TIMER_FONT_SIZE_LARGE,
    TIMER_FONT_SIZE_SMALL,
)
from kubia_timer.core.models import Penalty
from kubia_timer.core.timer_manager import TimerManager
from kubia_timer.styling.color_palette import Theme
from kubia_timer.styling.styles import Styles
from kubia_timer.ui.dialog_helpers import format_stat


class PenaltySelector(QWidget):
    """Row of OK / +2 / DNF buttons for the most recent solve."""

    def __init__(self, on_penalty_selected: Callable[[Penalty], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setFixedWidth(STATS_PANEL_WIDTH)

        layout = QHBoxLayout()
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)
        self.setLayout(layout)

        self._buttons: dict[Penalty, QPushButton] = {}
        for label, penalty in (
            (PENALTY_BUTTON_OK, Penalty.NONE),
            (PENALTY_BUTTON_PLUS_TWO, Penalty.PLUS_TWO),
            (PENALTY_BUTTON_DNF, Penalty.DNF),
        ):
            button = QPushButton(label, self)
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _checked=False, p=penalty: on_penalty_selected(p))
            layout.addWidget(button, stretch=1)
            self._buttons[penalty] = button

    def refresh(self, selected: Penalty, theme: Theme) -> None:
        self.setStyleSheet(Styles.get_selector_container_style(theme))
        for penalty, button in self._buttons.items():
            button.setStyleSheet(Styles.get_penalty_button_style(theme, penalty is selected))


class TimerPanel(QWidget):
    """Shows the scramble, the live time and the running averages."""

    def __init__(
        self,
        timer_manager: TimerManager,
        on_penalty_selected: Callable[[Penalty], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.timer_manager = timer_manager
        self._theme = Theme.LIGHT

        self._build_ui(on_penalty_selected)

    def _build_ui(self, on_penalty_selected: Callable[[Penalty], None]) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(16)
        self.setLayout(layout)

        self.scramble_label = QLabel("", self)
        self.scramble_label.setAlignment(Qt.AlignCenter)
        self.scramble_label.setWordWrap(True)
        layout.addWidget(self.scramble_label)

        layout.addStretch(1)

        self.time_label = QLabel("", self)
        self.time_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.time_label)

        self.penalty_selector = PenaltySelector(on_penalty_selected, self)
        layout.addWidget(self.penalty_selector, alignment=Qt.AlignHCenter)

        self.stats_widget = QWidget(self)
        self.stats_widget.setFixedWidth(STATS_PANEL_WIDTH)
        stats_layout = QGridLayout()
        stats_layout.setHorizontalSpacing(8)
        self.stats_widget.setLayout(stats_layout)
        self.stat_name_labels: list[QLabel] = []
        self.stat_value_labels: list[QLabel] = []
        for row, name in enumerate(("Ao5", "Ao12")):
            name_label = QLabel(name, self.stats_widget)
            name_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            value_label = QLabel("", self.stats_widget)
            value_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
            stats_layout.addWidget(name_label, row, 0)
            stats_layout.addWidget(value_label, row, 1)
            self.stat_name_labels.append(name_label)
            self.stat_value_labels.append(value_label)
        layout.addWidget(self.stats_widget, alignment=Qt.AlignHCenter)

        layout.addStretch(1)

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self.scramble_label.setStyleSheet(Styles.get_dim_label_style(theme))

    def refresh(self) -> None:
        """Update every element from the timer state."""
        manager = self.timer_manager
        show_extras = not manager.hides_history()

        self.refresh_time()
        self.scramble_label.setText(manager.scramble)
        self.scramble_label.setVisible(show_extras)

        self.penalty_selector.setVisible(show_extras and manager.link_to_last_solve)
        self.penalty_selector.refresh(manager.solve_time.penalty, self._theme)

        self.stats_widget.setVisible(show_extras)
        session = manager.session
        self.stat_value_labels[0].setText(format_stat(session.last_ao5()))
        self.stat_value_labels[1].setText(format_stat(session.last_ao12()))
        stats_size = STATS_FONT_SIZE_SMALL if self._is_compact() else STATS_FONT_SIZE_LARGE
        for label in self.stat_name_labels + self.stat_value_labels:
            label.setStyleSheet(f"font-size: {stats_size}pt;")

    def refresh_time(self) -> None:
        """Update only the readout; called on every tick."""
        solve_time = self.timer_manager.solve_time
        recorded = solve_time.recorded_time()
        is_long = recorded is not None and recorded.total_seconds() > LONG_SOLVE_SECONDS
        font_size = TIMER_FONT_SIZE_SMALL if self._is_compact() or is_long else TIMER_FONT_SIZE_LARGE
        self.time_label.setText(solve_time.display())
        self.time_label.setStyleSheet(
            Styles.get_timer_label_style(self._theme, self.timer_manager.state, font_size)
        )

    def _is_compact(self) -> bool:
        return self.width() <= COMPACT_TIMER_MAX_WIDTH

    def resizeEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().resizeEvent(event)
        self.refresh()
