"""Component listing the solves of the session."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from kubia_timer.constants.ui_constants import EMPTY_HISTORY_HINT, EMPTY_HISTORY_TITLE, SIDEBAR_WIDTH
from kubia_timer.core.services.session import Session
from kubia_timer.styling.color_palette import Theme
from kubia_timer.styling.styles import Styles
from kubia_timer.ui.dialog_helpers import format_stat

_QWIDGETSIZE_MAX = 16_777_215


class HistoryPanel(QWidget):
    """Sidebar (newest first, with ao5/ao12) or compact bottom bar of times."""

    def __init__(
        self,
        session: Session,
        on_solve_selected: Callable[[int], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_solve_selected = on_solve_selected
        self._compact = False
        self._snapshot: tuple | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFocusPolicy(Qt.NoFocus)
        layout.addWidget(self.scroll_area, stretch=1)

        self.empty_widget = QWidget(self)
        empty_layout = QVBoxLayout()
        self.empty_widget.setLayout(empty_layout)
        empty_layout.addStretch()
        self.empty_title = QLabel(EMPTY_HISTORY_TITLE, self.empty_widget)
        self.empty_title.setAlignment(Qt.AlignCenter)
        self.empty_title.setStyleSheet(Styles.get_large_label_style())
        empty_layout.addWidget(self.empty_title)
        self.empty_hint = QLabel(EMPTY_HISTORY_HINT, self.empty_widget)
        self.empty_hint.setAlignment(Qt.AlignCenter)
        empty_layout.addWidget(self.empty_hint)
        empty_layout.addStretch()
        layout.addWidget(self.empty_widget, stretch=1)

    def set_compact(self, compact: bool) -> None:
        if compact == self._compact:
            return
        self._compact = compact
        self.refresh(force=True)

    def set_theme(self, theme: Theme) -> None:
        self.empty_hint.setStyleSheet(Styles.get_dim_label_style(theme))

    def refresh(self, force: bool = False) -> None:
        """Rebuild the list when the session changed since the last refresh."""
        snapshot = tuple(entry.solve.time for entry in self.session)
        if not force and snapshot == self._snapshot:
            return
        self._snapshot = snapshot

        has_solves = bool(snapshot)
        self.empty_widget.setVisible(not has_solves and not self._compact)
        self.scroll_area.setVisible(has_solves or self._compact)
        if self._compact:
            self.setMaximumWidth(_QWIDGETSIZE_MAX)
            self.setMinimumWidth(0)
            self.setFixedHeight(56)
            self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
            self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        else:
            self.setMinimumHeight(0)
            self.setMaximumHeight(_QWIDGETSIZE_MAX)
            self.setFixedWidth(SIDEBAR_WIDTH)
            self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
            self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.scroll_area.setWidget(self._build_rows())

    def _build_rows(self) -> QWidget:
        container = QWidget()
        direction = QBoxLayout.LeftToRight if self._compact else QBoxLayout.TopToBottom
        layout = QBoxLayout(direction)
        layout.setSpacing(4)
        layout.setContentsMargins(8, 4, 8, 4)
        container.setLayout(layout)

        entries = list(enumerate(self.session))
        if not self._compact:
            entries.reverse()
        for index, entry in entries:
            if self._compact:
                button = QPushButton(entry.solve.time.display(), container)
            else:
                button = QPushButton(container)
                row = QHBoxLayout()
                row.setContentsMargins(8, 4, 8, 4)
                row.setSpacing(4)
                for text in (entry.solve.time.display(), format_stat(entry.ao5), format_stat(entry.ao12)):
                    cell = QLabel(text, button)
                    cell.setAlignment(Qt.AlignCenter)
                    cell.setAttribute(Qt.WA_TransparentForMouseEvents, True)
                    cell.setStyleSheet("background: transparent;")
                    row.addWidget(cell, stretch=1)
                button.setLayout(row)
                button.setMinimumHeight(32)
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _checked=False, i=index: self.on_solve_selected(i))
            layout.addWidget(button)
        layout.addStretch()
        return container
