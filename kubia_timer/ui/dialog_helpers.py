"""Helper functions for common dialog patterns in the timer UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from kubia_timer.constants.ui_constants import EMPTY_STAT_TEXT, SOLVE_SUMMARY_TITLE_TEMPLATE
from kubia_timer.core.models import SessionEntry, SolveTime


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def format_stat(value: SolveTime | None) -> str:
    """Render an optional statistic, using a placeholder when absent."""
    return EMPTY_STAT_TEXT if value is None else value.display()


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_solve_summary(parent: QWidget, index: int, entry: SessionEntry) -> None:
    """Show the details of one session entry.

    Args:
        parent: Parent widget for the dialog
        index: Zero-based index of the entry in the session
        entry: The entry to describe
    """
    solve = entry.solve
    details = (
        f"Time: {solve.time.display()}\n"
        f"Recorded at: {solve.timestamp.strftime('%Y-%m-%d %H:%M:%S')}\n"
        f"Scramble: {solve.scramble or EMPTY_STAT_TEXT}\n\n"
        f"Mo3: {format_stat(entry.mo3)}\n"
        f"Ao5: {format_stat(entry.ao5)}\n"
        f"Ao12: {format_stat(entry.ao12)}"
    )
    show_info(parent, SOLVE_SUMMARY_TITLE_TEMPLATE.format(number=index + 1), details)
