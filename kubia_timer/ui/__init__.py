"""Qt UI components for the timer application."""

from .dialog_helpers import format_stat, show_info, show_solve_summary
from .preferences import Preferences
from .timer_main_window import TimerMainWindow

__all__ = [
    "Preferences",
    "TimerMainWindow",
    "format_stat",
    "show_info",
    "show_solve_summary",
]
