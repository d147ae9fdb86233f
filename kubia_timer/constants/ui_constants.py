"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Kubia Timer"
DEFAULT_WINDOW_WIDTH: int = 800
DEFAULT_WINDOW_HEIGHT: int = 600
DEFAULT_TEXT_SIZE_PT: int = 13

COMPACT_LAYOUT_MAX_WIDTH: int = 600
COMPACT_TIMER_MAX_WIDTH: int = 450
SIDEBAR_WIDTH: int = 300
STATS_PANEL_WIDTH: int = 200

TIMER_FONT_SIZE_LARGE: int = 90
TIMER_FONT_SIZE_SMALL: int = 60
LONG_SOLVE_SECONDS: int = 600
STATS_FONT_SIZE_LARGE: int = 22
STATS_FONT_SIZE_SMALL: int = 15

EMPTY_STAT_TEXT: str = "--"
EMPTY_HISTORY_TITLE: str = "No Solves"
EMPTY_HISTORY_HINT: str = "Add solve by starting the timer."

PENALTY_BUTTON_OK: str = "OK"
PENALTY_BUTTON_PLUS_TWO: str = "+2"
PENALTY_BUTTON_DNF: str = "DNF"

HEADER_SETTINGS_BUTTON: str = "Settings"
HEADER_ABOUT_BUTTON: str = "About"
HEADER_HELP_BUTTON: str = "Help"
SOLVE_SUMMARY_TITLE_TEMPLATE: str = "Solve {number}"
