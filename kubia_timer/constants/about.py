"""Static metadata describing Kubia Timer."""

APP_NAME = "Kubia Timer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Kubia Timer is a speed-cubing practice timer built with Qt. "
    "It records every attempt of the current session and keeps rolling "
    "mean-of-3, average-of-5 and average-of-12 statistics."
)

HELP_TEXT = (
    "Hold the space bar until the time turns green, then release to start the timer. "
    "Press the space bar again to stop it.\n\n"
    "After a solve, use OK / +2 / DNF to correct the penalty of the last attempt. "
    "Averages of 5 and 12 drop the best and worst attempt; a single DNF is tolerated, "
    "two DNFs make the average a DNF."
)
