"""Timing and statistics constants shared across UI and core layers."""

PRESS_START_INTERVAL_MS: int = 500
TICK_INTERVAL_MS: int = 10
PLUS_TWO_SECONDS: int = 2

MO3_WINDOW: int = 3
AO5_WINDOW: int = 5
AO12_WINDOW: int = 12

SCRAMBLE_LENGTH: int = 20
