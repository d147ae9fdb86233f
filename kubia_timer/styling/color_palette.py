"""Color palette for Kubia Timer supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    """Application theme options."""
    LIGHT = "Light"
    DARK = "Dark"


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#1C1C1C",
        dark="#F5F5F5"
    )

    TEXT_DIM = ThemeColors(
        light="#7A7A7A",
        dark="#9A9A9A"
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F3F3F3",
        dark="#2A2A2A"
    )

    # Timer readout
    TIMER_HELD = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"
    )

    TIMER_READY = ThemeColors(
        light="#107C10",      # Green
        dark="#6FCF6F"
    )

    # Borders / rules
    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",
        dark="#444444"
    )

    # Buttons
    BUTTON_FLAT_BG = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",
        dark="#3A3A3A"
    )

    # Penalty selector
    SELECTOR_BG = ThemeColors(
        light="#E8E8E8",
        dark="#333333"
    )

    SELECTOR_ACTIVE_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"
    )

    SELECTOR_ACTIVE_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )
