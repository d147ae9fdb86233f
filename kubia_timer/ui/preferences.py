"""In-memory user preferences for the timer window."""

from __future__ import annotations

from dataclasses import dataclass

from kubia_timer.constants.ui_constants import DEFAULT_TEXT_SIZE_PT
from kubia_timer.styling.color_palette import Theme


@dataclass(slots=True)
class Preferences:
    """Settings edited through the header bar and the settings dialog."""

    theme: Theme = Theme.LIGHT
    ui_font_size: int = DEFAULT_TEXT_SIZE_PT
    scramble_seed: int | None = None
