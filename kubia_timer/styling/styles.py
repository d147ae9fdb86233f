"""Centralized styles and font definitions for the application."""

from kubia_timer.core.timer_manager import Finished, Idle, Ready, TimerState

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 13) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}pt;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_FLAT_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: none;
                border-radius: 4px;
                padding: 4px 8px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QComboBox, QSpinBox, QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px 8px;
            }}
            QFrame[frameShape="4"], QFrame[frameShape="5"] {{
                color: {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QScrollBar {{
                width: 4px;
                height: 4px;
                margin: 4px;
            }}
        """

    @staticmethod
    def get_timer_color(theme: Theme, state: TimerState) -> str:
        """Readout color: held or finished in red, ready in green."""
        if state == Idle(pressed=True) or isinstance(state, Finished):
            return ColorPalette.TIMER_HELD.get(theme)
        if isinstance(state, Ready):
            return ColorPalette.TIMER_READY.get(theme)
        return ColorPalette.TEXT_PRIMARY.get(theme)

    @staticmethod
    def get_timer_label_style(theme: Theme, state: TimerState, font_size: int) -> str:
        return f"color: {Styles.get_timer_color(theme, state)}; font-size: {font_size}pt;"

    @staticmethod
    def get_penalty_button_style(theme: Theme, active: bool) -> str:
        if active:
            return (
                f"background-color: {ColorPalette.SELECTOR_ACTIVE_BG.get(theme)};"
                f" color: {ColorPalette.SELECTOR_ACTIVE_TEXT.get(theme)};"
            )
        return (
            f"background-color: {ColorPalette.SELECTOR_BG.get(theme)};"
            f" color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
        )

    @staticmethod
    def get_selector_container_style(theme: Theme) -> str:
        return (
            f"background-color: {ColorPalette.SELECTOR_BG.get(theme)};"
            " border-radius: 6px;"
        )

    @staticmethod
    def get_dim_label_style(theme: Theme) -> str:
        return f"color: {ColorPalette.TEXT_DIM.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 22pt; font-weight: bold;"
