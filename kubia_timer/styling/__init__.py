"""Styling module for Kubia Timer."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
