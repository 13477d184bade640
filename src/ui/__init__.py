"""Unit Converter UI Package."""

from .shell import ConverterShell, MENU_CATEGORIES

__all__ = [
    "ConverterShell",
    "MENU_CATEGORIES",
]
