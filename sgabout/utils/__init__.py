"""App constants and utilities."""

from .constants import (
    ABOUT_CONTENT,
    ABOUT_LAYOUT,
    ABOUT_MARGINS,
    APP_NAME,
    APP_ORG,
    DEFAULT_MARGIN,
    DIALOG_TITLE,
    LINKS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DIALOG_TITLE",
    "LINKS",
    "ABOUT_LAYOUT",
    "ABOUT_CONTENT",
    "ABOUT_MARGINS",
    "DEFAULT_MARGIN",
]
