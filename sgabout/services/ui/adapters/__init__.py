from __future__ import annotations

from .qt_images import QtImageLoader
from .qt_launcher import QtResourceLauncher
from .qt_text_metrics import QtTextMeasurer

__all__ = [
    "QtImageLoader",
    "QtResourceLauncher",
    "QtTextMeasurer",
]
