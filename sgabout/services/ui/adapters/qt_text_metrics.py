from __future__ import annotations

from PyQt6.QtGui import QFont, QFontMetrics
from PyQt6.QtWidgets import QApplication

from sgabout.domain.errors import MeasurementUnavailable
from sgabout.domain.interfaces import ITextMeasurer


class QtTextMeasurer(ITextMeasurer):
    """
    QFontMetrics-backed measurer. Uses the application font unless one is given.

    Widgets that draw measured text should paint with font() so hit widths
    match the glyphs on screen.
    """

    def __init__(self, font: QFont | None = None) -> None:
        self._font = font

    def font(self) -> QFont:
        if QApplication.instance() is None:
            raise MeasurementUnavailable("no QApplication; font metrics need a running GUI")
        return QFont(self._font) if self._font is not None else QApplication.font()

    def _metrics(self) -> QFontMetrics:
        return QFontMetrics(self.font())

    def measure_width(self, text: str) -> int:
        return self._metrics().horizontalAdvance(text)

    def line_height(self) -> int:
        return self._metrics().height()
