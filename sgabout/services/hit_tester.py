from __future__ import annotations

import logging

from sgabout.domain.errors import MeasurementUnavailable
from sgabout.domain.interfaces import ITextMeasurer
from sgabout.domain.models import Point, TextBlock

logger = logging.getLogger(__name__)


class HitTester:
    """
    Maps a pane-local point to the action of the text line under it.

    Lines sit on a fixed line-height grid. A line only counts as hit when the
    point is left of the end of its rendered glyph run, so trailing whitespace
    never triggers an action. Every failure mode is a miss (None).
    """

    def __init__(self, measurer: ITextMeasurer) -> None:
        self._measurer = measurer

    def line_at(self, block: TextBlock, local_point: Point) -> int | None:
        y = local_point.y - block.origin.y
        index = y // block.line_height
        if index < 0 or index >= block.line_count:
            return None
        return index

    def hit_test(self, block: TextBlock, local_point: Point) -> str | None:
        index = self.line_at(block, local_point)
        if index is None:
            return None
        line = block.lines[index]
        if line.action is None:
            return None

        x = local_point.x - block.origin.x
        if x < 0:
            return None
        try:
            width = self._measurer.measure_width(line.text)
        except MeasurementUnavailable as e:
            logger.debug("cannot measure line %d (%r): %s", index, line.text, e)
            return None
        return line.action if x < width else None
