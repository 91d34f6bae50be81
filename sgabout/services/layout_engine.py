from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from sgabout.domain.errors import NoFillTarget
from sgabout.domain.models import (
    Align,
    CellSpan,
    Fill,
    Fixed,
    GridSpec,
    Preferred,
    Rect,
    ResolvedLayout,
    Size,
    TrackSize,
)

logger = logging.getLogger(__name__)

_ZERO = Size(0, 0)

# (first track, track count, preferred extent) of one component on one axis
_Placement = tuple[int, int, int]


class LayoutEngine:
    """
    Resolves a GridSpec into pixel rectangles for a container of a given size.

    Fixed tracks take their literal size, Preferred tracks the largest preferred
    extent of the components that sit entirely inside them, and Fill tracks share
    whatever is left (floored, remainder to the last Fill track). Tracks are laid
    end to end with no spacing; the margin is applied once at the container edges.
    A component's own margin insets its span before alignment and counts toward
    Preferred track sizes; negative values let it overhang the span.

    Stateless: one engine can serve any number of dialogs.
    """

    def __init__(self, margin: int = 0, *, require_fill: bool = False) -> None:
        if margin < 0:
            raise ValueError(f"margin must be >= 0, got {margin}")
        self.margin = margin
        self.require_fill = require_fill

    # ----------------------------- public API -----------------------------

    def resolve(
        self,
        grid: GridSpec,
        container_size: Size,
        cells: Iterable[CellSpan],
        measured_sizes: Mapping[str, Size],
    ) -> ResolvedLayout:
        cells = self._checked(grid, cells)
        prefs = [measured_sizes.get(c.component, _ZERO) for c in cells]

        widths = self._resolve_axis(
            grid.columns,
            container_size.width,
            [(c.col, c.col_span, p.width + c.margin.horizontal) for c, p in zip(cells, prefs)],
            "horizontal",
        )
        heights = self._resolve_axis(
            grid.rows,
            container_size.height,
            [(c.row, c.row_span, p.height + c.margin.vertical) for c, p in zip(cells, prefs)],
            "vertical",
        )
        xs = self._offsets(widths)
        ys = self._offsets(heights)

        entries = []
        for c, p in zip(cells, prefs):
            m = c.margin
            x, w = _place(
                xs[c.col], sum(widths[c.col : c.col + c.col_span]), p.width, c.h_align, m.left, m.right
            )
            y, h = _place(
                ys[c.row], sum(heights[c.row : c.row + c.row_span]), p.height, c.v_align, m.top, m.bottom
            )
            entries.append((c.component, Rect(x, y, w, h)))
        return ResolvedLayout(tuple(entries))

    def preferred_size(
        self,
        grid: GridSpec,
        cells: Iterable[CellSpan],
        measured_sizes: Mapping[str, Size],
    ) -> Size:
        """
        Smallest container in which every component gets at least its preferred
        size, assuming Fill tracks grow evenly to make room for spanning components.
        """
        cells = self._checked(grid, cells)
        prefs = [measured_sizes.get(c.component, _ZERO) for c in cells]
        width = self._natural_extent(
            grid.columns,
            [(c.col, c.col_span, p.width + c.margin.horizontal) for c, p in zip(cells, prefs)],
            "horizontal",
        )
        height = self._natural_extent(
            grid.rows,
            [(c.row, c.row_span, p.height + c.margin.vertical) for c, p in zip(cells, prefs)],
            "vertical",
        )
        return Size(width + 2 * self.margin, height + 2 * self.margin)

    # ----------------------------- internals -----------------------------

    @staticmethod
    def _checked(grid: GridSpec, cells: Iterable[CellSpan]) -> list[CellSpan]:
        cells = list(cells)
        for c in cells:
            grid.check_span(c)
        return cells

    def _fixed_and_preferred(
        self, tracks: Sequence[TrackSize], placements: Sequence[_Placement], axis: str
    ) -> tuple[list[int], list[int]]:
        """Sizes of non-Fill tracks (Fill left at 0) and the indices of Fill tracks."""
        sizes = [0] * len(tracks)
        fills: list[int] = []
        for i, t in enumerate(tracks):
            if isinstance(t, Fixed):
                sizes[i] = t.px
            elif isinstance(t, Preferred):
                sizes[i] = max(
                    (max(p, 0) for start, span, p in placements if start == i and span == 1),
                    default=0,
                )
            elif isinstance(t, Fill):
                fills.append(i)
        if self.require_fill and not fills:
            raise NoFillTarget(axis)
        return sizes, fills

    def _resolve_axis(
        self,
        tracks: Sequence[TrackSize],
        extent: int,
        placements: Sequence[_Placement],
        axis: str,
    ) -> list[int]:
        sizes, fills = self._fixed_and_preferred(tracks, placements, axis)
        if fills:
            leftover = extent - 2 * self.margin - sum(sizes)
            if leftover < 0:
                logger.debug("%s overflow of %dpx; Fill tracks collapse to 0", axis, -leftover)
                leftover = 0
            share, remainder = divmod(leftover, len(fills))
            for i in fills:
                sizes[i] = share
            sizes[fills[-1]] += remainder
        return sizes

    def _natural_extent(
        self, tracks: Sequence[TrackSize], placements: Sequence[_Placement], axis: str
    ) -> int:
        sizes, fills = self._fixed_and_preferred(tracks, placements, axis)
        fill_size = 0
        for start, span, p in placements:
            covered = range(start, start + span)
            n_fill = sum(1 for i in covered if i in fills)
            if not n_fill:
                continue
            need = p - sum(sizes[i] for i in covered)
            fill_size = max(fill_size, -(-need // n_fill))
        return sum(sizes) + fill_size * len(fills)

    def _offsets(self, sizes: Sequence[int]) -> list[int]:
        offsets = []
        pos = self.margin
        for s in sizes:
            offsets.append(pos)
            pos += s
        return offsets


def _place(
    start: int, span: int, preferred: int, align: Align, lead: int = 0, trail: int = 0
) -> tuple[int, int]:
    """Position and extent of a component inside its span on one axis, after insetting by its margin."""
    start += lead
    span = max(span - lead - trail, 0)
    if align is Align.FILL:
        return start, span
    size = min(max(preferred, 0), span)
    if align is Align.TRAILING:
        return start + span - size, size
    if align is Align.CENTER:
        return start + (span - size) // 2, size
    return start, size
