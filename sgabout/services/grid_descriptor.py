"""
String descriptors for grids, in the compact form dialogs are declared with:

    columns/rows:  "preferred fill preferred"   (also "p", "f", or a pixel count)
    constraints:   "col, row[, hAlign, vAlign]"
                   "col1, row1, col2, row2[, hAlign, vAlign]"   (inclusive ranges)

Horizontal alignment letters are L/R/C/F, vertical ones T/B/C/F.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from sgabout.domain.errors import InvalidSpan
from sgabout.domain.models import Align, CellSpan, Fill, Fixed, GridSpec, Insets, Preferred, TrackSize

_H_ALIGN = {"L": Align.LEADING, "R": Align.TRAILING, "C": Align.CENTER, "F": Align.FILL}
_V_ALIGN = {"T": Align.LEADING, "B": Align.TRAILING, "C": Align.CENTER, "F": Align.FILL}


def parse_track(token: str) -> TrackSize:
    t = token.strip().lower()
    if t in ("preferred", "p"):
        return Preferred()
    if t in ("fill", "f"):
        return Fill()
    if t.isdigit():
        return Fixed(int(t))
    raise ValueError(f"unknown track size: {token!r}")


def parse_tracks(text: str) -> tuple[TrackSize, ...]:
    return tuple(parse_track(tok) for tok in text.split())


def parse_grid(columns: str, rows: str) -> GridSpec:
    return GridSpec(columns=parse_tracks(columns), rows=parse_tracks(rows))


def parse_constraint(component: str, key: str, margin: Insets | Iterable[int] | None = None) -> CellSpan:
    parts = [p.strip() for p in key.split(",") if p.strip()]
    numbers: list[int] = []
    while parts and parts[0].lstrip("-").isdigit():
        numbers.append(int(parts.pop(0)))

    if len(numbers) == 2:
        col, row = numbers
        col2, row2 = col, row
    elif len(numbers) == 4:
        col, row, col2, row2 = numbers
    else:
        raise InvalidSpan(f"{component!r}: expected 2 or 4 track indices in {key!r}")

    if col2 < col or row2 < row:
        raise InvalidSpan(f"{component!r}: reversed range in {key!r}")

    h_align = v_align = Align.FILL
    if parts:
        if len(parts) != 2:
            raise InvalidSpan(f"{component!r}: expected horizontal and vertical alignment in {key!r}")
        try:
            h_align = _H_ALIGN[parts[0].upper()]
            v_align = _V_ALIGN[parts[1].upper()]
        except KeyError:
            raise InvalidSpan(f"{component!r}: unknown alignment in {key!r}") from None

    return CellSpan(
        component=component,
        col=col,
        row=row,
        col_span=col2 - col + 1,
        row_span=row2 - row + 1,
        h_align=h_align,
        v_align=v_align,
        margin=Insets.of(margin),
    )


def parse_content(
    content: Mapping[str, str], margins: Mapping[str, Insets | Iterable[int]] | None = None
) -> list[CellSpan]:
    """Constraint key -> component id, in declaration order. Margins are keyed by component id."""
    margins = margins or {}
    return [parse_constraint(component, key, margins.get(component)) for key, component in content.items()]
