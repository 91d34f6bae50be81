from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, Flag, auto

from sgabout.domain.errors import InvalidSpan

# ---------- geometry ----------


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in container-local pixels."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, p: Point) -> bool:
        # Half-open so that adjacent rects never both claim an edge pixel.
        return self.x <= p.x < self.right and self.y <= p.y < self.bottom

    def to_local(self, p: Point) -> Point:
        return Point(p.x - self.x, p.y - self.y)


@dataclass(frozen=True)
class Insets:
    """
    Per-component margin in CSS order (top, right, bottom, left).

    Values may be negative, letting a component reach past its cell edge.
    """

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def of(cls, value: Insets | Iterable[int] | int | None) -> Insets:
        if value is None:
            return cls()
        if isinstance(value, Insets):
            return value
        if isinstance(value, int):
            return cls(value, value, value, value)
        values = tuple(value)
        if len(values) != 4:
            raise ValueError(f"insets need 4 values (top, right, bottom, left), got {values!r}")
        return cls(*values)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


# ---------- grid declaration ----------


class TrackSize:
    """Sizing mode of a single row or column."""

    __slots__ = ()


@dataclass(frozen=True)
class Fixed(TrackSize):
    px: int

    def __post_init__(self) -> None:
        if self.px < 0:
            raise ValueError(f"Fixed track size must be >= 0, got {self.px}")


@dataclass(frozen=True)
class Preferred(TrackSize):
    pass


@dataclass(frozen=True)
class Fill(TrackSize):
    pass


@dataclass(frozen=True)
class GridSpec:
    """Column and row track sizes, in declaration order."""

    columns: tuple[TrackSize, ...]
    rows: tuple[TrackSize, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(self.rows))
        if not self.columns or not self.rows:
            raise ValueError("GridSpec needs at least one column and one row")
        for t in (*self.columns, *self.rows):
            if not isinstance(t, TrackSize):
                raise TypeError(f"not a track size: {t!r}")

    def check_span(self, cell: CellSpan) -> None:
        """Raise InvalidSpan unless the cell lies inside this grid."""
        if cell.col + cell.col_span > len(self.columns):
            raise InvalidSpan(
                f"{cell.component!r}: columns {cell.col}..{cell.col + cell.col_span - 1} "
                f"outside grid of {len(self.columns)} columns"
            )
        if cell.row + cell.row_span > len(self.rows):
            raise InvalidSpan(
                f"{cell.component!r}: rows {cell.row}..{cell.row + cell.row_span - 1} "
                f"outside grid of {len(self.rows)} rows"
            )


class Align(Enum):
    LEADING = auto()
    TRAILING = auto()
    CENTER = auto()
    FILL = auto()


@dataclass(frozen=True)
class CellSpan:
    """Placement of one component over a rectangular block of tracks."""

    component: str
    col: int
    row: int
    col_span: int = 1
    row_span: int = 1
    h_align: Align = Align.FILL
    v_align: Align = Align.FILL
    margin: Insets = Insets()

    def __post_init__(self) -> None:
        object.__setattr__(self, "margin", Insets.of(self.margin))
        if self.col < 0 or self.row < 0:
            raise InvalidSpan(f"{self.component!r}: negative track index ({self.col}, {self.row})")
        if self.col_span < 1 or self.row_span < 1:
            raise InvalidSpan(
                f"{self.component!r}: span must cover at least one track "
                f"({self.col_span}x{self.row_span})"
            )


# ---------- resolved layout ----------


@dataclass(frozen=True)
class ResolvedLayout:
    """Component rectangles in declaration order. Immutable once computed."""

    entries: tuple[tuple[str, Rect], ...] = ()
    _index: Mapping[str, Rect] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "_index", dict(self.entries))

    def __getitem__(self, component: str) -> Rect:
        return self._index[component]

    def __contains__(self, component: object) -> bool:
        return component in self._index

    def __iter__(self) -> Iterator[str]:
        return (c for c, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, component: str, default: Rect | None = None) -> Rect | None:
        return self._index.get(component, default)

    def items(self) -> list[tuple[str, Rect]]:
        return list(self.entries)

    def component_at(self, p: Point) -> str | None:
        """Last-declared component whose rectangle contains the point."""
        for component, rect in reversed(self.entries):
            if rect.contains(p):
                return component
        return None


# ---------- text ----------


@dataclass(frozen=True)
class TextLine:
    text: str
    action: str | None = None


@dataclass(frozen=True)
class TextBlock:
    """Lines of single-style text laid out on a fixed line-height grid."""

    lines: tuple[TextLine, ...]
    line_height: int
    origin: Point = Point(0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        if self.line_height <= 0:
            raise ValueError(f"line_height must be > 0, got {self.line_height}")

    @classmethod
    def from_text(
        cls,
        text: str,
        line_height: int,
        actions: Mapping[int, str] | None = None,
        origin: Point = Point(0, 0),
    ) -> TextBlock:
        actions = actions or {}
        lines = text.split("\n")
        # A trailing newline terminates the last line rather than opening a new one.
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls(
            lines=tuple(TextLine(t, actions.get(i)) for i, t in enumerate(lines)),
            line_height=line_height,
            origin=origin,
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def height(self) -> int:
        return self.line_count * self.line_height

    def texts(self) -> Iterable[str]:
        return (ln.text for ln in self.lines)


# ---------- pointer events ----------


class Modifier(Flag):
    NONE = 0
    CLICK = auto()
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    META = auto()


@dataclass(frozen=True)
class ClickEvent:
    point: Point
    modifiers: Modifier = Modifier.NONE

    @property
    def is_click(self) -> bool:
        return bool(self.modifiers & Modifier.CLICK)
