"""Domain layer: layout/text value objects, error kinds and collaborator interfaces."""

from .errors import (
    InvalidSpan,
    LayoutError,
    MeasurementUnavailable,
    NoFillTarget,
    OutOfBoundsClick,
)
from .interfaces import IAppConfig, IConfigService, IHostInfo, IImageLoader, ITextMeasurer
from .models import (
    Align,
    CellSpan,
    ClickEvent,
    Fill,
    Fixed,
    GridSpec,
    Insets,
    Modifier,
    Point,
    Preferred,
    Rect,
    ResolvedLayout,
    Size,
    TextBlock,
    TextLine,
    TrackSize,
)

__all__ = [
    "Align",
    "CellSpan",
    "ClickEvent",
    "Fill",
    "Fixed",
    "GridSpec",
    "Insets",
    "Modifier",
    "Point",
    "Preferred",
    "Rect",
    "ResolvedLayout",
    "Size",
    "TextBlock",
    "TextLine",
    "TrackSize",
    "LayoutError",
    "InvalidSpan",
    "NoFillTarget",
    "MeasurementUnavailable",
    "OutOfBoundsClick",
    "ITextMeasurer",
    "IImageLoader",
    "IHostInfo",
    "IConfigService",
    "IAppConfig",
]
