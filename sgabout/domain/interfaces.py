from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITextMeasurer(Protocol):
    """Font metrics of the text pane. Stateless; raises MeasurementUnavailable on failure."""

    def measure_width(self, text: str) -> int: ...
    def line_height(self) -> int: ...


class IImageLoader(Protocol):
    """Load a named image resource (the logo)."""

    def load_image(self, name: str) -> Any: ...


class IHostInfo(Protocol):
    """Display-only version strings. Never parsed."""

    @property
    def app_name(self) -> str: ...
    @property
    def app_version(self) -> str: ...
    @property
    def app_revision(self) -> str: ...
    @property
    def toolkit(self) -> str: ...
    @property
    def runtime(self) -> str: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
