from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IResourceLauncher(Protocol):
    """
    Abstract UI port for handing a URL to the desktop. Fire-and-forget:
    callers never look at the outcome.
    """

    def open_resource(self, url: str) -> None: ...
