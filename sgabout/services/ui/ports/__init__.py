from __future__ import annotations

from .launcher import IResourceLauncher

__all__ = ["IResourceLauncher"]
