from __future__ import annotations

import platform
from dataclasses import dataclass

from PyQt6.QtCore import QT_VERSION_STR

from sgabout.services.config.app_config import AppConfig
from sgabout.utils.constants import APP_NAME


@dataclass(frozen=True)
class HostInfo:
    """Version strings shown in the About text. Display only."""

    app_name: str
    app_version: str
    app_revision: str
    toolkit: str
    runtime: str

    @classmethod
    def from_config(cls, config: AppConfig) -> HostInfo:
        return cls(
            app_name=APP_NAME,
            app_version=config.get_version(),
            app_revision=config.get_revision(),
            toolkit=f"Qt {QT_VERSION_STR}",
            runtime=f"Python {platform.python_version()}",
        )
