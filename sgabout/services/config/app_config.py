from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from sgabout.domain.interfaces import IAppConfig
from sgabout.services.config.ini_config_service import IniConfigService

# "v2.0.030", "2.0", "2.0.30-beta": major.minor, then the optional revision
_VERSION_RE = re.compile(r"^v?(\d+\.\d+)(?:\.(\d+))?(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Project root, also under PyInstaller (sys._MEIPASS is the bundle root).
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # sgabout/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> tuple[str, str | None] | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1), m.group(2)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and reads version/revision from <root>/version.

    Precedence for version and revision:
      1) <project_root>/version file (e.g. v2.0.030 -> version "2.0", revision "030")
      2) [app] version / revision from the ini
      3) "0.0" / "0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        from_file = _read_version_file(self.project_root / "version")
        if from_file:
            return from_file[0]

        v = (self.ini.app_version() or "").strip()
        if v:
            m = _VERSION_RE.match(v)
            return m.group(1) if m else v
        return "0.0"

    def get_revision(self) -> str:
        from_file = _read_version_file(self.project_root / "version")
        if from_file and from_file[1] is not None:
            return from_file[1]

        m = _VERSION_RE.match((self.ini.app_version() or "").strip())
        if m and m.group(2) is not None:
            return m.group(2)
        return self.ini.app_revision() or "0"

    # ---- delegate IniConfigService ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    def about_margin(self) -> int:
        return self.ini.about_margin()

    def strict_layout(self) -> bool:
        return self.ini.strict_layout()

    def log_level(self) -> str:
        return self.ini.log_level()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
