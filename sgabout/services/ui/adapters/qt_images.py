from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtGui import QPixmap

from sgabout.domain.interfaces import IImageLoader

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).resolve().parents[3] / "resources"


class QtImageLoader(IImageLoader):
    """Loads pixmaps from the package resources folder. Missing images come back null."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base = base_dir or RESOURCES_DIR

    def load_image(self, name: str) -> QPixmap:
        path = self._base / name
        if not path.exists():
            logger.warning("image not found: %s", path)
            return QPixmap()
        px = QPixmap(str(path))
        if px.isNull():
            logger.warning("Qt could not load image: %s", path)
        return px
