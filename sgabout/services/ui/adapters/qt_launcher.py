from __future__ import annotations

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices

from sgabout.services.ui.ports.launcher import IResourceLauncher

logger = logging.getLogger(__name__)


class QtResourceLauncher(IResourceLauncher):
    """Opens URLs with the desktop's default handler."""

    def open_resource(self, url: str) -> None:
        logger.info("opening %s", url)
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning("desktop refused to open %s", url)
