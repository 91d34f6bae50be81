from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QWidget

from sgabout.domain.errors import MeasurementUnavailable
from sgabout.domain.interfaces import IHostInfo, IImageLoader, ITextMeasurer
from sgabout.services.about_text import build_about_block
from sgabout.services.config.app_config import AppConfig, build_app_config
from sgabout.services.grid_descriptor import parse_content, parse_grid
from sgabout.services.hit_tester import HitTester
from sgabout.services.host_info import HostInfo
from sgabout.services.layout_engine import LayoutEngine
from sgabout.services.ui.about import AboutDialog
from sgabout.services.ui.adapters import QtImageLoader, QtResourceLauncher, QtTextMeasurer
from sgabout.services.ui.ports.launcher import IResourceLauncher
from sgabout.services.ui.presenters.about_presenter import AboutPresenter
from sgabout.utils.constants import ABOUT_CONTENT, ABOUT_LAYOUT, ABOUT_MARGINS, DIALOG_TITLE, LOGO_IMAGE

logger = logging.getLogger(__name__)

FALLBACK_LINE_HEIGHT = 14


class Container:
    """
    Lightweight DI container:
      - Wires config, host info and the Qt adapters if not provided
      - Builds the layout engine from the [about] config section
      - Assembles presenter + dialog for the About box
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        host_info: IHostInfo | None = None,
        measurer: ITextMeasurer | None = None,
        launcher: IResourceLauncher | None = None,
        images: IImageLoader | None = None,
        engine: LayoutEngine | None = None,
        hit_tester: HitTester | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.host_info: IHostInfo = host_info or HostInfo.from_config(self.config)
        self.measurer: ITextMeasurer = measurer or QtTextMeasurer()
        self.launcher: IResourceLauncher = launcher or QtResourceLauncher()
        self.images: IImageLoader = images or QtImageLoader()
        self.layout_engine: LayoutEngine = engine or LayoutEngine(
            self.config.about_margin(), require_fill=self.config.strict_layout()
        )
        self.hit_tester: HitTester = hit_tester or HitTester(self.measurer)

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- factories ----------

    def _line_height(self) -> int:
        try:
            return self.measurer.line_height()
        except MeasurementUnavailable as e:
            logger.warning("using fallback line height %d: %s", FALLBACK_LINE_HEIGHT, e)
            return FALLBACK_LINE_HEIGHT

    def _text_font(self) -> QFont | None:
        """Font the measurer works with, so the text pane draws what was measured."""
        if not isinstance(self.measurer, QtTextMeasurer):
            return None
        try:
            return self.measurer.font()
        except MeasurementUnavailable as e:
            logger.warning("text pane keeps its widget font: %s", e)
            return None

    def build_about_presenter(self, *, year: int | None = None) -> AboutPresenter:
        block, links = build_about_block(
            self.host_info, self._line_height(), year=year or date.today().year
        )
        return AboutPresenter(
            engine=self.layout_engine,
            hit_tester=self.hit_tester,
            launcher=self.launcher,
            grid=parse_grid(*ABOUT_LAYOUT),
            cells=parse_content(ABOUT_CONTENT, ABOUT_MARGINS),
            block=block,
            links=links,
        )

    def build_about_dialog(
        self, parent: QWidget | None = None, *, year: int | None = None
    ) -> AboutDialog:
        title = self.config.get("about", "title", DIALOG_TITLE) or DIALOG_TITLE
        return AboutDialog(
            self.build_about_presenter(year=year),
            logo=self.images.load_image(LOGO_IMAGE),
            title=title,
            font=self._text_font(),
            parent=parent,
        )
