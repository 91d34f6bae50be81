from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from sgabout.domain.errors import LayoutError
from sgabout.domain.models import (
    CellSpan,
    ClickEvent,
    GridSpec,
    ResolvedLayout,
    Size,
    TextBlock,
)
from sgabout.services.hit_tester import HitTester
from sgabout.services.layout_engine import LayoutEngine
from sgabout.services.ui.ports.launcher import IResourceLauncher
from sgabout.utils.constants import TEXT

logger = logging.getLogger(__name__)


class AboutPresenter:
    """
    Qt-free coordinator for the About dialog.

    Owns the grid declaration, the current ResolvedLayout and the TextBlock.
    Grid errors surface here at construction; once built, nothing this class
    does at click or resize time raises into the dialog's event loop.
    """

    def __init__(
        self,
        *,
        engine: LayoutEngine,
        hit_tester: HitTester,
        launcher: IResourceLauncher,
        grid: GridSpec,
        cells: Iterable[CellSpan],
        block: TextBlock,
        links: Mapping[str, str],
        text_component: str = TEXT,
    ) -> None:
        self._engine = engine
        self._hit_tester = hit_tester
        self._launcher = launcher
        self.grid = grid
        self.cells = tuple(cells)
        self.block = block
        self.links = dict(links)
        self.text_component = text_component
        self._layout: ResolvedLayout | None = None

        # Validates spans (and Fill targets in strict mode) up front.
        self._engine.preferred_size(self.grid, self.cells, {})

    @property
    def layout(self) -> ResolvedLayout | None:
        return self._layout

    def preferred_size(self, measured_sizes: Mapping[str, Size]) -> Size:
        return self._engine.preferred_size(self.grid, self.cells, measured_sizes)

    def relayout(self, container_size: Size, measured_sizes: Mapping[str, Size]) -> ResolvedLayout | None:
        try:
            self._layout = self._engine.resolve(self.grid, container_size, self.cells, measured_sizes)
        except LayoutError:
            logger.exception("layout failed for %dx%d", container_size.width, container_size.height)
        return self._layout

    def handle_click(self, event: ClickEvent) -> str | None:
        """Open the URL of the clicked text line. Returns the URL, or None for no action."""
        if not event.is_click or self._layout is None:
            return None
        if self._layout.component_at(event.point) != self.text_component:
            return None

        local = self._layout[self.text_component].to_local(event.point)
        action = self._hit_tester.hit_test(self.block, local)
        if action is None:
            return None
        url = self.links.get(action)
        if url is None:
            logger.warning("no link registered for action %r", action)
            return None

        try:
            self._launcher.open_resource(url)
        except Exception:
            logger.exception("could not open %s", url)
            return None
        return url
