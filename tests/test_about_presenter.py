from __future__ import annotations

import pytest

from conftest import FakeLauncher, FakeMeasurer
from sgabout.domain.errors import InvalidSpan, LayoutError, NoFillTarget
from sgabout.domain.models import (
    CellSpan,
    ClickEvent,
    Fixed,
    GridSpec,
    Modifier,
    Point,
    Rect,
    Size,
    TextBlock,
    TextLine,
)
from sgabout.services.about_text import build_about_block
from sgabout.services.grid_descriptor import parse_content, parse_grid
from sgabout.services.hit_tester import HitTester
from sgabout.services.layout_engine import LayoutEngine
from sgabout.services.ui.presenters.about_presenter import AboutPresenter
from sgabout.utils.constants import ABOUT_CONTENT, ABOUT_LAYOUT, AUTHOR_URL, SITE_URL

MEASURED = {"logo": Size(40, 40), "text": Size(200, 148), "ok": Size(60, 24)}
CLICK = Modifier.CLICK


def _presenter(host, launcher, *, engine=None, cells=None, block=None, links=None) -> AboutPresenter:
    default_block, default_links = build_about_block(host, 14, year=2026)
    return AboutPresenter(
        engine=engine or LayoutEngine(margin=8),
        hit_tester=HitTester(FakeMeasurer(widths={SITE_URL: 180, AUTHOR_URL: 150})),
        launcher=launcher,
        grid=parse_grid(*ABOUT_LAYOUT),
        cells=cells if cells is not None else parse_content(ABOUT_CONTENT),
        block=block or default_block,
        links=links if links is not None else default_links,
    )


@pytest.fixture()
def presenter(host, launcher) -> AboutPresenter:
    p = _presenter(host, launcher)
    p.relayout(Size(300, 220), MEASURED)
    return p


def test_relayout_places_panes(presenter):
    layout = presenter.layout
    assert layout["logo"] == Rect(8, 8, 40, 40)
    assert layout["text"] == Rect(48, 8, 244, 180)
    assert layout["ok"] == Rect(232, 188, 60, 24)


def test_click_on_url_opens_it(presenter, launcher):
    url = presenter.handle_click(ClickEvent(Point(48 + 50, 8 + 14 + 2), CLICK))
    assert url == SITE_URL
    assert launcher.opened == [SITE_URL]


def test_click_on_second_url(presenter, launcher):
    assert presenter.handle_click(ClickEvent(Point(48 + 10, 8 + 4 * 14 + 1), CLICK)) == AUTHOR_URL
    assert launcher.opened == [AUTHOR_URL]


def test_click_right_of_url_does_nothing(presenter, launcher):
    assert presenter.handle_click(ClickEvent(Point(48 + 200, 8 + 16), CLICK)) is None
    assert launcher.opened == []


def test_click_on_plain_line_does_nothing(presenter, launcher):
    assert presenter.handle_click(ClickEvent(Point(50, 10), CLICK)) is None
    assert launcher.opened == []


def test_non_click_events_are_ignored(presenter, launcher):
    assert presenter.handle_click(ClickEvent(Point(48 + 50, 8 + 16), Modifier.SHIFT)) is None
    assert launcher.opened == []


def test_modifiers_do_not_disqualify_a_click(presenter, launcher):
    ev = ClickEvent(Point(48 + 50, 8 + 16), CLICK | Modifier.ALT)
    assert presenter.handle_click(ev) == SITE_URL


def test_clicks_outside_text_pane_are_ignored(presenter, launcher):
    assert presenter.handle_click(ClickEvent(Point(10, 10), CLICK)) is None  # logo
    assert presenter.handle_click(ClickEvent(Point(250, 200), CLICK)) is None  # button
    assert presenter.handle_click(ClickEvent(Point(2, 2), CLICK)) is None  # margin
    assert launcher.opened == []


def test_click_before_first_layout_is_ignored(host, launcher):
    p = _presenter(host, launcher)
    assert p.layout is None
    assert p.handle_click(ClickEvent(Point(98, 24), CLICK)) is None


def test_later_declared_component_wins_overlaps(host, launcher):
    cells = [CellSpan("text", 0, 0, col_span=3, row_span=3), CellSpan("ok", 0, 0)]
    p = _presenter(host, launcher, cells=cells)
    p.relayout(Size(300, 220), MEASURED)
    # (20, 24) is inside both; "ok" is declared last
    assert p.handle_click(ClickEvent(Point(20, 8 + 16), CLICK)) is None
    assert launcher.opened == []


def test_launcher_failure_is_swallowed(presenter, launcher, monkeypatch):
    def boom(url: str) -> None:
        raise OSError("no browser")

    monkeypatch.setattr(launcher, "open_resource", boom)
    assert presenter.handle_click(ClickEvent(Point(48 + 50, 8 + 16), CLICK)) is None


def test_unknown_action_does_nothing(host, launcher):
    block = TextBlock(lines=(TextLine(SITE_URL, "elsewhere"),), line_height=14)
    p = _presenter(host, launcher, block=block, links={})
    p.relayout(Size(300, 220), MEASURED)
    assert p.handle_click(ClickEvent(Point(48 + 5, 8 + 1), CLICK)) is None
    assert launcher.opened == []


def test_bad_span_fails_at_construction(host, launcher):
    with pytest.raises(InvalidSpan):
        _presenter(host, launcher, cells=[CellSpan("text", 3, 0)])


def test_strict_layout_checked_at_construction(host, launcher):
    grid_cells = [CellSpan("text", 0, 0)]
    with pytest.raises(NoFillTarget):
        AboutPresenter(
            engine=LayoutEngine(require_fill=True),
            hit_tester=HitTester(FakeMeasurer()),
            launcher=launcher,
            grid=GridSpec(columns=(Fixed(10),), rows=(Fixed(10),)),
            cells=grid_cells,
            block=TextBlock(lines=(TextLine("x"),), line_height=10),
            links={},
        )


def test_layout_error_keeps_previous_layout(host, launcher):
    class FlakyEngine(LayoutEngine):
        fail = False

        def resolve(self, *args, **kwargs):
            if self.fail:
                raise LayoutError("boom")
            return super().resolve(*args, **kwargs)

    engine = FlakyEngine(margin=8)
    p = _presenter(host, launcher, engine=engine)
    first = p.relayout(Size(300, 220), MEASURED)
    engine.fail = True
    assert p.relayout(Size(400, 400), MEASURED) is first
    assert p.layout is first


def test_preferred_size_delegates_to_engine(host, launcher):
    p = _presenter(host, launcher)
    assert p.preferred_size(MEASURED) == LayoutEngine(margin=8).preferred_size(
        p.grid, p.cells, MEASURED
    )
