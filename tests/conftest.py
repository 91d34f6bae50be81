from __future__ import annotations

import os

# Run Qt headless when no display is available (CI / containers).
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from dataclasses import dataclass, field

import pytest
from PyQt6.QtWidgets import QApplication

from sgabout.domain.errors import MeasurementUnavailable
from sgabout.services.hit_tester import HitTester


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the toolkit collaborators ---


class FakeMeasurer:
    """Fixed-advance font: every character is `advance` px wide; explicit widths override."""

    def __init__(self, advance: int = 6, height: int = 14, widths: dict[str, int] | None = None):
        self.advance = advance
        self.height = height
        self.widths = dict(widths or {})
        self.calls: list[str] = []

    def measure_width(self, text: str) -> int:
        self.calls.append(text)
        if text in self.widths:
            return self.widths[text]
        return len(text) * self.advance

    def line_height(self) -> int:
        return self.height


class BrokenMeasurer:
    def measure_width(self, text: str) -> int:
        raise MeasurementUnavailable("font backend gone")

    def line_height(self) -> int:
        raise MeasurementUnavailable("font backend gone")


@dataclass
class FakeLauncher:
    opened: list[str] = field(default_factory=list)

    def open_resource(self, url: str) -> None:
        self.opened.append(url)


@dataclass(frozen=True)
class FakeHost:
    app_name: str = "Scriptographer"
    app_version: str = "2.0"
    app_revision: str = "30"
    toolkit: str = "Qt 6.6.0"
    runtime: str = "Python 3.12.1"


class FakeImages:
    def __init__(self) -> None:
        self.requested: list[str] = []

    def load_image(self, name: str):
        from PyQt6.QtGui import QPixmap

        self.requested.append(name)
        px = QPixmap(40, 40)
        px.fill()
        return px


@pytest.fixture()
def measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest.fixture()
def hit_tester(measurer: FakeMeasurer) -> HitTester:
    return HitTester(measurer)


@pytest.fixture()
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture()
def host() -> FakeHost:
    return FakeHost()
