from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtGui import QDesktopServices, QFont, QFontMetrics, QImage

from sgabout.domain.errors import MeasurementUnavailable
from sgabout.services.host_info import HostInfo
from sgabout.services.ui.adapters import QtImageLoader, QtResourceLauncher, QtTextMeasurer


def test_measurer_reports_positive_metrics(qapp):
    m = QtTextMeasurer()
    assert m.measure_width("") == 0
    assert m.measure_width("http://www.scriptographer.com") > m.measure_width("http")
    assert m.line_height() > 0


def test_measurer_measures_with_the_font_it_reports(qapp):
    font = QFont(qapp.font())
    font.setPixelSize(23)
    m = QtTextMeasurer(font)
    assert m.font().pixelSize() == 23
    fm = QFontMetrics(font)
    assert m.measure_width("Scriptographer") == fm.horizontalAdvance("Scriptographer")
    assert m.line_height() == fm.height()


def test_measurer_defaults_to_application_font(qapp):
    assert QtTextMeasurer().font() == qapp.font()


def test_measurer_without_application_is_unavailable(qapp, monkeypatch):
    monkeypatch.setattr(
        "sgabout.services.ui.adapters.qt_text_metrics.QApplication.instance", lambda: None
    )
    with pytest.raises(MeasurementUnavailable):
        QtTextMeasurer().measure_width("x")
    with pytest.raises(MeasurementUnavailable):
        QtTextMeasurer().font()


def test_launcher_hands_url_to_desktop(qapp, monkeypatch):
    seen = []

    def fake_open(url):
        seen.append(url.toString())
        return True

    monkeypatch.setattr(QDesktopServices, "openUrl", fake_open)
    QtResourceLauncher().open_resource("http://www.scratchdisk.com")
    assert seen == ["http://www.scratchdisk.com"]


def test_launcher_tolerates_refusal(qapp, monkeypatch):
    monkeypatch.setattr(QDesktopServices, "openUrl", lambda url: False)
    QtResourceLauncher().open_resource("http://www.scratchdisk.com")


def test_image_loader_reads_png(qapp, tmp_path: Path):
    img = QImage(4, 3, QImage.Format.Format_ARGB32)
    img.fill(0xFF0000FF)
    assert img.save(str(tmp_path / "logo.png"), "PNG") is True

    px = QtImageLoader(tmp_path).load_image("logo.png")
    assert not px.isNull()
    assert (px.width(), px.height()) == (4, 3)


def test_image_loader_missing_or_broken_is_null(qapp, tmp_path: Path):
    (tmp_path / "bad.png").write_bytes(b"not a png")
    loader = QtImageLoader(tmp_path)
    assert loader.load_image("nope.png").isNull()
    assert loader.load_image("bad.png").isNull()


class _Cfg:
    def get_version(self) -> str:
        return "2.0"

    def get_revision(self) -> str:
        return "030"


def test_host_info_from_config():
    info = HostInfo.from_config(_Cfg())  # type: ignore[arg-type]
    assert info.app_name == "Scriptographer"
    assert (info.app_version, info.app_revision) == ("2.0", "030")
    assert info.toolkit.startswith("Qt 6")
    assert info.runtime.startswith("Python 3")
