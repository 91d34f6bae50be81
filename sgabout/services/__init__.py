"""Layout, hit-testing and About-dialog services."""

from .about_text import build_about_block, build_about_text
from .grid_descriptor import parse_content, parse_grid
from .hit_tester import HitTester
from .layout_engine import LayoutEngine

__all__ = [
    "LayoutEngine",
    "HitTester",
    "parse_grid",
    "parse_content",
    "build_about_text",
    "build_about_block",
]
