from __future__ import annotations

from .about_presenter import AboutPresenter

__all__ = ["AboutPresenter"]
