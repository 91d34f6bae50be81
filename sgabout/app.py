from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QWidget

from sgabout.di.container import Container
from sgabout.services.ui.about import AboutDialog
from sgabout.utils.constants import APP_NAME, APP_ORG
from sgabout.utils.logging_setup import configure_logging


def show_about(container: Container, parent: QWidget | None = None) -> AboutDialog:
    """
    Create and show a modal About dialog. The caller owns the returned handle:
    close() it, or call run() instead of relying on show() to block.
    """
    dlg = container.build_about_dialog(parent)
    dlg.show()
    return dlg


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the services via the DI container and runs the
    About dialog's modal loop. An optional first argument names an ini file.
    """
    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))  # noqa: F841 - must outlive the dialog

    explicit_ini = Path(argv[1]) if len(argv) > 1 else None
    container = Container.default(explicit_ini=explicit_ini)
    configure_logging(container.config.log_level())

    container.build_about_dialog().run()
    return 0
