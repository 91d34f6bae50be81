from __future__ import annotations

from sgabout.domain.interfaces import IHostInfo
from sgabout.domain.models import TextBlock
from sgabout.utils.constants import AUTHOR, AUTHOR_URL, FIRST_YEAR, LINKS, SITE_URL


def pad_revision(revision: str | int, width: int = 3) -> str:
    """Revisions are shown zero-padded: 30 -> '030'."""
    return str(revision).rjust(width, "0")


def build_about_text(host: IHostInfo, *, year: int) -> str:
    return (
        f"{host.app_name} {host.app_version}.{pad_revision(host.app_revision)}\n"
        f"{SITE_URL}\n"
        "\n"
        f"© {FIRST_YEAR}-{year} {AUTHOR}\n"
        f"{AUTHOR_URL}\n"
        "\n"
        "All rights reserved.\n"
        "\n"
        f"{host.toolkit}\n"
        f"{host.runtime}\n"
    )


def build_about_block(
    host: IHostInfo, line_height: int, *, year: int
) -> tuple[TextBlock, dict[str, str]]:
    """Text block with the URL lines made clickable, plus action-id -> URL."""
    text = build_about_text(host, year=year)
    url_actions = {url: action for action, url in LINKS.items()}
    actions = {
        i: url_actions[line] for i, line in enumerate(text.split("\n")) if line in url_actions
    }
    return TextBlock.from_text(text, line_height, actions), dict(LINKS)
