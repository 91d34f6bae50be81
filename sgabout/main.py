from __future__ import annotations
import sys
from sgabout.app import run_app


def main() -> int:
    """Module entrypoint for `python -m sgabout.main` or `python -m sgabout`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
