"""Module entrypoint for `python -m linechart`."""

from __future__ import annotations

import sys

from . import launcher as _launcher


def main() -> int:  # pragma: no cover - runtime delegation
    return _launcher.main()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
