"""Package entry point.

Preferred invocation is via the installed console script:

    water-footprint ...

For convenience we also support:

    python -m water_footprint ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m water_footprint`."""

    app()


if __name__ == "__main__":
    main()
