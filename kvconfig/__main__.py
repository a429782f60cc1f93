"""Module entrypoint for running kvconfig as ``python -m kvconfig``."""

from __future__ import annotations

from kvconfig.cli import main


if __name__ == "__main__":
    main()
