"""Run the command line interface with ``python -m surfercore``."""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
