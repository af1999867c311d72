"""Module entry point for `python -m api2html`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
