"""CLI entrypoint for the number path puzzle solver."""

from hidato.cli import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
