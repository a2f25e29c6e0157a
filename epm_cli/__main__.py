"""console script entrypoint for the EPM CLI."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
