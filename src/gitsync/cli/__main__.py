"""Allow ``python -m gitsync.cli``."""

from gitsync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
