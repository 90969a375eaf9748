"""Allow running the CLI with ``python -m writesonic_cli``."""

from .cli import main

if __name__ == "__main__":
    main()
