"""Main entry point for the lifecycle store demos."""

import sys

from rich.console import Console

from lifecycle_store import Settings
from lifecycle_store.config import setup_logging
from lifecycle_store.presentation import DEMOS


def main() -> None:
    """Main entry point."""
    console = Console()
    try:
        settings = Settings()
        setup_logging(settings)

        for demo in DEMOS.values():
            demo(console, settings)

    except Exception as e:
        print(f"Error running demos: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
