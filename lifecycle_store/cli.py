"""Command-line interface for the lifecycle record store."""

import sys
from typing import Optional

import typer
from rich.console import Console

from .config.logging import cli_logger, setup_logging
from .config.settings import Settings
from .presentation.demo import DEMOS

app = typer.Typer(
    name="lifecycle-store",
    help="Lifecycle Store - in-memory record stores with status lifecycles",
    add_completion=False,
)
console = Console()


@app.command("demo")
def run_demo(
    name: str = typer.Argument("all", help="Demo to run: appointments, library, tasks or all"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Override LOG_LEVEL"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Run one of the scripted store walkthroughs."""
    if name != "all" and name not in DEMOS:
        console.print(f"[red]Unknown demo '{name}'. Choose from: all, {', '.join(DEMOS)}[/red]")
        raise typer.Exit(code=2)

    settings = Settings()
    if debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"
    elif log_level:
        settings.LOG_LEVEL = log_level
    setup_logging(settings)

    selected = list(DEMOS) if name == "all" else [name]
    try:
        for demo in selected:
            cli_logger.debug("Running demo", demo=demo)
            DEMOS[demo](console, settings)
    except Exception as e:
        console.print(f"[red]Demo failed: {e}[/red]")
        sys.exit(1)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Lifecycle Store version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
