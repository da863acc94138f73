"""CLI commands for poeaa-registry."""

import typer

from poeaa_registry.cli.people import app as people_app
from poeaa_registry.cli.registry import app as registry_app

main_app = typer.Typer(
    name="poeaa-registry",
    help="Registry pattern demo CLI",
    no_args_is_help=True,
)
main_app.add_typer(people_app, name="people")
main_app.add_typer(registry_app, name="registry")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
