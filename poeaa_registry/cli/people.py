"""CLI commands for person lookups through the registries."""

from __future__ import annotations

import typer
from rich.console import Console

from poeaa_registry.adapters.person_finders import build_person_finder
from poeaa_registry.services.people import (
    RegistryScope,
    find_person,
    registry_tag,
    set_person_finder,
)

app = typer.Typer(name="people", help="Look up people through the registry")
console = Console()


@app.command("find")
def find(
    last_name: str = typer.Argument(..., help="Surname to look up"),
    finder: str | None = typer.Option(
        None, "--finder", "-f", help="Finder to register first: always or never"
    ),
    scope: RegistryScope = typer.Option(
        RegistryScope.GLOBAL, "--scope", "-s", help="Registry to resolve the finder from"
    ),
) -> None:
    """Find a person by last name."""
    try:
        if finder is not None:
            set_person_finder(build_person_finder(finder), scope)
        result = find_person(last_name, scope)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    tag = registry_tag(scope)
    source = f"{scope.value} registry" + (f" (thread {tag})" if tag else "")

    if not result.found or result.person is None:
        console.print(f"[yellow]No person found with last name '{result.last_name}'[/yellow]")
        console.print(f"[dim]Resolved via {source}[/dim]")
        raise typer.Exit(1)

    console.print(f"[green]Found:[/green] {result.person.first_name} {result.person.last_name}")
    console.print(f"[dim]Resolved via {source}[/dim]")
