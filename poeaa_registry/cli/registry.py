"""CLI commands for inspecting the registries."""

from __future__ import annotations

import threading

import typer
from rich.console import Console
from rich.table import Table

from poeaa_registry.core.config import settings
from poeaa_registry.services.registry import Registry
from poeaa_registry.services.thread_registry import ThreadLocalRegistry

app = typer.Typer(name="registry", help="Inspect the global and thread-scoped registries")
console = Console()


def _collect_thread_tags(count: int) -> list[tuple[int, str]]:
    """Reinitialize the thread registry in ``count`` threads and collect their tags."""
    results: list[tuple[int, str]] = []
    results_lock = threading.Lock()

    def _worker() -> None:
        ThreadLocalRegistry.initialize()
        instance = ThreadLocalRegistry.get_instance()
        with results_lock:
            results.append((threading.get_ident(), instance.tag))

    threads = [threading.Thread(target=_worker, name=f"registry-{i}") for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


@app.command("tags")
def tags(
    threads: int = typer.Option(2, "--threads", "-t", min=1, help="Worker threads to start"),
) -> None:
    """Show the thread registry tag seen by each of several threads."""
    results = _collect_thread_tags(threads)

    table = Table(title="Thread Registries")
    table.add_column("Thread", style="cyan")
    table.add_column("Tag")
    table.add_column("Match")

    mismatches = 0
    for ident, tag in results:
        matches = str(ident) == tag
        mismatches += 0 if matches else 1
        table.add_row(str(ident), tag, "[green]yes[/green]" if matches else "[red]no[/red]")

    console.print(table)
    if mismatches:
        console.print(f"[red]{mismatches} thread(s) saw a foreign registry tag[/red]")
        raise typer.Exit(1)


@app.command("info")
def info() -> None:
    """Show the configured finder and what each registry currently holds."""
    thread_registry = ThreadLocalRegistry.get_instance()
    console.print(f"[bold]Configured finder:[/bold] {settings.PERSON_FINDER}")
    console.print(
        f"[bold]Global registry:[/bold] {type(Registry.get_instance().person_finder).__name__}"
    )
    console.print(
        f"[bold]Thread registry ({thread_registry.tag}):[/bold] "
        f"{type(thread_registry.person_finder).__name__}"
    )
