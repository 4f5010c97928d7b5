"""Command-line entry point for Kickstart."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from . import config, io, prompts, report
from .services import ServiceFailure
from .services.scaffold import ScaffoldProjectService

app = typer.Typer(
    add_completion=False,
    help="Create a new project from a starter template.",
)


def _fail(exc: ServiceFailure) -> NoReturn:
    typer.echo(f"\nError: {exc}", err=True)
    if exc.recovery_hint:
        typer.echo(f"hint: {exc.recovery_hint}", err=True)
    raise typer.Exit(code=1)


@app.command()
def create() -> None:
    """Ask a few questions, then clone, initialize and install the project."""
    try:
        settings = config.load_config()
    except ServiceFailure as exc:
        _fail(exc)

    try:
        request = prompts.collect_scaffold_request(settings)
    except io.PromptCancelled:
        typer.echo("\nOperation cancelled.", err=True)
        raise typer.Exit(code=1)

    service = ScaffoldProjectService(cwd=Path.cwd(), git_path=settings.git.path)
    try:
        outcome = service(request)
    except ServiceFailure as exc:
        _fail(exc)

    report.print_report(outcome)


def main() -> None:
    app(prog_name="kickstart")
