"""CLI interface for canonical-reducer using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from canonical_reducer import __description__, __version__
from canonical_reducer.config import CanonicalReducerConfig, LogLevel, OutputFormat, load_config
from canonical_reducer.loader import load_target
from canonical_reducer.validation import DefinitionKind, ValidationFramework, ValidationResult

app = typer.Typer(
    name="canonical-reducer",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"canonical-reducer version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """canonical-reducer - validate action and reducer definitions."""


def _configure_logging(config: CanonicalReducerConfig) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[LogLevel(config.logging.level)],
        format="%(levelname)s %(name)s: %(message)s",
    )


def _records(kind: DefinitionKind, label: str, candidate: Any) -> list[tuple[str, Any]]:
    """Split a loaded target into validation records.

    A non-empty list of actions is validated record by record; everything
    else, an empty list included, is a single record.
    """
    if kind == DefinitionKind.ACTION and isinstance(candidate, list) and candidate:
        return [(f"{label}[{index}]", item) for index, item in enumerate(candidate)]
    return [(label, candidate)]


def _print_result(result: ValidationResult, output_format: str) -> None:
    if output_format == OutputFormat.JSON.value:
        # Plain echo: Rich would wrap long messages inside JSON strings
        typer.echo(jsonlib.dumps(result.to_dict(), indent=2))
        return

    if output_format == OutputFormat.MARKDOWN.value:
        console.print("# Validation Report")
        console.print(f"**Status:** {result.status.value}")
        console.print(f"**Exit Code:** {result.exit_code}")
        console.print()

        if result.counters:
            console.print("## Counters")
            for key, value in result.counters.items():
                console.print(f"- {key}: {value}")
            console.print()

        if result.issues:
            console.print("## Issues")
            for issue in result.issues:
                console.print(f"- **{escape(issue.kind)}** {escape(issue.target or '')}: {escape(issue.message)}")
        return

    status_color = "green" if result.passed else "red"
    console.print(f"[{status_color}]Validation Status: {result.status.value.upper()}[/{status_color}]")

    if result.counters:
        counter_table = Table()
        counter_table.add_column("Metric", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")

        for key, value in sorted(result.counters.items()):
            counter_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(counter_table)

    if result.issues:
        console.print("\n[blue]Issues Found:[/blue]")
        issues_table = Table()
        issues_table.add_column("Target", style="dim")
        issues_table.add_column("Kind", style="red")
        issues_table.add_column("Message", style="white")

        for issue in result.issues:
            issues_table.add_row(escape(issue.target or ""), escape(issue.kind), escape(issue.message))

        console.print(issues_table)
    else:
        console.print("\n[green]No issues found![/green]")


def _run(kind: DefinitionKind, target: str, output_format: Optional[str], config_path: Optional[Path]) -> None:
    valid_formats = [f.value for f in OutputFormat]
    if output_format is not None and output_format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{escape(output_format)}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
        _configure_logging(config)
        label, candidate = load_target(target)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    framework = ValidationFramework(config)
    framework.create_default_rules(kind)
    result = framework.validate_records(_records(kind, label, candidate))

    _print_result(result, output_format or config.output.format)
    raise typer.Exit(result.exit_code)


@app.command()
def action(
    target: Annotated[
        str,
        typer.Argument(help="JSON/JSONL file, module:attribute reference or inline JSON")
    ],
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .canonical-reducer.json)")
    ] = None,
) -> None:
    """Validate one action definition or a list of them."""
    _run(DefinitionKind.ACTION, target, format, config)


@app.command()
def reducer(
    target: Annotated[
        str,
        typer.Argument(help="module:attribute reference, JSON file or inline JSON")
    ],
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .canonical-reducer.json)")
    ] = None,
) -> None:
    """Validate a reducer definition."""
    _run(DefinitionKind.REDUCER, target, format, config)


if __name__ == "__main__":
    app()
