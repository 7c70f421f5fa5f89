"""Typer CLI application.

Summaries go to stdout; progress, diagnostics and log records go to stderr.
"""

import typer
from typing import Optional
from pathlib import Path

from catalog2model.config.logging import setup_logging
from catalog2model.config.settings import get_settings
from catalog2model.introspection.pipeline import introspect_snapshot
from catalog2model.ir.validators import validate_model
from catalog2model.utils.model_io import (
    load_result_from_json,
    load_snapshot_from_json,
    save_result_to_json,
)

app = typer.Typer(help="catalog2model: database catalog metadata to entity-relationship model")

LogLevelOpt = typer.Option(None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")


def _configure_logging(log_level):
    try:
        setup_logging(level=log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


@app.command()
def introspect(
    snapshot_json: Path,
    out_json: Path,
    keep_quoted_defaults: bool = typer.Option(
        False, "--keep-quoted-defaults", help="Keep column defaults that contain quotes"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 if any warning was recorded"
    ),
    log_level: Optional[str] = LogLevelOpt,
):
    """
    Build the entity-relationship model from a catalog snapshot.

    Args:
        snapshot_json: Path to the catalog snapshot JSON file
        out_json: Output path for the model JSON
    """
    _configure_logging(log_level)
    settings = get_settings()
    if keep_quoted_defaults:
        settings = settings.model_copy(update={"keep_quoted_defaults": True})

    typer.echo(f"Loading snapshot from {snapshot_json}", err=True)
    try:
        snapshot = load_snapshot_from_json(snapshot_json)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = introspect_snapshot(snapshot, settings=settings)

    typer.echo(f"Writing model to {out_json}", err=True)
    save_result_to_json(result, out_json)

    relation_count = sum(
        1
        for ent in result.entities
        for col in ent.columns
        for rel in col.relations
        if rel.is_owner
    )
    typer.echo(
        f"✓ Complete! {len(result.entities)} entities, {relation_count} relations"
    )
    warnings = result.warnings()
    for diag in warnings:
        typer.echo(f"  [{diag.code}] {diag.message}", err=True)
    if strict and warnings:
        raise typer.Exit(1)


@app.command()
def check(model_json: Path, log_level: Optional[str] = LogLevelOpt):
    """
    Check the invariants of a model JSON file.

    Args:
        model_json: Path to a model written by the introspect command
    """
    _configure_logging(log_level)

    try:
        result = load_result_from_json(model_json)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    issues = validate_model(result.entities)
    for issue in issues:
        typer.echo(f"  [{issue.code}] {issue.message}", err=True)
    if issues:
        raise typer.Exit(1)
    typer.echo(f"✓ Model OK: {len(result.entities)} entities")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
