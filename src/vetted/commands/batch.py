"""Command: validate many people from a JSON file."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from vetted.commands._base import VettedCommand
from vetted.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from vetted.commands._context import AppContext


@click.command(
    cls=VettedCommand,
    examples="""\
  vetted batch people.json
  cat people.json | vetted batch -
  vetted --json batch people.json""",
)
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def batch(app: AppContext, file: IO[str]) -> None:
    """Validate every person in a JSON file.

    FILE must contain a JSON array of objects with "name" and "age" keys.
    Use "-" to read from stdin.
    """
    try:
        items = json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="validate_batch",
                error=ServiceError(code="invalid_file", message=f"Error reading {file.name}: {exc}"),
            )
        )
        return

    if not isinstance(items, list):
        app.emit(
            ServiceResult(
                ok=False,
                op="validate_batch",
                error=ServiceError(
                    code="invalid_format",
                    message="JSON file must contain a top-level array.",
                ),
            )
        )
        return

    app.emit(app.person_service.validate_batch(items))
