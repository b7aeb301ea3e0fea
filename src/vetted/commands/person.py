"""Command: validate a single person."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vetted.commands._base import VettedCommand

if TYPE_CHECKING:
    from vetted.commands._context import AppContext


@click.command(
    cls=VettedCommand,
    examples="""\
  vetted person --name "Peter Parker" --age 25
  vetted person --name "" --age 200
  vetted --json person --name "Mary Jane" --age 24""",
)
@click.option("--name", required=True, help="Person's name.")
@click.option("--age", type=int, required=True, help="Person's age in years.")
@click.pass_obj
def person(app: AppContext, name: str, age: int) -> None:
    """Validate a name and age, reporting every violated rule."""
    app.emit(app.person_service.validate(name, age))
