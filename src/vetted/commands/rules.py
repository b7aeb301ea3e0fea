"""Command: show the active validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vetted.commands._base import VettedCommand

if TYPE_CHECKING:
    from vetted.commands._context import AppContext


@click.command(
    cls=VettedCommand,
    examples="""\
  vetted rules
  vetted --json rules
  VETTED_RULES__AGE__MAXIMUM=150 vetted rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """Show the rules and bounds currently in effect."""
    app.emit(app.person_service.rules())
