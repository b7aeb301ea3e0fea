"""Subcommand modules for vetted.

Provides register_commands() which uses deferred imports to keep
``vetted --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from vetted.commands.batch import batch
    from vetted.commands.person import person
    from vetted.commands.rules import rules

    cli.add_command(person)
    cli.add_command(batch)
    cli.add_command(rules)
