"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging, builds services lazily, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from vetted.config.logging import configure_logging
from vetted.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from vetted.config.settings import VettedSettings
    from vetted.services.person import PersonService
    from vetted.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: VettedSettings) -> None:
        self.settings = settings
        self._person_service: PersonService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def person_service(self) -> PersonService:
        """The person service, built on first use from the configured rules."""
        if self._person_service is None:
            from vetted.services.person import PersonService

            try:
                self._person_service = PersonService(self.settings)
            except ValidationError as exc:
                msg = f"Invalid rule configuration: {exc}"
                raise click.ClickException(msg) from exc
        return self._person_service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
