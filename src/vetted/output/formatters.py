"""Output mode dispatch.

A ServiceResult is rendered for humans (Rich), for scripts (``--json``),
or as a single status line (``--quiet``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from vetted.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from vetted.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags, resolved from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings* (JSON wins over quiet)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
