"""AppContext: the object every fdm command receives via ``@click.pass_obj``.

The root group builds one per invocation from :class:`FdmSettings`. It owns
logging setup, the lazily created :class:`ModelingService`, and the single
place where a :class:`ServiceResult` turns into output and an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fdm.config.logging import configure_logging
from fdm.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fdm.config.settings import FdmSettings
    from fdm.services.modeling import ModelingService
    from fdm.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by all subcommands."""

    def __init__(self, settings: FdmSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(json_output=settings.json_output, quiet=settings.quiet)
        self._service: ModelingService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ModelingService:
        # Imported here so `fdm --help` never loads the domain catalog.
        if self._service is None:
            from fdm.services.modeling import ModelingService

            self._service = ModelingService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result ends the process with status 1.

        Failures and warnings go to stderr, so stdout carries only
        successful payloads (and stays parseable under ``--json``).
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.secho(f"WARNING: {warning}", fg="yellow", err=True)
