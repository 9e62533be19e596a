"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passfields.config.logging import configure_logging
from passfields.output.formatters import format_result

if TYPE_CHECKING:
    from pathlib import Path

    from passfields.config.settings import PassFieldsSettings
    from passfields.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PassFieldsSettings, *, explicit_config: bool = False) -> None:
        self.settings = settings
        self._explicit_config = explicit_config
        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    def settings_for(self, target: Path) -> PassFieldsSettings:
        """Settings for checking *target*.

        A ``passfields.toml`` beside (or above) *target* takes precedence
        over the one found from the working directory. An explicit
        ``--config`` always wins.
        """
        if self._explicit_config:
            return self.settings
        from passfields.config.settings import PassFieldsSettings

        flags = self.settings.model_dump(include={"json_output", "quiet", "verbose", "log_json"})
        return PassFieldsSettings.from_cli(target=target, **flags)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output, quiet=self.settings.quiet)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
