"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the process's single AidGenerator and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aidctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from aidctl.config.settings import AidSettings
    from aidctl.domain.generator import AidGenerator
    from aidctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The generator is
    lazily created on first use so every command in one process draws
    from the same issued set.
    """

    def __init__(self, settings: AidSettings) -> None:
        self.settings = settings
        self._generator: AidGenerator | None = None

        from aidctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def generator(self) -> AidGenerator:
        """The generator instance (created lazily on first access)."""
        if self._generator is None:
            from aidctl.services.ids import build_generator

            self._generator = build_generator(self.settings.ids)
        return self._generator

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
