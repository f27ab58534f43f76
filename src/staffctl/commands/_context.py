"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Workspace initialization, centralized
result emission (stdout/stderr routing + exit codes), and the save on
orderly shutdown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from staffctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from staffctl.config.settings import StaffSettings
    from staffctl.services.result import ServiceResult
    from staffctl.services.workspace import Workspace


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The workspace is lazily
    loaded on first use so ``--help`` and ``--version`` never touch the
    record file.
    """

    def __init__(self, settings: StaffSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        # Configure structured logging
        from staffctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            salary_decimals=self.settings.display.salary_decimals,
        )

    @property
    def workspace(self) -> Workspace:
        """The session workspace (loaded lazily on first access).

        A failed load is reported on stderr and the session continues
        with an empty store.
        """
        if self._workspace is None:
            from staffctl.services.workspace import Workspace

            self._workspace = Workspace(self.settings)
            result = self._workspace.load()
            if not result.ok:
                click.echo(format_result(result, settings=self.output_settings), err=True)
            elif not (self.settings.json_output or self.settings.quiet):
                for warning in result.warnings:
                    click.echo(warning, err=True)
        return self._workspace

    def show(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult without ending the process.

        Successes go to stdout and failures to stderr.  Warnings are
        emitted to stderr so they don't pollute piped output.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Show a ServiceResult with one-shot exit semantics.

        * Success (``result.ok``): returns normally.
        * Failure: exits with code 1.
        """
        self.show(result)
        if not result.ok:
            raise SystemExit(1)

    def close(self) -> None:
        """Persist pending changes.  Registered with ``ctx.call_on_close``.

        A failed save is reported but never changes the exit code.
        """
        if self._workspace is None:
            return
        result = self._workspace.close()
        if result is not None and not result.ok:
            click.echo(format_result(result, settings=self.output_settings), err=True)
