"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Plugins are discovered lazily so ``--help`` and
``--version`` never import third-party plugin code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notichain.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from notichain.config.settings import NotichainSettings
    from notichain.plugins.manager import PluginManager
    from notichain.services.notify import NotifyService
    from notichain.services.result import ServiceResult


class AppContext:
    """Settings plus lazily created plugin manager and result emission."""

    def __init__(self, settings: NotichainSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from notichain.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from notichain.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugins

    def notify_service(self) -> NotifyService:
        from notichain.services.notify import NotifyService

        return NotifyService(self.settings, self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Write *result* and set the exit status.

        Success goes to stdout (warnings to stderr outside JSON mode).
        Failure goes to stderr and exits with code 1.
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
