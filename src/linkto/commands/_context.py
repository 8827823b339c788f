"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the request and the LinkService, and owns
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from linkto.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from linkto.config.settings import LinkSettings
    from linkto.infrastructure.request import RequestContext
    from linkto.services.links import LinkService
    from linkto.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LinkSettings) -> None:
        self.settings = settings

        from linkto.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def request(
        self,
        request_url: str | None = None,
        *,
        referrer: str | None = None,
        method: str = "GET",
    ) -> RequestContext:
        """Build the request snapshot, defaulting to the configured site root."""
        from linkto.infrastructure.request import RequestContext

        base = self.settings.site.base_url
        url = request_url or f"{base}/"
        if url.startswith("/"):
            url = f"{base}{url}"
        try:
            return RequestContext(url=url, method=method, referrer=referrer)
        except ValidationError as exc:
            msg = exc.errors()[0]["msg"]
            raise click.BadParameter(msg, param_hint="--request-url") from exc

    def service(self, request: RequestContext) -> LinkService:
        """LinkService wired from settings and bound to *request*."""
        from linkto.helpers.links import LinkHelper
        from linkto.services.links import LinkService

        return LinkService(LinkHelper.from_settings(self.settings, request=request))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings to stderr outside JSON mode.
        * Failure: stderr, exit code 1.
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
