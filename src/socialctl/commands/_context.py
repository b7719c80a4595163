"""AppContext: the object every subcommand receives via ``@click.pass_obj``.

It owns the resolved settings, opens the Store on first use, and turns a
ServiceResult into process output and an exit code.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from socialctl.config.logging import configure_logging
from socialctl.infrastructure.store import StoreUnavailableError
from socialctl.output.formatters import OutputSettings, format_result
from socialctl.services.result import ErrorCode, ServiceResult
from socialctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from socialctl.config.settings import SocialSettings
    from socialctl.infrastructure.store import Store


class AppContext:
    """Per-invocation state; ``--help`` and ``--version`` never open the store."""

    def __init__(self, settings: SocialSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._store: Store | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def store(self) -> Store:
        if self._store is None:
            from socialctl.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    def close(self) -> None:
        """Dispose the connection pool if a store was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    @contextmanager
    def store_errors(self, op: str) -> Iterator[None]:
        """Report an unreachable store as a STORE_UNAVAILABLE failure of *op*."""
        try:
            yield
        except StoreUnavailableError as exc:
            self.emit(
                ServiceResult.failure(
                    op, ErrorCode.STORE_UNAVAILABLE, f"Database unavailable: {exc}"
                )
            )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with status 1.

        Outside ``--json`` mode, warnings are echoed to stderr after a
        successful result so piped stdout stays clean.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
