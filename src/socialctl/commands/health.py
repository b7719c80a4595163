"""health — report whether the store is reachable."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialctl.commands._base import SocialCommand
from socialctl.services.health import HealthService

if TYPE_CHECKING:
    from socialctl.commands._context import AppContext


@click.command(
    cls=SocialCommand,
    examples="""\
  socialctl health
  socialctl --json health""",
)
@click.pass_obj
def health(app: AppContext) -> None:
    """Check database connectivity and report counts."""
    with app.store_errors("health"):
        app.emit(HealthService(app.store).check())
