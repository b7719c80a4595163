"""Subcommand modules for socialctl.

Provides register_commands() which uses deferred imports to keep
``socialctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from socialctl.commands.connections import conn
    from socialctl.commands.users import user

    cli.add_command(user)
    cli.add_command(conn)

    # --- Standalone commands ---
    from socialctl.commands.health import health
    from socialctl.commands.serve import serve

    cli.add_command(health)
    cli.add_command(serve)
