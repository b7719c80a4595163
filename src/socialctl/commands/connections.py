"""Command group: connect, disconnect, list, and degree of separation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialctl.commands._base import SocialGroup
from socialctl.services.connection import ConnectionService
from socialctl.services.query import QueryService

if TYPE_CHECKING:
    from socialctl.commands._context import AppContext

_CONN_EXAMPLES = """\
  socialctl conn add alice bob
  socialctl conn remove alice bob
  socialctl conn list
  socialctl conn degree alice carol
  socialctl --json conn degree alice dave"""


@click.group(cls=SocialGroup, examples=_CONN_EXAMPLES)
@click.pass_obj
def conn(app: AppContext) -> None:
    """Manage connections and measure degrees of separation."""


@conn.command(
    examples="""\
  socialctl conn add alice bob
  socialctl --json conn add bob alice"""
)
@click.argument("user_a")
@click.argument("user_b")
@click.pass_obj
def add(app: AppContext, user_a: str, user_b: str) -> None:
    """Connect two users (order does not matter)."""
    with app.store_errors("connect"):
        app.emit(ConnectionService(app.store).connect(user_a, user_b))


@conn.command(
    examples="""\
  socialctl conn remove alice bob"""
)
@click.argument("user_a")
@click.argument("user_b")
@click.pass_obj
def remove(app: AppContext, user_a: str, user_b: str) -> None:
    """Remove the connection between two users."""
    with app.store_errors("disconnect"):
        app.emit(ConnectionService(app.store).disconnect(user_a, user_b))


@conn.command(
    name="list",
    examples="""\
  socialctl conn list
  socialctl --json conn list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every connection, newest first."""
    with app.store_errors("list_connections"):
        app.emit(ConnectionService(app.store).list_connections())


@conn.command(
    examples="""\
  socialctl conn degree alice carol
  socialctl -q conn degree alice carol"""
)
@click.argument("from_user")
@click.argument("to_user")
@click.pass_obj
def degree(app: AppContext, from_user: str, to_user: str) -> None:
    """Degree of separation between two users (-1 if not connected)."""
    with app.store_errors("degree"):
        app.emit(QueryService(app.store).degree(from_user, to_user))
