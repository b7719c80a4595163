"""Command group: user registration, lookup, and friend queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialctl.commands._base import SocialGroup
from socialctl.services.query import QueryService
from socialctl.services.users import UserService

if TYPE_CHECKING:
    from socialctl.commands._context import AppContext

_USER_EXAMPLES = """\
  socialctl user add alice "Alice Smith" --email alice@example.com
  socialctl user show alice
  socialctl user list
  socialctl user friends alice
  socialctl user fof alice
  socialctl --json user fof alice"""


@click.group(cls=SocialGroup, examples=_USER_EXAMPLES)
@click.pass_obj
def user(app: AppContext) -> None:
    """Register users and query their friends."""


@user.command(
    examples="""\
  socialctl user add alice "Alice Smith"
  socialctl user add bob "Bob Jones" --email bob@example.com"""
)
@click.argument("user_id")
@click.argument("display_name")
@click.option("--email", default=None, help="Optional contact address.")
@click.pass_obj
def add(app: AppContext, user_id: str, display_name: str, email: str | None) -> None:
    """Register a new user."""
    with app.store_errors("register_user"):
        app.emit(UserService(app.store).register(user_id, display_name, email=email))


@user.command(
    examples="""\
  socialctl user show alice
  socialctl --json user show alice"""
)
@click.argument("user_id")
@click.pass_obj
def show(app: AppContext, user_id: str) -> None:
    """Show one user."""
    with app.store_errors("get_user"):
        app.emit(UserService(app.store).get(user_id))


@user.command(
    name="list",
    examples="""\
  socialctl user list
  socialctl -q user list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all users, newest first."""
    with app.store_errors("list_users"):
        app.emit(UserService(app.store).list_users())


@user.command(
    examples="""\
  socialctl user friends alice
  socialctl -q user friends alice"""
)
@click.argument("user_id")
@click.pass_obj
def friends(app: AppContext, user_id: str) -> None:
    """List direct friends, ordered by display name."""
    with app.store_errors("friends"):
        app.emit(QueryService(app.store).friends(user_id))


@user.command(
    examples="""\
  socialctl user fof alice
  socialctl --json user fof alice"""
)
@click.argument("user_id")
@click.pass_obj
def fof(app: AppContext, user_id: str) -> None:
    """List friends of friends (exactly two hops away)."""
    with app.store_errors("friends_of_friends"):
        app.emit(QueryService(app.store).friends_of_friends(user_id))
