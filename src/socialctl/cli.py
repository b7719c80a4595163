"""Entry point: global output flags, config selection, and the command tree."""

from __future__ import annotations

from typing import Any

import click

from socialctl import __version__
from socialctl.commands import register_commands
from socialctl.commands._base import SocialGroup
from socialctl.commands._context import AppContext
from socialctl.config.settings import SocialSettings

_GLOBAL_FLAGS: list[tuple[tuple[str, ...], str]] = [
    (("--json", "json_output"), "Print the raw ServiceResult as JSON."),
    (("-q", "--quiet"), "Print only the essential value."),
    (("-v", "--verbose"), "Print details, debug logs and span timings."),
    (("--log-json",), "Emit logs on stderr as JSON lines."),
]


def _global_flags(fn: Any) -> Any:
    for decls, help_text in reversed(_GLOBAL_FLAGS):
        fn = click.option(*decls, is_flag=True, help=help_text)(fn)
    return fn


@click.group(
    cls=SocialGroup,
    invoke_without_command=True,
    examples="""\
  # Register two users and connect them
  socialctl user add alice "Alice"
  socialctl user add bob "Bob"
  socialctl conn add alice bob

  # Machine-readable degree of separation
  socialctl --json conn degree alice bob""",
)
@click.version_option(__version__, prog_name="socialctl")
@_global_flags
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    help="Use this socialctl.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """socialctl: users, connections, and degrees of separation."""
    app = AppContext(SocialSettings.from_cli(config_path=config_path, **flags))
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
