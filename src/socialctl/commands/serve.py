"""serve: expose the services as MCP tools (needs the ``mcp`` extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from socialctl.commands._base import SocialCommand

if TYPE_CHECKING:
    from socialctl.commands._context import AppContext

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _ensure_servable(app: AppContext) -> None:
    from socialctl.mcp import server

    if not server.mcp_available:
        raise click.ClickException("MCP not installed. Install with: pip install socialctl[mcp]")
    if not app.settings.mcp.enabled:
        raise click.ClickException(
            f"MCP server disabled by [mcp] enabled = false in {app.settings.config_path}"
        )


@click.command(
    cls=SocialCommand,
    examples="""\
  socialctl serve
  socialctl serve --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option("--transport", type=click.Choice(TRANSPORTS), default="stdio", show_default=True)
@click.option("--host", default="127.0.0.1", show_default=True, help="HTTP transports only.")
@click.option("--port", type=int, default=8000, show_default=True, help="HTTP transports only.")
@click.pass_obj
def serve(app: AppContext, transport: str, host: str, port: int) -> None:
    """Run the MCP server over stdio or HTTP."""
    _ensure_servable(app)
    from socialctl.mcp.server import create_server

    create_server(data_root=app.settings.data_root, host=host, port=port).run(transport=transport)
