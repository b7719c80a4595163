"""FastMCP server setup.

Optional extra — guarded behind try/except ImportError.
Transport: stdio default, streamable HTTP or SSE optional.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(
    *,
    data_root: Path | None = None,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Create and configure the MCP server.

    Creates a Store from *data_root* (or CWD) and registers all tools.
    Returns the FastMCP instance.

    *host* and *port* configure the bind address for HTTP transports
    (sse, streamable-http). They are ignored when using stdio.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install socialctl[mcp]"
        raise RuntimeError(msg)

    from socialctl.config.settings import SocialSettings
    from socialctl.infrastructure.store import Store
    from socialctl.mcp.tools import register_tools

    settings = SocialSettings.from_cli(data_root=data_root)
    store = Store(settings)

    server = _FastMCP("socialctl", host=host, port=port)
    register_tools(server, store)
    return server
