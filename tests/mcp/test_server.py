"""Tests for MCP server creation."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from socialctl.mcp.server import create_server, mcp_available


class TestServerAvailability:
    def test_mcp_available_is_bool(self) -> None:
        assert isinstance(mcp_available, bool)

    def test_create_server_without_mcp_raises(self, tmp_path: Path) -> None:
        with (
            patch("socialctl.mcp.server.mcp_available", False),
            pytest.raises(RuntimeError, match="MCP extra not installed"),
        ):
            create_server(data_root=tmp_path)

    def test_create_server_registers_tools(self, tmp_path: Path) -> None:
        created: dict[str, Any] = {}

        class DummyFastMCP:
            def __init__(self, name: str, **kwargs: Any) -> None:
                created["name"] = name
                created.update(kwargs)

        with (
            patch("socialctl.mcp.server.mcp_available", True),
            patch("socialctl.mcp.server._FastMCP", DummyFastMCP),
            patch("socialctl.mcp.tools.register_tools") as register,
        ):
            server = create_server(data_root=tmp_path, host="0.0.0.0", port=9000)

        assert isinstance(server, DummyFastMCP)
        assert created == {"name": "socialctl", "host": "0.0.0.0", "port": 9000}
        register.assert_called_once()
        store = register.call_args.args[1]
        assert store.settings.data_root == tmp_path
        store.close()
