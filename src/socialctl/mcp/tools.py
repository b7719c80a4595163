"""MCP tool definitions — 9 tools across 3 categories.

Categories: Users (3), Connections (3), Graph queries (3).
Each tool has a ``<name>_impl`` function testable without the mcp package.
``register_tools()`` wraps them with FastMCP decorators.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from socialctl.infrastructure.store import StoreUnavailableError
from socialctl.services.result import ErrorCode, ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": str(result.error.code),
            "status": result.error.status,
            "message": result.error.message,
        }
    return response


def _run(op: str, call: Callable[[], ServiceResult]) -> dict[str, Any]:
    """Invoke *call*, reporting an unreachable store as STORE_UNAVAILABLE."""
    try:
        result = call()
    except StoreUnavailableError as exc:
        result = ServiceResult.failure(
            op, ErrorCode.STORE_UNAVAILABLE, f"Database unavailable: {exc}"
        )
    return _to_mcp_response(result)


# ---------------------------------------------------------------------------
# User tools (3)
# ---------------------------------------------------------------------------


def register_user_impl(
    store: Any,
    user_id: str,
    display_name: str,
    *,
    email: str | None = None,
) -> dict[str, Any]:
    """Register a new user."""
    from socialctl.services.users import UserService

    return _run(
        "register_user",
        lambda: UserService(store).register(user_id, display_name, email=email),
    )


def get_user_impl(store: Any, user_id: str) -> dict[str, Any]:
    """Get a single user by id."""
    from socialctl.services.users import UserService

    return _run("get_user", lambda: UserService(store).get(user_id))


def list_users_impl(store: Any) -> dict[str, Any]:
    """List all users."""
    from socialctl.services.users import UserService

    return _run("list_users", lambda: UserService(store).list_users())


# ---------------------------------------------------------------------------
# Connection tools (3)
# ---------------------------------------------------------------------------


def connect_impl(store: Any, user_a: str, user_b: str) -> dict[str, Any]:
    """Connect two users."""
    from socialctl.services.connection import ConnectionService

    return _run("connect", lambda: ConnectionService(store).connect(user_a, user_b))


def disconnect_impl(store: Any, user_a: str, user_b: str) -> dict[str, Any]:
    """Remove the connection between two users."""
    from socialctl.services.connection import ConnectionService

    return _run("disconnect", lambda: ConnectionService(store).disconnect(user_a, user_b))


def list_connections_impl(store: Any) -> dict[str, Any]:
    """List all connections."""
    from socialctl.services.connection import ConnectionService

    return _run("list_connections", lambda: ConnectionService(store).list_connections())


# ---------------------------------------------------------------------------
# Graph query tools (3)
# ---------------------------------------------------------------------------


def degree_impl(store: Any, from_user_id: str, to_user_id: str) -> dict[str, Any]:
    """Degree of separation between two users."""
    from socialctl.services.query import QueryService

    return _run("degree", lambda: QueryService(store).degree(from_user_id, to_user_id))


def friends_impl(store: Any, user_id: str) -> dict[str, Any]:
    """Direct friends of a user."""
    from socialctl.services.query import QueryService

    return _run("friends", lambda: QueryService(store).friends(user_id))


def friends_of_friends_impl(store: Any, user_id: str) -> dict[str, Any]:
    """Friends of friends of a user."""
    from socialctl.services.query import QueryService

    return _run("friends_of_friends", lambda: QueryService(store).friends_of_friends(user_id))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_tools(server: Any, store: Any) -> None:
    """Register all tools on a FastMCP server instance."""

    @server.tool()  # type: ignore[untyped-decorator]
    def register_user(
        user_id: str,
        display_name: str,
        email: str | None = None,
    ) -> dict[str, Any]:
        """Register a new user with an alphanumeric id and a display name."""
        return register_user_impl(store, user_id, display_name, email=email)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_user(user_id: str) -> dict[str, Any]:
        """Get a single user by id."""
        return get_user_impl(store, user_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_users() -> dict[str, Any]:
        """List all registered users, newest first."""
        return list_users_impl(store)

    @server.tool()  # type: ignore[untyped-decorator]
    def connect(user_a: str, user_b: str) -> dict[str, Any]:
        """Create a friendship connection between two users."""
        return connect_impl(store, user_a, user_b)

    @server.tool()  # type: ignore[untyped-decorator]
    def disconnect(user_a: str, user_b: str) -> dict[str, Any]:
        """Remove the friendship connection between two users."""
        return disconnect_impl(store, user_a, user_b)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_connections() -> dict[str, Any]:
        """List every connection, newest first."""
        return list_connections_impl(store)

    @server.tool()  # type: ignore[untyped-decorator]
    def degree(from_user_id: str, to_user_id: str) -> dict[str, Any]:
        """Degree of separation between two users (-1 when not connected)."""
        return degree_impl(store, from_user_id, to_user_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def friends(user_id: str) -> dict[str, Any]:
        """Direct friends of a user, ordered by display name."""
        return friends_impl(store, user_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def friends_of_friends(user_id: str) -> dict[str, Any]:
        """Users exactly two hops away, ordered by display name."""
        return friends_of_friends_impl(store, user_id)
