"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer, so a renamed key (``items`` vs ``friends``) fails fast in
tests rather than silently breaking the CLI or MCP clients.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](
    model_cls: type[T],
    data: dict[str, Any],
    *,
    exclude_none: bool = False,
) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python", exclude_none=exclude_none)


class UserRecord(BaseModel):
    """One stored user."""

    model_config = ConfigDict(extra="ignore")

    user_str_id: str
    display_name: str
    email: str | None = None
    status: str
    created_at: str
    updated_at: str


class UserListData(BaseModel):
    """Payload contract for ``UserService.list_users``."""

    count: int
    items: list[UserRecord]


class FriendItem(BaseModel):
    """One row of a friends / friends-of-friends listing."""

    id: str
    display_name: str


class FriendsResultData(BaseModel):
    """Payload contract for ``QueryService.friends`` and ``friends_of_friends``."""

    user_id: str
    count: int
    items: list[FriendItem]


class DegreeResultData(BaseModel):
    """Payload contract for ``QueryService.degree``.

    ``degree == -1`` always comes with ``message == "not_connected"``.
    """

    from_user_id: str
    to_user_id: str
    degree: int
    message: Literal["not_connected"] | None = None


class ConnectionRecord(BaseModel):
    """One stored edge, canonically ordered."""

    model_config = ConfigDict(extra="allow")

    id: int
    user1_str_id: str
    user2_str_id: str
    created_at: str


class ConnectionChangeData(ConnectionRecord):
    """Payload contract for ``ConnectionService.connect`` / ``disconnect``."""

    status: Literal["connection_added", "connection_removed"]


class ConnectionListData(BaseModel):
    """Payload contract for ``ConnectionService.list_connections``."""

    count: int
    items: list[ConnectionRecord]
