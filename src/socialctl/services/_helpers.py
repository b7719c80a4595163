"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso() -> str:
    """Current UTC time as standard ISO 8601 (for created_at/updated_at)."""
    return datetime.now(UTC).isoformat()


def by_display_name(rows: list[dict[str, str]]) -> list[dict[str, str]]:
    """Order ``{id, display_name}`` rows by display name, then id.

    The id tiebreak keeps output stable when two users share a name.
    """
    return sorted(rows, key=lambda row: (row["display_name"], row["id"]))
