"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, socialctl.toml only contains
overrides. A fresh deployment needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

from socialctl.domain.users import UserRules

# --- socialctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    url: str | None = None  # full SQLAlchemy URL; overrides filename when set
    filename: str = "socialctl.db"
    echo: bool = False


class UsersConfig(BaseModel):
    """[users] section."""

    model_config = {"frozen": True}

    id_min_length: int = 3
    id_max_length: int = 50
    display_name_max_length: int = 100

    def rules(self) -> UserRules:
        """Project this section onto the domain validation rules."""
        return UserRules(
            id_min_length=self.id_min_length,
            id_max_length=self.id_max_length,
            display_name_max_length=self.display_name_max_length,
        )


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    enabled: bool = True

