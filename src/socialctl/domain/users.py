"""User id and registration validation rules.

User ids are opaque, externally assigned strings. The only constraints
are shape constraints: alphanumeric, bounded length.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRules(BaseModel):
    """Bounds applied to user registration fields."""

    model_config = {"frozen": True}

    id_min_length: int = 3
    id_max_length: int = 50
    display_name_max_length: int = 100


DEFAULT_RULES = UserRules()


def validate_user_id(user_id: str, rules: UserRules = DEFAULT_RULES) -> list[str]:
    """Return a list of problems with *user_id* (empty when valid)."""
    problems: list[str] = []
    if not user_id:
        return ["user_str_id is required"]
    if not user_id.isascii() or not user_id.isalnum():
        problems.append("user_str_id must contain only alphanumeric characters")
    if len(user_id) < rules.id_min_length:
        problems.append(f"user_str_id must be at least {rules.id_min_length} characters long")
    if len(user_id) > rules.id_max_length:
        problems.append(f"user_str_id must not exceed {rules.id_max_length} characters")
    return problems


def validate_registration(
    user_id: str,
    display_name: str,
    email: str | None = None,
    *,
    rules: UserRules = DEFAULT_RULES,
) -> list[str]:
    """Validate every registration field, collecting all problems."""
    problems = validate_user_id(user_id, rules)

    if not display_name or not display_name.strip():
        problems.append("display_name cannot be empty")
    elif len(display_name) > rules.display_name_max_length:
        problems.append(
            f"display_name must not exceed {rules.display_name_max_length} characters"
        )

    if email is not None and not _EMAIL_RE.match(email):
        problems.append("Please provide a valid email address")

    return problems
