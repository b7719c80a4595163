"""UserService — vertex registration and lookup.

Users are created once and never mutated or deleted here.
"""

from __future__ import annotations

import logging

from socialctl.domain.users import validate_registration
from socialctl.infrastructure.store import UserConflictError
from socialctl.services._helpers import now_iso
from socialctl.services.base import BaseService
from socialctl.services.contracts import UserListData, UserRecord, dump_validated
from socialctl.services.result import ErrorCode, ServiceResult
from socialctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Handles user registration and lookup."""

    @traced
    def register(
        self,
        user_id: str,
        display_name: str,
        *,
        email: str | None = None,
    ) -> ServiceResult:
        """Register a new user.

        All field problems are reported together under VALIDATION_FAILED.
        """
        op = "register_user"
        problems = validate_registration(
            user_id,
            display_name,
            email,
            rules=self._store.settings.users.rules(),
        )
        if problems:
            return ServiceResult.failure(
                op,
                ErrorCode.VALIDATION_FAILED,
                "; ".join(problems),
                problems=problems,
            )

        try:
            with self._store.transaction() as txn:
                if txn.vertex_exists(user_id):
                    return self._user_exists(op, user_id)
                row = txn.insert_user(user_id, display_name, email, now_iso())
        except UserConflictError:
            return self._user_exists(op, user_id)

        logger.info("Registered user %s", user_id)
        return ServiceResult(ok=True, op=op, data=dump_validated(UserRecord, row))

    @traced
    def get(self, user_id: str) -> ServiceResult:
        """Fetch one user by id."""
        op = "get_user"
        with self._store.read() as txn:
            row = txn.get_user(user_id)
        if row is None:
            return ServiceResult.failure(
                op,
                ErrorCode.VERTEX_NOT_FOUND,
                f"User '{user_id}' not found",
                user_id=user_id,
            )
        return ServiceResult(ok=True, op=op, data=dump_validated(UserRecord, row))

    @traced
    def list_users(self) -> ServiceResult:
        """All registered users, newest first."""
        with self._store.read() as txn:
            rows = txn.list_users()
        return ServiceResult(
            ok=True,
            op="list_users",
            data=dump_validated(UserListData, {"count": len(rows), "items": rows}),
        )

    @staticmethod
    def _user_exists(op: str, user_id: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.USER_EXISTS,
            "User with this ID already exists",
            user_id=user_id,
        )
