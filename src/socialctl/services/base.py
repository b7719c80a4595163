"""BaseService — abstract foundation for all socialctl services.

Every service receives a :class:`Store` at construction time. The Store
provides transactional access to the relational tables and per-query
graph snapshots. Services own their transaction boundaries via
``self._store.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from socialctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from socialctl.infrastructure.store import Store, StoreTransaction

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ConnectionService(BaseService):
            def connect(self, a: str, b: str) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @staticmethod
    def _missing_vertex(
        txn: StoreTransaction,
        op: str,
        *user_ids: str,
    ) -> ServiceResult | None:
        """Return a VERTEX_NOT_FOUND result for the first unknown id, else None."""
        for user_id in user_ids:
            if not txn.vertex_exists(user_id):
                logger.debug("%s: unknown user %s", op, user_id)
                return ServiceResult.failure(
                    op,
                    ErrorCode.VERTEX_NOT_FOUND,
                    f"User '{user_id}' not found",
                    user_id=user_id,
                )
        return None
