"""HealthService — store reachability and size report."""

from __future__ import annotations

from socialctl import __version__
from socialctl.infrastructure.store import StoreUnavailableError
from socialctl.services.base import BaseService
from socialctl.services.result import ErrorCode, ServiceResult
from socialctl.services.telemetry import traced


class HealthService(BaseService):
    """Reports whether the store answers queries."""

    @traced
    def check(self) -> ServiceResult:
        """Ping the store and report user/connection counts.

        This is the one operation that reports an unreachable store as a
        result instead of letting the error propagate: answering that
        question is its whole job.
        """
        op = "health"
        try:
            with self._store.read() as txn:
                txn.ping()
                user_count = txn.count_users()
                edge_count = txn.count_edges()
        except StoreUnavailableError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.STORE_UNAVAILABLE,
                f"Database unreachable: {exc}",
                database="disconnected",
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "database": "connected",
                "dialect": self._store.engine.dialect.name,
                "users": user_count,
                "connections": edge_count,
                "version": __version__,
            },
        )
