"""Span timings for ``--verbose`` runs.

``@traced`` opens a root span around a service method and ``trace_span``
nests timed sections under it. When telemetry is off both cost one
ContextVar read. The finished tree is attached to the returned
:class:`ServiceResult` as ``meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Concatenate, ParamSpec

import structlog

from socialctl.services.result import ServiceResult

log = structlog.get_logger("socialctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("socialctl_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("socialctl_active_span", default=None)


@dataclass
class Span:
    """One timed section; ``children`` are the sections opened inside it."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    elapsed: float | None = None
    _started: float = field(default_factory=time.perf_counter, repr=False)

    @property
    def duration_ms(self) -> float:
        return 0.0 if self.elapsed is None else self.elapsed * 1000

    def end(self) -> None:
        self.elapsed = time.perf_counter() - self._started

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = self.annotations
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@contextmanager
def _open(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.end()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a section under the active span; yields None outside ``@traced``."""
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name)
    parent.children.append(child)
    with _open(child):
        yield child


_P = ParamSpec("_P")


def traced(
    method: Callable[Concatenate[Any, _P], ServiceResult],
) -> Callable[Concatenate[Any, _P], ServiceResult]:
    """Wrap a service method so verbose runs return its span tree in ``meta``."""

    @functools.wraps(method)
    def wrapper(self: Any, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return method(self, *args, **kwargs)
        with _open(Span(method.__qualname__)) as span:
            result = method(self, *args, **kwargs)
        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            ok=result.ok,
        )
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
