"""Route stdlib and structlog records through one stderr handler.

Console rendering by default; ``--log-json`` switches to JSON lines.
``--verbose`` opens the ``socialctl`` loggers to DEBUG while third-party
loggers stay at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import ProcessorFormatter

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler; safe to call more than once."""
    structlog.configure(
        processors=[*_PRE_CHAIN, ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[ProcessorFormatter.remove_processors_meta, _renderer(log_json)],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    levels = {
        "socialctl": logging.DEBUG if verbose else logging.WARNING,
        "sqlalchemy.engine": logging.WARNING,
    }
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
