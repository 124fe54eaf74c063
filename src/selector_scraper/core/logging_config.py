"""Structured JSON logging configuration using structlog.

Call ``configure_logging()`` once at process start in ``cli.py``.
All modules can then use either the stdlib logging API or structlog directly:

Stdlib usage::

    import logging
    logger = logging.getLogger(__name__)
    logger.warning("scraper: skipping element: %s", exc)

Structlog usage (richer context binding)::

    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("scrape_completed", records=3, path="/data/site/result.json")

A ``run_id`` context variable is set by the CLI adapter for the lifetime of
one scrape and is merged into every log record emitted during that run, so
scheduled runs for several sites can be told apart in a shared log stream.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

import structlog
from structlog.types import EventDict, WrappedLogger

# ---------------------------------------------------------------------------
# Context variable, set by the CLI adapter and read by the log processor
# ---------------------------------------------------------------------------

run_id_var: ContextVar[str | None] = ContextVar("run_id", default=None)
"""Per-run ID propagated from the CLI adapter to log processors."""


def _inject_run_id(
    logger: WrappedLogger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Inject the current run ID into the log event dict if set.

    Args:
        logger: The wrapped logger instance (unused).
        method_name: The log method name (e.g. ``"info"``). Unused.
        event_dict: Mutable event dictionary being assembled.

    Returns:
        The event dict, possibly with ``run_id`` added.
    """
    rid = run_id_var.get()
    if rid is not None and "run_id" not in event_dict:
        event_dict["run_id"] = rid
    return event_dict


# ---------------------------------------------------------------------------
# Public configuration entry-point
# ---------------------------------------------------------------------------


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog with JSON output for unattended runs.

    When ``log_level`` is not ``"DEBUG"`` each record is one line of JSON,
    suitable for cron mail or a log collector.  With ``"DEBUG"`` structlog's
    ``ConsoleRenderer`` is used for human-readable output.

    Standard fields added to every log record:

    - ``timestamp``: ISO 8601 string.
    - ``level``: Log level name (``"info"``, ``"warning"``, etc.).
    - ``logger``: Module name that emitted the record.
    - ``run_id``: Current run ID (omitted outside a run).
    - ``event``: The log message string.

    Calling this more than once is safe; handlers are replaced, not stacked.

    Args:
        log_level: Logging verbosity string.  One of ``"DEBUG"``, ``"INFO"``,
            ``"WARNING"``, ``"ERROR"``, ``"CRITICAL"``.  Case-insensitive.
    """
    level_upper = log_level.upper()
    numeric_level = getattr(logging, level_upper, logging.INFO)
    is_development = level_upper == "DEBUG"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _inject_run_id,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_development:
        final_renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=True,
        )
    else:
        final_renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    # Route ``logging.getLogger(__name__)`` records through the same renderer.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final_renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    if not is_development:
        for noisy_logger in ("httpx", "httpcore"):
            logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
