"""Diagnostic logging for tldhunt.

Everything here goes to stderr so stdout stays clean for results (domain
lines, ``--json`` payloads, ``--quiet`` lists). Stdlib ``logging`` calls
from the whois and TLD modules and the structured ``probe.*`` events from
the retry engine share one handler, rendered for a terminal or, with
``--log-json``, as one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Libraries whose debug chatter would drown out probe events under -v.
_NOISY_LOGGERS = ("urllib3", "requests")


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route tldhunt diagnostics to stderr.

    Safe to call more than once; the root handler is replaced each time.

    Args:
        verbose: Show backoff and fetch details (DEBUG) instead of WARNING+.
        log_json: Emit JSON lines for log shippers.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("tldhunt").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
