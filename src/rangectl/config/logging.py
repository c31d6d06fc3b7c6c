"""structlog configuration for rangectl.

Every log line goes to stderr so stdout stays a clean export document.
Standard-library loggers (``logging.getLogger(__name__)`` throughout the
package) are routed through the same structlog formatter, so a rejected
import or a failing ``state_changed`` subscriber renders identically in
both modes:

- console (default): key/value lines, colored when stderr is a terminal
- JSON (``--log-json``): one object per line, tracebacks flattened to text
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

# Third-party loggers that never get more verbose than WARNING.
_QUIET_LIBRARIES = ("pluggy", "asyncio")


def _package_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _renderer(log_json: bool, out: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=out.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install the single rangectl log handler on the root logger.

    Args:
        verbose: Emit DEBUG records from ``rangectl.*`` (wins over *quiet*).
        quiet: Only emit ERROR records from ``rangectl.*``.
        log_json: Render JSON lines instead of console lines.
        stream: Destination for log lines (default: stderr at call time).

    Returns:
        The installed handler. Calling again replaces it.
    """
    out = stream or sys.stderr

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_json:
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("rangectl").setLevel(_package_level(verbose=verbose, quiet=quiet))
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
