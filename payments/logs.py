import logging
import sys

import structlog


def get_logger(name: str):
    """Structured logger on top of stdlib logger *name*.

    Until `configure_logging` is called records go through stdlib defaults,
    that is WARNING and above to stderr.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = "WARNING", fmt: str = "console"):
    """Send structured log records to stderr, stdout is reserved for the snapshot."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level.upper(),
        force=True,
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
