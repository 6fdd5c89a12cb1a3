"""structlog on top of the stdlib logging tree.

Our own events and third-party stdlib records (uvicorn, sqlalchemy, alembic)
go through one handler, so both come out with the same timestamp, level,
logger name and bound request context.
"""

import logging
import sys

import structlog

# Applied to stdlib records that did not originate from structlog.
_FOREIGN_CHAIN = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer()]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_FOREIGN_CHAIN,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_FOREIGN_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_logs))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
