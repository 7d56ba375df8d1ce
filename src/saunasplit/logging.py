from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Hashable, Iterator

import structlog
from structlog.contextvars import bound_contextvars

from saunasplit.config import get_settings


SERVICE_NAME = "saunasplit"


def _add_service(logger: object, method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str | None = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            # session_id из session_context попадает в каждое событие
            structlog.contextvars.merge_contextvars,
            _add_service,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def session_context(session_id: Hashable, **extra: object) -> Iterator[None]:
    """Привязывает id сессии к логам ledger/billing внутри блока."""
    with bound_contextvars(session_id=session_id, **extra):
        yield
