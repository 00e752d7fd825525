"""Observability – get_logger helper and structlog processors."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def drop_search_bodies(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """structlog processor that drops compiled search bodies above debug level.

    Search documents can be large; they are only useful while debugging.
    """
    if method_name != "debug":
        event_dict.pop("search", None)
    return event_dict


__all__ = ["drop_search_bodies", "get_logger"]
