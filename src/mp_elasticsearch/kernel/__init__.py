"""Kernel – framework-agnostic building blocks."""

from mp_elasticsearch.kernel.errors import (
    ApplicationError,
    BaseError,
    QueryCompilationError,
    RequestError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "QueryCompilationError",
    "RequestError",
]
