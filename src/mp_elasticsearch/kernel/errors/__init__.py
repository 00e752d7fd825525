"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── QueryCompilationError              (compilation.py)
    │   ├── UnsupportedOperatorError
    │   ├── InvalidAggregationError
    │   │   └── AggregationAliasConflictError
    │   └── UnsupportedAggregationError
    └── ApplicationError                   (application.py)
        └── RequestError
"""

from mp_elasticsearch.kernel.errors.application import ApplicationError, RequestError
from mp_elasticsearch.kernel.errors.base import BaseError
from mp_elasticsearch.kernel.errors.compilation import (
    AggregationAliasConflictError,
    InvalidAggregationError,
    QueryCompilationError,
    UnsupportedAggregationError,
    UnsupportedOperatorError,
)

__all__ = [
    "AggregationAliasConflictError",
    "ApplicationError",
    "BaseError",
    "InvalidAggregationError",
    "QueryCompilationError",
    "RequestError",
    "UnsupportedAggregationError",
    "UnsupportedOperatorError",
]
