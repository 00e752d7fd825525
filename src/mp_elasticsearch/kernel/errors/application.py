"""Application-layer errors — failures reported back to the calling framework."""

from __future__ import annotations

from typing import Any

from mp_elasticsearch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RequestError(ApplicationError):
    """The search engine rejected the request as malformed (HTTP 400).

    ``original_error`` keeps the transport exception for diagnostics while
    callers only ever need to handle this type.
    """

    default_code = "bad_request"

    def __init__(
        self,
        message: str,
        *,
        original_error: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, cause=original_error, **kwargs)
        self.original_error = original_error
        self.original_error_name = (
            type(original_error).__name__ if original_error is not None else None
        )
        self.detail.setdefault("original_error", self.original_error_name)

    @classmethod
    def from_engine_error(cls, error: BaseException, engine: str = "elasticsearch") -> "RequestError":
        """Wrap a transport-level bad-request error."""
        return cls(f"{type(error).__name__} from {engine}.", original_error=error)

    @property
    def info(self) -> dict[str, Any]:
        return {"original_error": self.original_error}


__all__ = ["ApplicationError", "RequestError"]
