"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

# Credentials accepted by the Elasticsearch client settings.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "api_key",
        "authorization",
        "basic_auth",
        "bearer_auth",
        "password",
        "secret",
        "token",
    }
)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Top-level keys in *skip_keys* pass through untouched when used as a
    processor; by default that is the compiled ``search`` document, whose
    field names are index attributes, not credentials.
    """

    REDACTED = "[REDACTED]"

    def __init__(
        self,
        sensitive_fields: frozenset[str] | None = None,
        skip_keys: frozenset[str] = frozenset({"search"}),
    ) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))
        self._skip_keys = skip_keys

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any], skip_keys: frozenset[str] = frozenset()) -> dict[str, Any]:
        """Recursively redact nested dicts; *skip_keys* apply to the top level only."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif k in skip_keys:
                result[k] = v
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict, self._skip_keys)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
