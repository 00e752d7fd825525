"""Application search – ResultSet returned to the caller."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["ResultSet"]


@dataclass(frozen=True)
class ResultSet:
    rows: tuple[dict[str, Any], ...] = ()
    total_count: int | None = None
    aggregations: Mapping[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict[str, Any]:
        """Render the ``{"data", "totalCount", "aggregations"}`` envelope."""
        payload: dict[str, Any] = {"data": list(self.rows), "totalCount": self.total_count}
        if self.aggregations:
            payload["aggregations"] = dict(self.aggregations)
        return payload
