"""Application search – compiled Elasticsearch search document."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

__all__ = ["SearchQueryDocument"]


@dataclass(frozen=True)
class SearchQueryDocument:
    """The payload handed to the transport: target index, body and projection."""
    index: str
    body: dict[str, Any] = field(default_factory=dict)
    source: list[str] | None = None
    search_type: str | None = None

    @property
    def is_count_only(self) -> bool:
        return self.search_type == "count"

    def to_dict(self) -> dict[str, Any]:
        """Render the ``{index, body, _source, search_type}`` transport payload."""
        payload: dict[str, Any] = {"index": self.index, "body": copy.deepcopy(self.body)}
        if self.source is not None:
            payload["_source"] = list(self.source)
        if self.search_type is not None:
            payload["search_type"] = self.search_type
        return payload
