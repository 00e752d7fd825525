"""Config settings – ElasticsearchSettings."""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_elasticsearch.config.settings.base import Settings
from mp_elasticsearch.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ElasticsearchSettings(Settings):
    """Connection settings for the Elasticsearch transport.

    Read from ``ELASTICSEARCH_*`` environment variables, e.g.
    ``ELASTICSEARCH_NODES=http://es1:9200,http://es2:9200``.
    """

    _prefix: dataclasses.ClassVar[str] = "ELASTICSEARCH"

    node: str | None = None
    nodes: list[str] = dataclasses.field(default_factory=list)
    api_key: str | None = None
    username: str | None = None
    password: str | None = None
    request_timeout: float | None = None
    verify_certs: bool = True

    def _validate(self) -> None:
        if not self.node and not self.nodes:
            self.node = "http://localhost:9200"
        if bool(self.username) != bool(self.password):
            raise InvalidSettingValueError(
                "username", self.username, "username and password must be set together"
            )
        self._require_positive("request_timeout")

    @property
    def hosts(self) -> list[str]:
        return list(self.nodes) if self.nodes else [self.node]  # type: ignore[list-item]

    def client_options(self) -> dict[str, Any]:
        """Keyword arguments for ``AsyncElasticsearch``."""
        options: dict[str, Any] = {"hosts": self.hosts, "verify_certs": self.verify_certs}
        if self.api_key:
            options["api_key"] = self.api_key
        if self.username:
            options["basic_auth"] = (self.username, self.password)
        if self.request_timeout is not None:
            options["request_timeout"] = self.request_timeout
        return options


__all__ = ["ElasticsearchSettings"]
