"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses

from mp_elasticsearch.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses set ``_prefix`` (environment variable prefix) and override
    :meth:`_validate` for cross-field checks.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _require_positive(self, name: str) -> None:
        value = getattr(self, name)
        if value is not None and value <= 0:
            raise InvalidSettingValueError(name, value, "must be positive")


__all__ = ["Settings"]
