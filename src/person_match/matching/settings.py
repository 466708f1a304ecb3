# src/person_match/matching/settings.py

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from person_match.core.exceptions import ConfigError


@dataclass(frozen=True)
class MatchSettings:
    """
    Thresholds for ``full_compare``.

    Defaults are the empirically tuned values; the ``matching`` section of
    ``config/person_match.yml`` may override any of them.
    """

    straight_limit: float = 0.7
    smart_limit: float = 0.96
    token_limit: float = 0.88
    slug_jaro_limit: float = 0.95
    min_containment_length: int = 10
    scaling_factor: float = 0.1
    max_splits: int = 7
    thorough_fallback: bool = False

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "MatchSettings":
        if not section:
            return cls()

        known = {f.name: f for f in fields(cls)}
        values = {}
        for key, raw in section.items():
            field_ = known.get(key)
            if field_ is None:
                raise ConfigError(f"Unknown matching setting: {key!r}")
            default = field_.default
            try:
                if isinstance(default, bool):
                    if not isinstance(raw, bool):
                        raise TypeError(f"expected true/false, got {raw!r}")
                    values[key] = raw
                else:
                    values[key] = type(default)(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for matching.{key}: {exc}") from exc

        return cls(**values)

    def compare_kwargs(self) -> dict:
        """Keyword arguments for ``compare_two_names``."""
        return {
            "straight_limit": self.straight_limit,
            "smart_limit": self.smart_limit,
            "token_limit": self.token_limit,
            "scaling_factor": self.scaling_factor,
        }


DEFAULT_SETTINGS = MatchSettings()
