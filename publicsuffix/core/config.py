"""Configuration for PublicSuffix rule resolution."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

from .constants import DEFAULT_SETTINGS
from .rules import InvalidRuleError, Rule

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass(frozen=True)
class ResolverConfig:
    """Settings used by RuleSet when loading rules and selecting a rule."""

    include_private_domains: bool = DEFAULT_SETTINGS["include_private_domains"]
    default_rule: str = DEFAULT_SETTINGS["default_rule"]
    ignore_longer_rules: bool = DEFAULT_SETTINGS["ignore_longer_rules"]

    def __post_init__(self) -> None:
        errors = _validate_config(asdict(self))
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

    @property
    def fallback_rule(self) -> Rule:
        """The rule used when no rule in the set matches."""
        return Rule.from_line(self.default_rule)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResolverConfig:
        """
        Create instance from dictionary, filling missing keys with defaults.

        Raises:
            ConfigError: If the data is not a dict, has unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be an object, got {type(data).__name__}")

        unknown = sorted(set(data) - set(DEFAULT_SETTINGS))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        settings = DEFAULT_SETTINGS.copy()
        settings.update(data)
        return cls(**settings)

    @classmethod
    def from_json(cls, text: str) -> ResolverConfig:
        """Create instance from a JSON document."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config: {e}") from e
        return cls.from_dict(data)


def _validate_config(config: dict[str, Any]) -> list[str]:
    """Validate configuration values and return list of errors."""
    errors = []

    for key in ("include_private_domains", "ignore_longer_rules"):
        if not isinstance(config.get(key), bool):
            errors.append(f"'{key}' must be a boolean")

    default_rule = config.get("default_rule")
    if not isinstance(default_rule, str) or not default_rule.strip():
        errors.append("'default_rule' must be a non-empty string")
    else:
        try:
            rule = Rule.from_line(default_rule)
        except InvalidRuleError as e:
            errors.append(f"Invalid 'default_rule': {e}")
        else:
            if rule.is_exception:
                errors.append("'default_rule' cannot be an exception rule")

    return errors
