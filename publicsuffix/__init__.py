"""PublicSuffix: split hostnames into public suffix, main domain and subdomain."""

from .core import (
    ConfigError,
    Domain,
    InvalidRuleError,
    InvalidUrlError,
    ResolverConfig,
    Rule,
    RuleKind,
    RuleSet,
    canonicalize,
    canonicalize_host,
    clear_cache,
    default_rule_set,
    parse_rules,
    parse_rules_text,
)
from .core.constants import APP_VERSION as __version__

__all__ = [
    "ConfigError",
    "Domain",
    "InvalidRuleError",
    "InvalidUrlError",
    "ResolverConfig",
    "Rule",
    "RuleKind",
    "RuleSet",
    "canonicalize",
    "canonicalize_host",
    "clear_cache",
    "default_rule_set",
    "parse_rules",
    "parse_rules_text",
]
