"""Core module for PublicSuffix."""

from .canonical import InvalidUrlError, canonicalize, canonicalize_host
from .config import ConfigError, ResolverConfig
from .logging_config import setup_logging
from .models import Domain
from .rule_parser import parse_rules, parse_rules_text
from .rule_set import RuleSet, clear_cache, default_rule_set
from .rules import InvalidRuleError, Rule, RuleKind

__all__ = [
    # Canonicalization
    "canonicalize",
    "canonicalize_host",
    "InvalidUrlError",
    # Config
    "ResolverConfig",
    "ConfigError",
    # Logging
    "setup_logging",
    # Models
    "Domain",
    # Rules
    "Rule",
    "RuleKind",
    "InvalidRuleError",
    # Parsing
    "parse_rules",
    "parse_rules_text",
    # Selection
    "RuleSet",
    "default_rule_set",
    "clear_cache",
]
