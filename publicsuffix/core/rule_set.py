"""Rule selection for PublicSuffix.

Picks the prevailing rule for a host out of a set of rules:

1. If an exception rule matches, it prevails; the public suffix is that
   rule minus its leftmost label.
2. Otherwise the matching rule with the most labels prevails, standard
   rules ahead of wildcard rules of the same length.
3. If nothing matches, the default rule ("*") prevails.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Sequence

from .canonical import InvalidUrlError, canonicalize, canonicalize_host
from .config import ResolverConfig
from .constants import FALLBACK_RULES, WILDCARD_LABEL
from .models import Domain
from .rule_parser import parse_rules_text
from .rules import HostLike, Rule

logger = logging.getLogger(__name__)


def _host_labels(target: HostLike) -> Sequence[str]:
    """Canonicalize a URL or bare hostname; pass label sequences through."""
    if isinstance(target, str):
        if "://" in target:
            return canonicalize(target)
        return canonicalize_host(target)
    if not isinstance(target, Sequence):
        raise InvalidUrlError(f"Target must be a URL, hostname or label sequence, got {type(target).__name__}")
    return target


def _precedence(rule: Rule) -> tuple[int, int]:
    return (rule.length, 0 if rule.is_wildcard else 1)


class RuleSet:
    """
    Indexed set of public suffix rules.

    Rules are bucketed by their rightmost label so a lookup only compares
    rules that can match. Instances are read-only after construction.
    """

    def __init__(self, rules: Iterable[Rule], config: ResolverConfig | None = None):
        """
        Initialize RuleSet.

        Args:
            rules: Rules to index (e.g., from parse_rules())
            config: Resolver settings, defaults to ResolverConfig()
        """
        self.config = config or ResolverConfig()
        self._default_rule = self.config.fallback_rule
        self._rules: list[Rule] = []
        self._by_tld: dict[str, list[Rule]] = defaultdict(list)
        self._catch_all: list[Rule] = []

        for rule in rules:
            if rule.private and not self.config.include_private_domains:
                continue
            self._rules.append(rule)
            if not rule.parts or rule.parts[0] == WILDCARD_LABEL:
                self._catch_all.append(rule)
            else:
                self._by_tld[rule.parts[0]].append(rule)

    @classmethod
    def from_text(cls, text: str, config: ResolverConfig | None = None) -> RuleSet:
        """Build a RuleSet from list text in public_suffix_list.dat format."""
        config = config or ResolverConfig()
        rules = parse_rules_text(text, include_private=config.include_private_domains)
        return cls(rules, config)

    @property
    def default_rule(self) -> Rule:
        return self._default_rule

    def match(self, target: HostLike) -> list[Rule]:
        """
        Return every rule that matches the host.

        Rules longer than the host are left out unless
        config.ignore_longer_rules is False.
        """
        labels = _host_labels(target)
        if not labels:
            return []

        candidates = self._by_tld.get(labels[0], []) + self._catch_all
        matches = [r for r in candidates if r.is_match(labels)]
        if self.config.ignore_longer_rules:
            matches = [r for r in matches if r.length <= len(labels)]
        return matches

    def prevailing_rule(self, target: HostLike) -> Rule:
        """Return the rule that decides the public suffix of the host."""
        labels = _host_labels(target)
        matches = self.match(labels)

        exceptions = [r for r in matches if r.is_exception]
        if exceptions:
            rule = max(exceptions, key=lambda r: r.length)
        elif matches:
            rule = max(matches, key=_precedence)
        else:
            rule = self._default_rule

        logger.debug("Prevailing rule for %s: %s (%d matches)", ".".join(reversed(labels)), rule.value, len(matches))
        return rule

    def parse(self, target: HostLike) -> Domain:
        """
        Split a URL, hostname or reversed label list into a Domain.

        Raises:
            InvalidUrlError: If the target cannot be canonicalized
        """
        labels = _host_labels(target)
        rule = self.prevailing_rule(labels)
        if rule.is_exception:
            rule = rule.without_leftmost_label()
        return rule.parse(labels)

    def get_public_suffix(self, target: HostLike) -> str:
        """Return the public suffix, e.g. "co.uk" for "www.bbc.co.uk"."""
        return self.parse(target).tld

    def get_registrable_domain(self, target: HostLike) -> Optional[str]:
        """Return the registrable domain, or None if the host is a public suffix."""
        return self.parse(target).registrable_domain

    def is_public_suffix(self, target: HostLike) -> bool:
        """Check whether the whole host is a public suffix."""
        return self.parse(target).main_domain is None

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule: object) -> bool:
        if isinstance(rule, str):
            return any(r.value == rule or r.name == rule for r in self._rules)
        return rule in self._rules


@lru_cache(maxsize=1)
def default_rule_set() -> RuleSet:
    """
    Build the RuleSet for the built-in fallback list.

    Uses LRU cache to avoid re-parsing.
    """
    logger.debug("Building default rule set from fallback rules")
    return RuleSet.from_text(FALLBACK_RULES)


def clear_cache() -> None:
    """Clear the LRU cache for testing purposes."""
    default_rule_set.cache_clear()
