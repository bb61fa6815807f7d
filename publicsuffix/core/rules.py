"""Public suffix rules.

A rule is one line of the Public Suffix List, normalized to lowercase and
split into labels stored right-to-left. Three kinds exist:

- Standard rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck means any label under ck is a public suffix)
- Exception rules (e.g., !www.ck means www.ck is NOT a public suffix)

All kinds share one matching and one parsing algorithm. The kind is a tag
the selection layer reads when several rules match the same host.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .canonical import canonicalize, normalize_name, split_reversed
from .constants import EXCEPTION_PREFIX, LABEL_SEPARATOR, WILDCARD_LABEL
from .models import Domain

# A URL string or a canonical, reversed label sequence
HostLike = Union[str, Sequence[str]]


class InvalidRuleError(ValueError):
    """Raised when a rule cannot be built from the supplied name."""
    pass


class RuleKind(enum.Enum):
    """Variant tag of a Rule."""

    STANDARD = "standard"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


def _labels_of(host: HostLike) -> Sequence[str]:
    """Canonicalize a URL string; pass label sequences through."""
    if isinstance(host, str):
        return canonicalize(host)
    return host


def _label_matches(rule_label: str, host_label: str) -> bool:
    return rule_label == host_label or rule_label == WILDCARD_LABEL


@dataclass(frozen=True)
class Rule:
    """
    Immutable public suffix rule.

    Build instances with Rule.create() or Rule.from_line(), which derive
    parts from name. An empty name is the root rule: it has no labels,
    matches every host and gives an empty TLD.
    """

    name: str  # Normalized: "co.uk" (no "!" for exceptions)
    parts: tuple[str, ...]  # Reversed labels: ("uk", "co")
    kind: RuleKind = RuleKind.STANDARD
    value: str = ""  # Raw rule text: "!www.ck"
    private: bool = False  # From the PRIVATE DOMAINS section

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidRuleError(f"Rule name must be a string, got {type(self.name).__name__}")
        if self.name != normalize_name(self.name):
            raise InvalidRuleError(f"Rule name must be lowercase: '{self.name}'")
        expected = tuple(split_reversed(self.name)) if self.name else ()
        if self.parts != expected:
            raise InvalidRuleError(f"Rule parts {self.parts!r} do not match name '{self.name}'")

    @classmethod
    def create(
        cls,
        name: str,
        kind: RuleKind = RuleKind.STANDARD,
        value: Optional[str] = None,
        private: bool = False,
    ) -> Rule:
        """
        Create a rule from a normalized-or-not rule name.

        Args:
            name: Rule name without any "!" prefix (e.g., "co.uk", "*.ck")
            kind: Variant tag
            value: Raw rule text; defaults to the normalized name
            private: Whether the rule is a private-domain rule

        Returns:
            A frozen Rule

        Raises:
            InvalidRuleError: If name is None or not a string
        """
        if name is None:
            raise InvalidRuleError("Rule name cannot be None")
        if not isinstance(name, str):
            raise InvalidRuleError(f"Rule name must be a string, got {type(name).__name__}")

        normalized = normalize_name(name)
        parts = tuple(split_reversed(normalized)) if normalized else ()
        return cls(
            name=normalized,
            parts=parts,
            kind=kind,
            value=normalized if value is None else value,
            private=private,
        )

    @classmethod
    def from_line(cls, line: str, private: bool = False) -> Rule:
        """
        Create the right rule variant from raw list text.

        "!www.ck" gives an exception rule, "*.ck" a wildcard rule and
        anything else a standard rule.
        """
        if line is None:
            raise InvalidRuleError("Rule line cannot be None")

        text = line.strip()
        if text.startswith(EXCEPTION_PREFIX):
            return cls.create(text[len(EXCEPTION_PREFIX):], RuleKind.EXCEPTION, value=text, private=private)

        if WILDCARD_LABEL in text.split(LABEL_SEPARATOR):
            return cls.create(text, RuleKind.WILDCARD, value=text, private=private)

        return cls.create(text, private=private)

    @property
    def length(self) -> int:
        """The number of labels."""
        return len(self.parts)

    @property
    def is_exception(self) -> bool:
        return self.kind is RuleKind.EXCEPTION

    @property
    def is_wildcard(self) -> bool:
        return self.kind is RuleKind.WILDCARD

    def is_match(self, host: HostLike) -> bool:
        """
        Check whether this rule matches a host.

        Labels are compared from the right. Every compared pair must be
        identical, or the rule label must be "*". Only the first
        min(len(host), self.length) labels are compared, so a rule longer
        than the host still matches when the labels it shares agree.

        Args:
            host: A URL (e.g., "http://www.google.com") or reversed labels

        Returns:
            True if the rule matches

        Raises:
            InvalidUrlError: If host is a string that is not a valid URL
        """
        labels = _labels_of(host)
        for rule_label, host_label in zip(self.parts, labels):
            if not _label_matches(rule_label, host_label):
                return False
        return True

    def parse(self, host: HostLike) -> Domain:
        """
        Split a host into TLD, main domain and sub domain using this rule.

        A host with fewer labels than the rule gives a partial Domain (TLD
        from the available labels, no main or sub domain) without raising.

        Args:
            host: A URL (e.g., "http://www.google.com") or reversed labels

        Returns:
            A new Domain instance
        """
        labels = list(_labels_of(host))
        length = self.length

        main = labels[length] if len(labels) > length else None
        return Domain(
            tld=LABEL_SEPARATOR.join(reversed(labels[:length])),
            main_domain=main,
            sub_domain=LABEL_SEPARATOR.join(reversed(labels[length + 1:])),
        )

    def without_leftmost_label(self) -> Rule:
        """Return the standard rule one label shorter (for exception rules)."""
        shorter = LABEL_SEPARATOR.join(reversed(self.parts[:-1]))
        return Rule.create(shorter, private=self.private)

    def __str__(self) -> str:
        return self.name
