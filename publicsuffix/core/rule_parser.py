"""Public Suffix List parser.

Turns list text (the public_suffix_list.dat format) into Rule instances.
Reading the file is left to the caller.

This implementation handles:
- Standard rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck)
- Exception rules (e.g., !www.ck)
- The ICANN / PRIVATE section markers
- Unicode rules, stored in punycode form to match canonical hosts
"""

from __future__ import annotations

import logging
from typing import Iterable

import idna

from .constants import (
    COMMENT_PREFIX,
    EXCEPTION_PREFIX,
    LABEL_SEPARATOR,
    PRIVATE_SECTION_BEGIN,
    PRIVATE_SECTION_END,
    WILDCARD_LABEL,
)
from .rules import Rule, RuleKind

logger = logging.getLogger(__name__)


def _to_ascii(text: str) -> str:
    """Encode each non-ASCII label of a rule with IDNA, keeping "!" and "*"."""
    if text.isascii():
        return text

    prefix = ""
    if text.startswith(EXCEPTION_PREFIX):
        prefix, text = EXCEPTION_PREFIX, text[len(EXCEPTION_PREFIX):]

    labels = []
    for label in text.split(LABEL_SEPARATOR):
        if label == WILDCARD_LABEL or label.isascii():
            labels.append(label.lower())
        else:
            labels.append(idna.encode(label, uts46=True).decode("ascii"))
    return prefix + LABEL_SEPARATOR.join(labels)


def parse_rules(lines: Iterable[str], include_private: bool = True) -> list[Rule]:
    """
    Parse rules from an iterable of list lines.

    Args:
        lines: Lines in public_suffix_list.dat format
        include_private: Keep rules from the PRIVATE DOMAINS section

    Returns:
        Rules in list order, without duplicates
    """
    rules: list[Rule] = []
    seen: set[tuple[RuleKind, str]] = set()
    in_private = False
    skipped = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()

        # Skip blank lines, track section markers in comments
        if not line:
            continue
        if line.startswith(COMMENT_PREFIX):
            if PRIVATE_SECTION_BEGIN in line:
                in_private = True
            elif PRIVATE_SECTION_END in line:
                in_private = False
            continue

        if in_private and not include_private:
            continue

        # Only the first whitespace-delimited token is the rule
        token = line.split()[0]

        try:
            text = _to_ascii(token)
        except idna.IDNAError as e:
            logger.warning("Skipping rule %r on line %d: %s", token, line_number, e)
            skipped += 1
            continue

        rule = Rule.from_line(text, private=in_private)
        key = (rule.kind, rule.name)
        if key in seen:
            continue
        seen.add(key)
        rules.append(rule)

    logger.info(
        "Parsed PSL: %d rules (%d wildcards, %d exceptions, %d private), %d skipped",
        len(rules),
        sum(1 for r in rules if r.is_wildcard),
        sum(1 for r in rules if r.is_exception),
        sum(1 for r in rules if r.private),
        skipped,
    )
    return rules


def parse_rules_text(text: str, include_private: bool = True) -> list[Rule]:
    """Parse rules from the full text of a list."""
    return parse_rules(text.splitlines(), include_private=include_private)
