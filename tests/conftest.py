"""Shared pytest fixtures for PublicSuffix tests."""

import logging

import pytest

from publicsuffix.core.rule_set import RuleSet, clear_cache


SAMPLE_RULES = """\
// ===BEGIN ICANN DOMAINS===
com
uk
co.uk
jp

// ck
*.ck
!www.ck
// ===END ICANN DOMAINS===

// ===BEGIN PRIVATE DOMAINS===
github.io
// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(autouse=True)
def clear_rule_set_cache():
    """Clear the default rule set cache before and after each test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sample_rules_text():
    """Return a small list in public_suffix_list.dat format."""
    return SAMPLE_RULES


@pytest.fixture
def sample_rule_set(sample_rules_text):
    """Return a RuleSet built from the sample list."""
    return RuleSet.from_text(sample_rules_text)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
