"""Tests for rule selection."""

from __future__ import annotations

import pytest

from publicsuffix.core.canonical import InvalidUrlError
from publicsuffix.core.config import ResolverConfig
from publicsuffix.core.constants import FALLBACK_RULES
from publicsuffix.core.rule_set import RuleSet, default_rule_set
from publicsuffix.core.rules import Rule, RuleKind


class TestRuleSetConstruction:
    """Tests for building a RuleSet."""

    def test_from_text(self, sample_rule_set: RuleSet) -> None:
        assert len(sample_rule_set) == 7

    def test_contains_by_value_and_rule(self, sample_rule_set: RuleSet) -> None:
        """Membership works for raw values, names and Rule instances."""
        assert "!www.ck" in sample_rule_set
        assert "co.uk" in sample_rule_set
        assert Rule.create("co.uk") in sample_rule_set
        assert "example.com" not in sample_rule_set

    def test_iterates_rules(self, sample_rule_set: RuleSet) -> None:
        assert all(isinstance(r, Rule) for r in sample_rule_set)

    def test_excludes_private_rules_by_config(self, sample_rules_text: str) -> None:
        config = ResolverConfig(include_private_domains=False)
        rule_set = RuleSet.from_text(sample_rules_text, config)

        assert "github.io" not in rule_set
        assert len(rule_set) == 6

    def test_filters_private_rules_passed_directly(self) -> None:
        rules = [Rule.create("io"), Rule.create("github.io", private=True)]
        rule_set = RuleSet(rules, ResolverConfig(include_private_domains=False))

        assert len(rule_set) == 1

    def test_default_rule(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.default_rule.name == "*"
        assert sample_rule_set.default_rule.kind is RuleKind.WILDCARD


class TestMatch:
    """Tests for RuleSet.match."""

    def test_returns_all_matching_rules(self, sample_rule_set: RuleSet) -> None:
        matches = sample_rule_set.match("www.example.co.uk")

        assert sorted(r.name for r in matches) == ["co.uk", "uk"]

    def test_no_match_returns_empty_list(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.match("example.org") == []

    def test_ignores_rules_longer_than_host(self, sample_rule_set: RuleSet) -> None:
        """Rules with more labels than the host are left out by default."""
        names = [r.name for r in sample_rule_set.match("ck")]

        assert names == []

    def test_keeps_longer_rules_when_configured(self, sample_rules_text: str) -> None:
        rule_set = RuleSet.from_text(sample_rules_text, ResolverConfig(ignore_longer_rules=False))
        names = sorted(r.value for r in rule_set.match("ck"))

        assert names == ["!www.ck", "*.ck"]

    def test_accepts_labels(self, sample_rule_set: RuleSet) -> None:
        matches = sample_rule_set.match(["uk", "co", "example"])

        assert {r.name for r in matches} == {"co.uk", "uk"}


class TestPrevailingRule:
    """Tests for RuleSet.prevailing_rule."""

    def test_longest_rule_wins(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.prevailing_rule("www.example.co.uk").name == "co.uk"

    def test_exception_rule_wins(self, sample_rule_set: RuleSet) -> None:
        rule = sample_rule_set.prevailing_rule("www.ck")

        assert rule.kind is RuleKind.EXCEPTION
        assert rule.value == "!www.ck"

    def test_standard_beats_wildcard_of_equal_length(self) -> None:
        rule_set = RuleSet.from_text("jp\n*.jp\nexample.jp\n")
        rule = rule_set.prevailing_rule("www.example.jp")

        assert rule.kind is RuleKind.STANDARD
        assert rule.name == "example.jp"

    def test_default_rule_when_nothing_matches(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.prevailing_rule("example.org") is sample_rule_set.default_rule


class TestParse:
    """Tests for RuleSet.parse and helpers."""

    def test_standard_rule(self, sample_rule_set: RuleSet) -> None:
        domain = sample_rule_set.parse("http://www.example.co.uk/path")

        assert domain.tld == "co.uk"
        assert domain.main_domain == "example"
        assert domain.sub_domain == "www"

    def test_exception_rule_uses_shorter_suffix(self, sample_rule_set: RuleSet) -> None:
        """"!www.ck" makes "ck" the suffix and "www" the main domain."""
        domain = sample_rule_set.parse("www.ck")

        assert domain.tld == "ck"
        assert domain.main_domain == "www"
        assert domain.sub_domain == ""

    def test_exception_rule_with_sub_domain(self, sample_rule_set: RuleSet) -> None:
        domain = sample_rule_set.parse("a.b.www.ck")

        assert domain.registrable_domain == "www.ck"
        assert domain.sub_domain == "a.b"

    def test_wildcard_rule(self, sample_rule_set: RuleSet) -> None:
        domain = sample_rule_set.parse("shop.test.ck")

        assert domain.tld == "test.ck"
        assert domain.main_domain == "shop"

    def test_wildcard_suffix_only(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.parse("test.ck").main_domain is None

    def test_default_rule_uses_last_label(self, sample_rule_set: RuleSet) -> None:
        """With no matching rule the last label is the suffix."""
        domain = sample_rule_set.parse("www.example.org")

        assert domain.tld == "org"
        assert domain.main_domain == "example"
        assert domain.sub_domain == "www"

    def test_bare_suffix_under_wildcard(self, sample_rule_set: RuleSet) -> None:
        """"ck" alone falls back to the default rule."""
        domain = sample_rule_set.parse("ck")

        assert domain.tld == "ck"
        assert domain.main_domain is None

    def test_longer_rule_bounded_by_default(self) -> None:
        """A rule longer than the host does not become the suffix."""
        rule_set = RuleSet.from_text("uk\nexample.foo.uk\n")

        assert rule_set.parse("foo.uk").tld == "uk"
        assert rule_set.parse("foo.uk").main_domain == "foo"

    def test_longer_rule_partial_when_unbounded(self) -> None:
        """Without the bound the longer rule wins and parses partially."""
        rule_set = RuleSet.from_text("uk\nexample.foo.uk\n", ResolverConfig(ignore_longer_rules=False))
        domain = rule_set.parse("foo.uk")

        assert domain.tld == "foo.uk"
        assert domain.main_domain is None

    def test_private_rules(self, sample_rules_text: str) -> None:
        with_private = RuleSet.from_text(sample_rules_text + "io\n")
        without_private = RuleSet.from_text(sample_rules_text + "io\n", ResolverConfig(include_private_domains=False))

        assert with_private.get_public_suffix("foo.github.io") == "github.io"
        assert without_private.get_public_suffix("foo.github.io") == "io"

    def test_unicode_host(self) -> None:
        rule_set = RuleSet.from_text("公司.cn\ncn\n")
        domain = rule_set.parse("http://例子.公司.cn")

        assert domain.tld == "xn--55qx5d.cn"
        assert domain.main_domain == "xn--fsqu00a"

    def test_invalid_url_raises(self, sample_rule_set: RuleSet) -> None:
        with pytest.raises(InvalidUrlError):
            sample_rule_set.parse("http://[::1")

    def test_empty_host_raises(self, sample_rule_set: RuleSet) -> None:
        with pytest.raises(InvalidUrlError):
            sample_rule_set.parse("")

    def test_non_sequence_target_raises(self, sample_rule_set: RuleSet) -> None:
        """Targets that are neither strings nor label sequences are rejected."""
        with pytest.raises(InvalidUrlError, match="label sequence"):
            sample_rule_set.parse(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidUrlError):
            sample_rule_set.match(42)  # type: ignore[arg-type]

    def test_get_public_suffix(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.get_public_suffix("www.bbc.co.uk") == "co.uk"

    def test_get_registrable_domain(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.get_registrable_domain("www.bbc.co.uk") == "bbc.co.uk"
        assert sample_rule_set.get_registrable_domain("co.uk") is None

    def test_is_public_suffix(self, sample_rule_set: RuleSet) -> None:
        assert sample_rule_set.is_public_suffix("co.uk") is True
        assert sample_rule_set.is_public_suffix("uk") is True
        assert sample_rule_set.is_public_suffix("example.co.uk") is False


class TestDefaultRuleSet:
    """Tests for default_rule_set function."""

    def test_cached_result(self) -> None:
        """Returns cached result on subsequent calls."""
        assert default_rule_set() is default_rule_set()

    def test_built_from_fallback_rules(self) -> None:
        rule_set = default_rule_set()

        assert "co.uk" in rule_set
        assert "!www.ck" in rule_set
        assert len(rule_set) == len(RuleSet.from_text(FALLBACK_RULES))
