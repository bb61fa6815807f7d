"""Command line entry point for PublicSuffix.

Prints the TLD, main domain and subdomain of each URL or hostname given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .core.canonical import InvalidUrlError
from .core.config import ConfigError, ResolverConfig
from .core.constants import APP_NAME, APP_VERSION
from .core.logging_config import setup_logging
from .core.rule_set import RuleSet, default_rule_set

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Split URLs or hostnames into TLD, main domain and subdomain.",
    )
    parser.add_argument("targets", nargs="+", metavar="TARGET", help="URL or hostname")
    parser.add_argument("--rules", type=Path, help="public_suffix_list.dat file (default: built-in list)")
    parser.add_argument("--config", type=Path, help="JSON resolver configuration file")
    parser.add_argument("--json", action="store_true", help="print one JSON object per target")
    parser.add_argument("--debug", action="store_true", help="log debug output to the console")
    parser.add_argument("--log-file", type=Path, help="write a rotating debug log")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def _load_rule_set(rules_path: Path | None, config_path: Path | None) -> RuleSet:
    """Build the RuleSet from the optional rules and config files."""
    config = None
    if config_path is not None:
        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
        config = ResolverConfig.from_json(text)

    if rules_path is None:
        if config is None:
            return default_rule_set()
        return RuleSet(default_rule_set(), config)

    try:
        text = rules_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read rules file {rules_path}: {e}") from e
    logger.info("Loading rules from %s", rules_path)
    return RuleSet.from_text(text, config)


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success, 2 for configuration or input errors)
    """
    args = _build_parser().parse_args(argv)
    setup_logging(debug_mode=args.debug, log_file=args.log_file)

    try:
        rule_set = _load_rule_set(args.rules, args.config)
    except ConfigError as e:
        print(f"[{APP_NAME}] error: {e}", file=sys.stderr)
        return 2

    status = 0
    for target in args.targets:
        try:
            domain = rule_set.parse(target)
        except InvalidUrlError as e:
            print(f"[{APP_NAME}] error: {e}", file=sys.stderr)
            status = 2
            continue

        if args.json:
            print(json.dumps({"target": target, **domain.to_dict()}))
        else:
            print(target)
            print(f"  tld       : {domain.tld}")
            print(f"  main      : {domain.main_domain or ''}")
            print(f"  subdomain : {domain.sub_domain}")

    return status


if __name__ == "__main__":
    sys.exit(main())
