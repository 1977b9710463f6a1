"""Command fixer: table-driven typo correction, first match wins."""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Sequence

import yaml

from .errors import RuleLoadError
from .models import FixRule

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "rules" / "typo_fixes.yaml"

_REQUIRED_RULE_KEYS = {"id", "pattern", "replacement"}


def load_fix_rules(path: Path) -> list[FixRule]:
    """Load an ordered fix-rule table from YAML, validating every entry."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RuleLoadError(f"rule file not found: {path}") from None
    except yaml.YAMLError as e:
        raise RuleLoadError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise RuleLoadError(f"{path}: expected a YAML mapping at top level")

    rules = data.get("rules", [])
    if not isinstance(rules, list):
        raise RuleLoadError(f"{path}: 'rules' must be a list")

    errors = _validate_rules(rules)
    if errors:
        joined = "\n  ".join(errors)
        raise RuleLoadError(f"{path}: rule validation failed:\n  {joined}")

    return [
        FixRule(
            id=str(r["id"]),
            pattern=str(r["pattern"]),
            replacement=str(r["replacement"]),
            regex=bool(r.get("regex", False)),
        )
        for r in rules
    ]


@lru_cache(maxsize=1)
def default_fix_rules() -> tuple[FixRule, ...]:
    """The bundled rule table, loaded once."""
    return tuple(load_fix_rules(DEFAULT_RULES_PATH))


def suggest_fix(cmd: str, rules: Sequence[FixRule] | None = None) -> str | None:
    """Return ``cmd`` corrected by the first matching rule, or None if no rule matches."""
    if rules is None:
        rules = default_fix_rules()

    for rule in rules:
        if rule.regex:
            if re.search(rule.pattern, cmd):
                logger.debug("fix rule %s matched %r", rule.id, cmd)
                return re.sub(rule.pattern, rule.replacement, cmd)
        elif rule.pattern in cmd:
            logger.debug("fix rule %s matched %r", rule.id, cmd)
            return cmd.replace(rule.pattern, rule.replacement)

    return None


def _validate_rules(rules: list) -> list[str]:
    """Validate that every rule has the required keys and a usable pattern."""
    errors: list[str] = []
    seen: set[str] = set()
    for i, rule in enumerate(rules):
        if not isinstance(rule, dict):
            errors.append(f"rules[{i}]: expected dict, got {type(rule).__name__}")
            continue
        rule_id = rule.get("id", "?")
        missing = _REQUIRED_RULE_KEYS - rule.keys()
        if missing:
            errors.append(f"rules[{i}] (id={rule_id}): missing keys: {sorted(missing)}")
        if rule_id in seen:
            errors.append(f"rules[{i}] (id={rule_id}): duplicate id")
        seen.add(rule_id)
        pattern = rule.get("pattern")
        if "pattern" in rule and (not isinstance(pattern, str) or not pattern):
            errors.append(f"rules[{i}] (id={rule_id}): 'pattern' must be a non-empty string")
        elif rule.get("regex") and isinstance(pattern, str):
            try:
                re.compile(pattern)
            except re.error as e:
                errors.append(f"rules[{i}] (id={rule_id}): invalid regex: {e}")
    return errors
