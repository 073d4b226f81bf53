"""
Rule primitives for declarative validation.

A ``Rule`` pairs a field name with a predicate and the message reported when
the predicate fails. ``validate`` runs a rule table against any object and
returns the violations in rule order.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List


@dataclass(frozen=True)
class Rule:
    """A single field check and the message reported when it fails."""

    field: str
    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class RuleViolation:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


def not_empty(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def min_length(length: int) -> Callable[[Any], bool]:
    return lambda value: len(value or "") >= length


def max_length(length: int) -> Callable[[Any], bool]:
    return lambda value: len(value or "") <= length


def matches(pattern: str) -> Callable[[Any], bool]:
    compiled = re.compile(pattern)
    return lambda value: compiled.match(value or "") is not None


def email_address(value: Any) -> bool:
    """Exactly one '@' that is neither the first nor the last character."""
    text = value or ""
    index = text.find("@")
    return 0 < index < len(text) - 1 and index == text.rfind("@")


def validate(target: Any, rules: Iterable[Rule], prefix: str = "") -> List[RuleViolation]:
    """
    Evaluate every rule against ``target``.

    Args:
        target: Object whose attributes are checked
        rules: Rule table to run
        prefix: Prepended to field names in reported violations (e.g. "attachments[0].")

    Returns:
        Violations in rule order; a message repeated for the same field is reported once
    """
    violations: List[RuleViolation] = []
    for rule in rules:
        value = getattr(target, rule.field, None)
        if rule.check(value):
            continue
        violation = RuleViolation(field=f"{prefix}{rule.field}", message=rule.message)
        if violation not in violations:
            violations.append(violation)
    return violations
