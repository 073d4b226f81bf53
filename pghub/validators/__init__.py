"""
Declarative field validation.

Each DTO has a table of rules; every rule is evaluated and every failure is
reported, so clients see all problems with a request at once.
"""

from .rules import Rule, RuleViolation, validate
from .post_validator import validate_post_request
from .user_validator import validate_user_request

__all__ = [
    "Rule",
    "RuleViolation",
    "validate",
    "validate_post_request",
    "validate_user_request",
]
