"""
User request validation rules.
"""

from typing import List

from pghub.constants import FieldLimits
from pghub.dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from .rules import Rule, RuleViolation, email_address, matches, max_length, min_length, not_empty, validate

EMAIL_DOMAIN_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
EMAIL_FORMAT_PATTERN = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"


def _name_rules(field: str, label: str) -> List[Rule]:
    return [
        Rule(field, not_empty, f"{label} is required."),
        Rule(field, min_length(FieldLimits.NAME_MIN),
             f"{label} must be at least {FieldLimits.NAME_MIN} characters long."),
        Rule(field, max_length(FieldLimits.NAME_MAX),
             f"{label} must be less than {FieldLimits.NAME_MAX} characters long."),
    ]


USER_RULES: List[Rule] = [
    Rule("email", not_empty, "Email is required."),
    Rule("email", min_length(FieldLimits.EMAIL_MIN),
         f"Email must be at least {FieldLimits.EMAIL_MIN} characters long."),
    Rule("email", max_length(FieldLimits.EMAIL_MAX),
         f"Email must be less than {FieldLimits.EMAIL_MAX} characters long."),
    Rule("email", email_address, "Invalid email format."),
    Rule("email", matches(EMAIL_DOMAIN_PATTERN), "Email must have a valid domain (e.g., .com, .ro, etc.)."),
    Rule("email", matches(EMAIL_FORMAT_PATTERN), "Invalid email format."),
    *_name_rules("first_name", "First name"),
    *_name_rules("last_name", "Last name"),
]


def validate_user_request(request: CreateUserRequest | UpdateUserRequest) -> List[RuleViolation]:
    """Run the user rule table against a create or update request."""
    return validate(request, USER_RULES)
