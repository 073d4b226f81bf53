"""
Post request validation rules.

Attachment rules run once per attachment entry, with the entry index in the
reported field name.
"""

from typing import List

from pghub.constants import FieldLimits
from pghub.dtos.request.post_request import CreatePostRequest, UpdatePostRequest
from .rules import Rule, RuleViolation, max_length, not_empty, validate

POST_RULES: List[Rule] = [
    Rule("title", not_empty, "Title is required."),
    Rule("title", max_length(FieldLimits.POST_TITLE_MAX),
         f"Title must be less than {FieldLimits.POST_TITLE_MAX} characters long."),
    Rule("content", not_empty, "Content is required."),
    Rule("content", max_length(FieldLimits.POST_CONTENT_MAX),
         f"Content must be less than {FieldLimits.POST_CONTENT_MAX} characters long."),
]

ATTACHMENT_RULES: List[Rule] = [
    Rule("file_name", not_empty, "Attachment file name is required."),
    Rule("file_name", max_length(FieldLimits.ATTACHMENT_FILE_NAME_MAX),
         f"Attachment file name must be less than {FieldLimits.ATTACHMENT_FILE_NAME_MAX} characters long."),
]


def validate_post_request(request: CreatePostRequest | UpdatePostRequest) -> List[RuleViolation]:
    """Run the post and attachment rule tables against a create or update request."""
    violations = validate(request, POST_RULES)
    for index, attachment in enumerate(request.attachments):
        violations.extend(validate(attachment, ATTACHMENT_RULES, prefix=f"attachments[{index}]."))
    return violations
