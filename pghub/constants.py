"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the
application: HTTP status codes, field limits, and client-facing messages.
"""


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class FieldLimits:
    """Length bounds enforced by the validators"""

    EMAIL_MIN = 5
    EMAIL_MAX = 100
    NAME_MIN = 3
    NAME_MAX = 100

    POST_TITLE_MAX = 200
    POST_CONTENT_MAX = 10000
    ATTACHMENT_FILE_NAME_MAX = 255


class ErrorMessages:
    """Generic client-facing error messages"""

    POST_NOT_FOUND = "Post not found"
    USER_NOT_FOUND = "User not found"
    POST_DELETE_FAILED = "An error occurred while deleting the post."
    USER_DELETE_FAILED = "An error occurred while deleting the user."
    VALIDATION_FAILED = "One or more validation errors occurred."
