"""
Custom exception classes for the application.

This module defines domain-specific exceptions that distinguish the failure
kinds the API reports: missing entities, rule violations, conflicts with
existing data, and persistence failures.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a requested entity does not exist"""

    def __init__(self, entity: str, entity_id: str):
        self.entity_id = entity_id
        details = {"entity": entity, "id": entity_id}
        super().__init__(f"{entity} with ID {entity_id} not found", details)


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist"""

    def __init__(self, post_id: str):
        super().__init__("Post", post_id)


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist"""

    def __init__(self, user_id: str):
        super().__init__("User", user_id)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        details = {"errors": self.errors} if self.errors else {}
        super().__init__(message, details)


class ConflictError(ApplicationError):
    """Raised when a write would collide with existing data"""


class DuplicateEmailError(ConflictError):
    """Raised when an email address is already registered"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email {email} is already registered", {"email": email})


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
