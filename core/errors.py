"""
Error types for the messaging API.

Each error carries the HTTP status it is rendered with; main.py turns them
into ``{"error": <message>}`` bodies.
"""

from typing import Optional


class MessagingError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(MessagingError):
    status_code = 400


class NotFoundError(MessagingError):
    status_code = 404


class ForbiddenError(MessagingError):
    status_code = 403


class StoreError(MessagingError):
    def __init__(self, detail: str, message: Optional[str] = None):
        super().__init__(message or f"Server error: {detail}")
        self.detail = detail


INDEX_REQUIRED_HINT = "Database index required. Check Firestore console for index creation link."


class IndexRequiredError(StoreError):
    def __init__(self, detail: str = ""):
        super().__init__(detail, message=INDEX_REQUIRED_HINT)


class ConfigurationError(Exception):
    """Raised at startup when the store cannot be bootstrapped."""
