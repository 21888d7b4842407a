# quillblog/core/errors.py

from typing import Dict, List, Optional


class BlogError(Exception):
    """Base class for failures that map onto a single HTTP response."""
    status_code = 500
    default_message = "An unexpected error occurred."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"detail": self.message}


class ValidationError(BlogError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: Optional[List[Dict[str, str]]] = None, message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict:
        return {"detail": self.message, "errors": self.errors}


class NotFound(BlogError):
    status_code = 404
    default_message = "Not found"


class Forbidden(BlogError):
    status_code = 403
    default_message = "Not authorized"


class DuplicateEngagement(BlogError):
    status_code = 400
    default_message = "Already liked this post"


class Unauthenticated(BlogError):
    status_code = 401
    default_message = "Access token required"

    def __init__(self, message: Optional[str] = None, status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class Conflict(BlogError):
    status_code = 409
    default_message = "Resource already exists"


class InternalError(BlogError):
    status_code = 500
