from typing import Optional, Any
from utils.constants import USER_NOT_FOUND_MESSAGE, METHOD_NOT_ALLOWED_MESSAGE, NO_METHOD_MESSAGE

class UserHubError(Exception):
    """
    Base exception for UserHub application.
    Carries the status code and body text it maps to.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ResourceNotFoundError(UserHubError):
    """
    Raised when a requested user record is not found.
    """
    def __init__(self, message: str = USER_NOT_FOUND_MESSAGE, details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)

class MethodNotAllowedError(UserHubError):
    """
    Raised when the request verb is not one of GET/POST/PUT/DELETE.
    """
    def __init__(self, message: str = METHOD_NOT_ALLOWED_MESSAGE, details: Optional[Any] = None):
        super().__init__(message, code="METHOD_NOT_ALLOWED", status_code=405, details=details)

class MissingMethodError(UserHubError):
    """
    Raised when the inbound request carries no HTTP method at all.
    """
    def __init__(self, message: str = NO_METHOD_MESSAGE, details: Optional[Any] = None):
        super().__init__(message, code="MISSING_METHOD", status_code=500, details=details)
