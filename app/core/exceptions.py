from typing import Optional, Any

class IdentityError(Exception):
    """
    Base exception for the Medicover API.
    Raised directly, it is the unclassified internal error (500).
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(IdentityError):
    """
    Raised when required input is missing or malformed.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class ConflictError(IdentityError):
    """
    Raised when an email is already taken by another user.
    """
    def __init__(self, message: str = "User already exists", details: Optional[Any] = None):
        super().__init__(message, code="CONFLICT", status_code=400, details=details)

class AuthError(IdentityError):
    """
    Raised on bad credentials or a missing bearer token.
    """
    def __init__(self, message: str = "Authentication failed", details: Optional[Any] = None):
        super().__init__(message, code="AUTHENTICATION_FAILED", status_code=401, details=details)

class NotFoundError(IdentityError):
    """
    Raised when no user matches an email or token.
    """
    def __init__(self, message: str = "User not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)
