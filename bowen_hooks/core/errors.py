"""Application error taxonomy

Every workflow failure is raised as one of these and surfaced unchanged to
the HTTP boundary, which turns ``status_code`` and ``message`` into the
error envelope.
"""

from typing import Any, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry their own HTTP mapping"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation failed"


class DuplicateEmailError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "DUPLICATE_EMAIL"
    message = "Email already registered"


class UnderageError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "UNDERAGE"
    message = "You must be at least 18 years old to register"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class AccountLockedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "ACCOUNT_LOCKED"
    message = "Account is temporarily locked due to multiple failed login attempts"


class NoTokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "NO_TOKEN"
    message = "Not authorized, no token provided"


class InvalidTokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_TOKEN"
    message = "Invalid token"


class TokenExpiredError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "TOKEN_EXPIRED"
    message = "Token expired"


class InvalidRefreshTokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_REFRESH_TOKEN"
    message = "Invalid refresh token"


class UserNotFoundError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "USER_NOT_FOUND"
    message = "User no longer exists"


class InactiveUserError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "USER_INACTIVE"
    message = "Account has been deactivated"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "You do not have permission to perform this action"
