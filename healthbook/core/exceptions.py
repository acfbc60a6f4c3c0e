from fastapi import status


class HealthbookError(Exception):
    """Base error; rendered by main.py as {"message": ...} with status_code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# Validation
class ValidationError(HealthbookError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"

class AlreadyExists(ValidationError):
    default_message = "User already exists"

class DuplicateEmail(AlreadyExists):
    """Raised by the credential store when the unique email index rejects an insert."""

class InvalidStatus(ValidationError):
    default_message = "Invalid appointment status"


# Authentication / authorization
class AuthError(HealthbookError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Authentication failed"

class UserNotFound(AuthError):
    default_message = "User not found"

class InvalidCredentials(AuthError):
    default_message = "Invalid credentials"

class RoleMismatch(AuthError):
    default_message = "Role does not match account"

class Unauthenticated(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token provided"

class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"

class PermissionDenied(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


# Lookups
class NotFoundError(HealthbookError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"

class AppointmentNotFound(NotFoundError):
    default_message = "Appointment not found"


class InvalidStatusTransition(HealthbookError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Appointment status can no longer be changed"
