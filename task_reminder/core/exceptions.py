"""
Domain errors raised by the stores and the auth layer.

Each error carries the HTTP status it maps to; ``main`` registers a single
handler that renders them as short plain-text responses.
"""
from fastapi import status


class ServiceError(Exception):
    """Base class for errors that are reported to the client"""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or invalid input, including past deadlines"""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    """Email already registered"""

    status_code = status.HTTP_409_CONFLICT


class AuthError(ServiceError):
    """Missing or invalid bearer token"""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(AuthError):
    """Login failed. Reported as 400 without saying which field was wrong."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """Task absent or not owned by the caller"""

    status_code = status.HTTP_404_NOT_FOUND
