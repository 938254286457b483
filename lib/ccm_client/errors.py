from __future__ import annotations


class CcmClientError(Exception):
    """Base client error."""


class NetworkError(CcmClientError):
    """Transport/network layer error."""


class ApiError(CcmClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class NotFoundError(ApiError):
    """The requested entry or scope does not exist."""
