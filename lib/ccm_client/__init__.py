from .client import ConfigClient
from .errors import ApiError, AuthError, CcmClientError, NetworkError, NotFoundError

__all__ = ["ConfigClient", "ApiError", "AuthError", "CcmClientError", "NetworkError", "NotFoundError"]
