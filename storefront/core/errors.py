"""
Error types raised by services and rendered by the app as ``{message, error?}``.
"""
from typing import Any, Optional


class StorefrontError(Exception):
    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None, error: Any = None):
        if message is not None:
            self.message = message
        self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class Unauthorized(StorefrontError):
    status_code = 401
    message = "Access token required"


class Forbidden(StorefrontError):
    status_code = 403
    message = "Invalid token"


class Conflict(StorefrontError):
    status_code = 400
    message = "User already exists"


class InvalidCredentials(StorefrontError):
    status_code = 400
    message = "Invalid credentials"


class ServerError(StorefrontError):
    status_code = 500
    message = "Server error"
