"""Errors raised by the Circle accessor and client."""

from typing import Any, Optional


class ConfigurationError(RuntimeError):
    """Required configuration is missing; the server cannot start."""


class CircleAPIError(Exception):
    """Circle API answered with a non-2xx status."""

    def __init__(
        self,
        status: int,
        message: str,
        code: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(f"Circle API error {status}: {message}")
        self.status = status
        self.code = code
        self.message = message
        self.body = body

    def to_dict(self) -> dict:
        """Error value embedded in the API envelope."""
        return {
            "status": self.status,
            "code": self.code,
            "message": self.message,
        }
