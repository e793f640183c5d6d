"""The ``{success, data|error}`` envelope shared by every API route."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Envelope returned by the local API."""

    success: bool = Field(..., description="Whether the platform call succeeded")
    data: Any = Field(None, description="Unwrapped platform payload")
    error: Any = Field(None, description="Error value when success is false")

    def error_message(self, fallback: str) -> Optional[str]:
        """Display text for a failed response.

        String errors are shown as-is; anything else falls back.
        """
        if self.success:
            return None
        return self.error if isinstance(self.error, str) else fallback
