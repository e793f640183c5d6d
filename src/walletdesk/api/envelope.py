"""Envelope builders for the API routes."""

from typing import Any

from fastapi.responses import JSONResponse

from walletdesk.circle.errors import CircleAPIError


def error_value(exc: Exception) -> Any:
    """The value embedded as ``error`` for a failed platform call."""
    if isinstance(exc, CircleAPIError):
        return exc.to_dict()
    return str(exc) or type(exc).__name__


def success_response(data: Any) -> JSONResponse:
    return JSONResponse({"success": True, "data": data})


def error_response(error: Any, status_code: int = 500) -> JSONResponse:
    return JSONResponse({"success": False, "error": error}, status_code=status_code)
