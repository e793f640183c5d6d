"""Circle client factory.

Importing this module validates the Circle credentials; a missing
CIRCLE_API_KEY or CIRCLE_SECRET stops the server from starting.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from pydantic import ValidationError

from walletdesk.circle.client import CircleWalletsClient
from walletdesk.circle.errors import ConfigurationError
from walletdesk.config import get_settings

CREDENTIAL_FIELDS = ("circle_api_key", "circle_secret")

try:
    get_settings()
except ValidationError as e:
    missing = sorted(
        {
            str(error["loc"][0]).upper()
            for error in e.errors()
            if error["loc"] and error["loc"][0] in CREDENTIAL_FIELDS
        }
    )
    if missing:
        raise ConfigurationError(
            f"Missing required Circle environment variables: {', '.join(missing)}"
        ) from e
    raise ConfigurationError(f"Invalid configuration: {e}") from e

_server_context: ContextVar[bool] = ContextVar("walletdesk_server_context", default=False)


@contextmanager
def server_context() -> Iterator[None]:
    """Mark the current execution context as server-side."""
    token = _server_context.set(True)
    try:
        yield
    finally:
        _server_context.reset(token)


def is_server() -> bool:
    """Check whether we are running inside a server request."""
    return _server_context.get()


class ServerContextMiddleware:
    """ASGI middleware that runs every request inside ``server_context``."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        with server_context():
            await self.app(scope, receive, send)


def get_circle_client() -> CircleWalletsClient:
    """Create a Circle client from the configured credentials.

    Returns:
        A new CircleWalletsClient; the caller closes it

    Raises:
        RuntimeError: If called outside a server request
    """
    if not is_server():
        raise RuntimeError("The Circle client can only be created on the server")

    settings = get_settings()
    return CircleWalletsClient(
        api_key=settings.circle_api_key,
        entity_secret=settings.circle_secret,
        base_url=settings.circle_base_url,
        timeout=settings.request_timeout,
    )
