"""Circle developer-controlled wallets access.

Import ``walletdesk.circle.factory`` for ``get_circle_client``; that import
validates the Circle credentials.
"""

from walletdesk.circle.client import CircleWalletsClient
from walletdesk.circle.errors import CircleAPIError, ConfigurationError

__all__ = [
    "CircleAPIError",
    "CircleWalletsClient",
    "ConfigurationError",
]
