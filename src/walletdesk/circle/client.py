"""Circle developer-controlled wallets client.

Docs: https://developers.circle.com/w3s/reference
"""

import base64
import logging
import uuid
from typing import Any, Optional

import httpx
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding

from walletdesk.circle.errors import CircleAPIError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.circle.com"


class CircleWalletsClient:
    """Thin async client for the Circle W3S wallet and wallet-set endpoints.

    Every method returns the decoded JSON body unchanged, so callers read
    ``response["data"]["walletSets"]`` and friends exactly as the platform
    sends them.

    Usage:
        async with CircleWalletsClient(api_key, entity_secret) as sdk:
            response = await sdk.list_wallet_sets()
    """

    def __init__(
        self,
        api_key: str,
        entity_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Circle client.

        Args:
            api_key: Circle API key
            entity_secret: Hex-encoded entity secret
            base_url: Optional base URL override
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a mock one)
        """
        self.api_key = api_key
        self.entity_secret = entity_secret
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "CircleWalletsClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        logger.debug("Circle %s %s", method, path)
        response = await self._http.request(method, path, **kwargs)

        if response.is_success:
            return response.json()

        code = None
        message = response.reason_phrase or "Request failed"
        body: Any = response.text
        try:
            body = response.json()
        except ValueError:
            pass
        if isinstance(body, dict):
            code = body.get("code")
            message = body.get("message") or message

        raise CircleAPIError(
            status=response.status_code,
            message=message,
            code=code,
            body=body,
        )

    # ======================
    # Entity secret
    # ======================

    async def get_public_key(self) -> str:
        """Fetch the PEM encoded entity public key."""
        response = await self._request("GET", "/v1/w3s/config/entity/publicKey")
        return response["data"]["publicKey"]

    async def generate_entity_secret_ciphertext(self) -> str:
        """Encrypt the entity secret for a single mutating request.

        Circle rejects a reused ciphertext, and RSA-OAEP is randomized, so a
        new value is produced on every call.
        """
        pem = await self.get_public_key()
        public_key = serialization.load_pem_public_key(pem.encode())
        ciphertext = public_key.encrypt(
            bytes.fromhex(self.entity_secret),
            padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA256()),
                algorithm=hashes.SHA256(),
                label=None,
            ),
        )
        return base64.b64encode(ciphertext).decode()

    async def _signed_body(self, **fields: Any) -> dict:
        return {
            "idempotencyKey": str(uuid.uuid4()),
            "entitySecretCiphertext": await self.generate_entity_secret_ciphertext(),
            **fields,
        }

    # ======================
    # Wallet sets
    # ======================

    async def list_wallet_sets(self) -> dict:
        """List all wallet sets of the account."""
        return await self._request("GET", "/v1/w3s/walletSets")

    async def create_wallet_set(self, name: str) -> dict:
        """Create a developer-controlled wallet set."""
        body = await self._signed_body(name=name)
        return await self._request("POST", "/v1/w3s/developer/walletSets", json=body)

    # ======================
    # Wallets
    # ======================

    async def list_wallets(self, wallet_set_id: str) -> dict:
        """List wallets belonging to a wallet set."""
        return await self._request(
            "GET", "/v1/w3s/wallets", params={"walletSetId": wallet_set_id}
        )

    async def create_wallets(
        self,
        wallet_set_id: str,
        blockchains: list[str],
        count: int = 1,
        metadata: Optional[list[dict]] = None,
    ) -> dict:
        """Create ``count`` wallets on each of ``blockchains``.

        Args:
            wallet_set_id: Wallet set the wallets belong to
            blockchains: Blockchain identifiers (ETH-SEPOLIA, SOL, ...)
            count: Number of wallets per blockchain
            metadata: Optional per-wallet ``{name, refId}`` entries

        Returns:
            Decoded response, wallets under ``data.wallets``
        """
        fields: dict[str, Any] = {
            "walletSetId": wallet_set_id,
            "blockchains": blockchains,
            "count": count,
        }
        if metadata:
            fields["metadata"] = metadata
        body = await self._signed_body(**fields)
        return await self._request("POST", "/v1/w3s/developer/wallets", json=body)
