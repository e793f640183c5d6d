"""Pytest configuration and fixtures."""

import base64
import json
import os
from typing import AsyncGenerator, Optional, Union

import httpx
import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["CIRCLE_API_KEY"] = "TEST_API_KEY:0123456789abcdef:fedcba9876543210"
os.environ["CIRCLE_SECRET"] = "ab" * 32
os.environ["CIRCLE_BASE_URL"] = "https://circle.test"

from walletdesk.circle import factory
from walletdesk.circle.client import CircleWalletsClient
from walletdesk.config import get_settings

ENTITY_SECRET = os.environ["CIRCLE_SECRET"]
PUBLIC_KEY_PATH = "/v1/w3s/config/entity/publicKey"


class FakeCircle:
    """Stand-in for the Circle W3S API behind an httpx.MockTransport.

    Register responses per (method, path); every request is recorded.
    The entity public key endpoint is always served.
    """

    def __init__(self, private_key: rsa.RSAPrivateKey):
        self.private_key = private_key
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Union[httpx.Response, Exception]] = {}

    @property
    def public_key_pem(self) -> str:
        return (
            self.private_key.public_key()
            .public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
            .decode()
        )

    def respond(self, method: str, path: str, json_body=None, status: int = 200) -> None:
        self._routes[(method, path)] = httpx.Response(status, json=json_body)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self._routes[(method, path)] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == PUBLIC_KEY_PATH:
            return httpx.Response(200, json={"data": {"publicKey": self.public_key_pem}})

        result = self._routes.get((request.method, request.url.path))
        if result is None:
            return httpx.Response(404, json={"code": -1, "message": "Not found"})
        if isinstance(result, Exception):
            raise result
        return result

    def client(self) -> CircleWalletsClient:
        settings = get_settings()
        return CircleWalletsClient(
            api_key=settings.circle_api_key,
            entity_secret=settings.circle_secret,
            base_url=settings.circle_base_url,
            transport=httpx.MockTransport(self.handler),
        )

    def sent(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last_body(self, method: str, path: str) -> Optional[dict]:
        requests = self.sent(method, path)
        return json.loads(requests[-1].content) if requests else None

    def decrypt(self, ciphertext: str) -> bytes:
        return self.private_key.decrypt(
            base64.b64decode(ciphertext),
            padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA256()),
                algorithm=hashes.SHA256(),
                label=None,
            ),
        )


@pytest.fixture(scope="session")
def entity_private_key() -> rsa.RSAPrivateKey:
    """RSA key pair standing in for Circle's entity key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def fake_circle(entity_private_key) -> FakeCircle:
    return FakeCircle(entity_private_key)


@pytest.fixture
def test_app(monkeypatch, fake_circle):
    """Application whose routes talk to the fake Circle API."""
    from walletdesk.api.app import create_app
    from walletdesk.api.routers import wallet_sets

    def get_fake_client() -> CircleWalletsClient:
        if not factory.is_server():
            raise RuntimeError("The Circle client can only be created on the server")
        return fake_circle.client()

    monkeypatch.setattr(wallet_sets, "get_circle_client", get_fake_client)
    return create_app()


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create async test client."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
