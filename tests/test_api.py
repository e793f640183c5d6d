"""Tests for the FastAPI endpoints."""

import json
import uuid

import httpx
import pytest

ENTITY_SECRET = "ab" * 32

WALLET_SETS_PATH = "/v1/w3s/walletSets"
CREATE_WALLET_SET_PATH = "/v1/w3s/developer/walletSets"
WALLETS_PATH = "/v1/w3s/wallets"
CREATE_WALLETS_PATH = "/v1/w3s/developer/wallets"

WALLET_SET = {
    "id": "f270e785-0a7b-578d-a43c-bd514fcc4d49",
    "custodyType": "DEVELOPER",
    "name": "Treasury",
    "updateDate": "2024-11-27T10:14:52Z",
    "createDate": "2024-11-27T10:14:52Z",
}

WALLET = {
    "id": "142e39d4-807f-5e0a-a1ba-8869365cf316",
    "state": "LIVE",
    "walletSetId": WALLET_SET["id"],
    "custodyType": "DEVELOPER",
    "name": "Hot wallet",
    "address": "0xf6c9efc84080217ccd13ef6d4a7f26a680f2c713",
    "blockchain": "ETH-SEPOLIA",
    "accountType": "EOA",
    "updateDate": "2024-12-03T10:51:31Z",
    "createDate": "2024-12-03T10:51:31Z",
}


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": "walletdesk",
            "network": "testnet",
        }

    @pytest.mark.asyncio
    async def test_detailed_health_redacts_secrets(self, client):
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        circle = response.json()["config"]["circle"]
        assert circle["api_key"] == "TEST_API_KEY:***"
        assert circle["entity_secret"] == "***"
        assert ENTITY_SECRET not in response.text

    @pytest.mark.asyncio
    async def test_detailed_health_lists_offered_chains(self, client):
        response = await client.get("/health/detailed")

        chains = response.json()["blockchains"]
        assert "ETH-SEPOLIA" in chains
        assert "ETH" not in chains


class TestWalletSetRoutes:
    """Tests for /api/wallet-sets."""

    @pytest.mark.asyncio
    async def test_list_returns_wallet_sets(self, client, fake_circle):
        fake_circle.respond("GET", WALLET_SETS_PATH, {"data": {"walletSets": [WALLET_SET]}})

        response = await client.get("/api/wallet-sets")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": [WALLET_SET]}

    @pytest.mark.asyncio
    async def test_list_sends_api_key(self, client, fake_circle):
        fake_circle.respond("GET", WALLET_SETS_PATH, {"data": {"walletSets": []}})

        await client.get("/api/wallet-sets")

        request = fake_circle.sent("GET", WALLET_SETS_PATH)[0]
        assert request.headers["Authorization"] == (
            "Bearer TEST_API_KEY:0123456789abcdef:fedcba9876543210"
        )

    @pytest.mark.asyncio
    async def test_list_without_data_returns_null(self, client, fake_circle):
        fake_circle.respond("GET", WALLET_SETS_PATH, {})

        response = await client.get("/api/wallet-sets")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": None}

    @pytest.mark.asyncio
    async def test_list_platform_error(self, client, fake_circle):
        fake_circle.respond(
            "GET",
            WALLET_SETS_PATH,
            {"code": 401, "message": "Malformed authorization."},
            status=401,
        )

        response = await client.get("/api/wallet-sets")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"status": 401, "code": 401, "message": "Malformed authorization."},
        }

    @pytest.mark.asyncio
    async def test_list_network_error(self, client, fake_circle):
        fake_circle.fail("GET", WALLET_SETS_PATH, httpx.ConnectError("Connection refused"))

        response = await client.get("/api/wallet-sets")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Connection refused"}

    @pytest.mark.asyncio
    async def test_create_returns_wallet_set(self, client, fake_circle):
        fake_circle.respond("POST", CREATE_WALLET_SET_PATH, {"data": {"walletSet": WALLET_SET}})

        response = await client.post("/api/wallet-sets", json={"name": "Treasury"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": WALLET_SET}

    @pytest.mark.asyncio
    async def test_create_sends_encrypted_entity_secret(self, client, fake_circle):
        fake_circle.respond("POST", CREATE_WALLET_SET_PATH, {"data": {"walletSet": WALLET_SET}})

        await client.post("/api/wallet-sets", json={"name": "Treasury"})

        body = fake_circle.last_body("POST", CREATE_WALLET_SET_PATH)
        assert body["name"] == "Treasury"
        assert uuid.UUID(body["idempotencyKey"]).version == 4
        assert fake_circle.decrypt(body["entitySecretCiphertext"]) == bytes.fromhex(ENTITY_SECRET)

    @pytest.mark.asyncio
    async def test_retried_create_is_not_deduplicated(self, client, fake_circle):
        fake_circle.respond("POST", CREATE_WALLET_SET_PATH, {"data": {"walletSet": WALLET_SET}})

        await client.post("/api/wallet-sets", json={"name": "Treasury"})
        await client.post("/api/wallet-sets", json={"name": "Treasury"})

        keys = {
            json.loads(r.content)["idempotencyKey"]
            for r in fake_circle.sent("POST", CREATE_WALLET_SET_PATH)
        }
        assert len(keys) == 2

    @pytest.mark.asyncio
    async def test_create_platform_error(self, client, fake_circle):
        fake_circle.respond(
            "POST",
            CREATE_WALLET_SET_PATH,
            {"code": 156004, "message": "Invalid entity secret ciphertext."},
            status=400,
        )

        response = await client.post("/api/wallet-sets", json={"name": "Treasury"})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == 156004

    @pytest.mark.asyncio
    async def test_create_without_name_is_rejected(self, client, fake_circle):
        response = await client.post("/api/wallet-sets", json={})

        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert isinstance(data["error"], list)
        assert fake_circle.sent("POST", CREATE_WALLET_SET_PATH) == []

    @pytest.mark.asyncio
    async def test_create_end_user_custody_is_rejected(self, client):
        response = await client.post(
            "/api/wallet-sets", json={"name": "Users", "custodyType": "ENDUSER"}
        )

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestWalletRoutes:
    """Tests for /api/wallet-sets/{id}/wallets."""

    @pytest.mark.asyncio
    async def test_list_returns_wallets(self, client, fake_circle):
        fake_circle.respond("GET", WALLETS_PATH, {"data": {"wallets": [WALLET]}})

        response = await client.get(f"/api/wallet-sets/{WALLET_SET['id']}/wallets")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": [WALLET]}
        request = fake_circle.sent("GET", WALLETS_PATH)[0]
        assert request.url.params["walletSetId"] == WALLET_SET["id"]

    @pytest.mark.asyncio
    async def test_list_platform_error(self, client, fake_circle):
        fake_circle.respond(
            "GET", WALLETS_PATH, {"code": 2, "message": "Invalid walletSetId"}, status=400
        )

        response = await client.get("/api/wallet-sets/nope/wallets")

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "Invalid walletSetId"

    @pytest.mark.asyncio
    async def test_create_requests_exactly_one_wallet(self, client, fake_circle):
        fake_circle.respond("POST", CREATE_WALLETS_PATH, {"data": {"wallets": [WALLET]}})

        response = await client.post(
            f"/api/wallet-sets/{WALLET_SET['id']}/wallets",
            json={
                "walletSetId": WALLET_SET["id"],
                "blockchain": "ETH-SEPOLIA",
                "name": "Hot wallet",
                "description": "ops-1",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": [WALLET]}

        body = fake_circle.last_body("POST", CREATE_WALLETS_PATH)
        assert body["count"] == 1
        assert body["blockchains"] == ["ETH-SEPOLIA"]
        assert body["walletSetId"] == WALLET_SET["id"]
        assert body["metadata"] == [{"name": "Hot wallet", "refId": "ops-1"}]

    @pytest.mark.asyncio
    async def test_create_without_description_omits_ref_id(self, client, fake_circle):
        fake_circle.respond("POST", CREATE_WALLETS_PATH, {"data": {"wallets": [WALLET]}})

        await client.post(
            f"/api/wallet-sets/{WALLET_SET['id']}/wallets",
            json={"blockchain": "SOL-DEVNET", "name": "Sol"},
        )

        body = fake_circle.last_body("POST", CREATE_WALLETS_PATH)
        assert body["blockchains"] == ["SOL-DEVNET"]
        assert body["metadata"] == [{"name": "Sol"}]

    @pytest.mark.asyncio
    async def test_create_with_other_wallet_set_id_is_rejected(self, client, fake_circle):
        response = await client.post(
            f"/api/wallet-sets/{WALLET_SET['id']}/wallets",
            json={"walletSetId": "other", "blockchain": "ETH", "name": "x"},
        )

        assert response.status_code == 422
        assert response.json()["success"] is False
        assert fake_circle.sent("POST", CREATE_WALLETS_PATH) == []

    @pytest.mark.asyncio
    async def test_create_unknown_blockchain_is_rejected(self, client):
        response = await client.post(
            f"/api/wallet-sets/{WALLET_SET['id']}/wallets",
            json={"blockchain": "DOGE", "name": "x"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_platform_error(self, client, fake_circle):
        fake_circle.respond(
            "POST",
            CREATE_WALLETS_PATH,
            {"code": 155201, "message": "Wallet set not found"},
            status=404,
        )

        response = await client.post(
            f"/api/wallet-sets/{WALLET_SET['id']}/wallets",
            json={"blockchain": "ETH", "name": "x"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"status": 404, "code": 155201, "message": "Wallet set not found"},
        }
