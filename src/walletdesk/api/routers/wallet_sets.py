"""Wallet set and wallet API endpoints.

Each handler forwards to the Circle client and wraps the result in the
``{success, data|error}`` envelope. Failures are returned as HTTP 500 with
the error value embedded; nothing is retried.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from walletdesk.api.envelope import error_response, error_value, success_response
from walletdesk.circle.factory import get_circle_client
from walletdesk.web.contracts.wallets import NewWalletInput, NewWalletSetInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wallet-sets", tags=["Wallet Sets"])


@router.get("")
async def list_wallet_sets() -> JSONResponse:
    """List all wallet sets of the configured account."""
    try:
        async with get_circle_client() as sdk:
            response = await sdk.list_wallet_sets()
        return success_response((response.get("data") or {}).get("walletSets"))
    except Exception as e:
        logger.error("Failed to list wallet sets: %s", e)
        return error_response(error_value(e))


@router.post("")
async def create_wallet_set(request: NewWalletSetInput) -> JSONResponse:
    """Create a developer-controlled wallet set.

    Every call uses a new idempotency key, so retrying creates a duplicate.
    """
    try:
        async with get_circle_client() as sdk:
            response = await sdk.create_wallet_set(name=request.name)
        wallet_set = (response.get("data") or {}).get("walletSet")
        logger.info("Created wallet set %s", (wallet_set or {}).get("id"))
        return success_response(wallet_set)
    except Exception as e:
        logger.error("Failed to create wallet set %r: %s", request.name, e)
        return error_response(error_value(e))


@router.get("/{wallet_set_id}/wallets")
async def list_wallets(wallet_set_id: str) -> JSONResponse:
    """List wallets in a wallet set."""
    try:
        async with get_circle_client() as sdk:
            response = await sdk.list_wallets(wallet_set_id=wallet_set_id)
        return success_response((response.get("data") or {}).get("wallets"))
    except Exception as e:
        logger.error("Failed to list wallets of %s: %s", wallet_set_id, e)
        return error_response(error_value(e))


@router.post("/{wallet_set_id}/wallets")
async def create_wallet(wallet_set_id: str, request: NewWalletInput) -> JSONResponse:
    """Create exactly one wallet on the requested blockchain."""
    if request.wallet_set_id and request.wallet_set_id != wallet_set_id:
        return error_response(
            f"walletSetId {request.wallet_set_id} does not match wallet set {wallet_set_id}",
            status_code=422,
        )

    try:
        async with get_circle_client() as sdk:
            response = await sdk.create_wallets(
                wallet_set_id=wallet_set_id,
                blockchains=[request.blockchain.value],
                count=1,
                metadata=[request.to_metadata()],
            )
        wallets = (response.get("data") or {}).get("wallets")
        logger.info(
            "Created %s wallet in wallet set %s",
            request.blockchain.value,
            wallet_set_id,
        )
        return success_response(wallets)
    except Exception as e:
        logger.error("Failed to create wallet in %s: %s", wallet_set_id, e)
        return error_response(error_value(e))
