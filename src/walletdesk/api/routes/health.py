"""Health check endpoints."""

from fastapi import APIRouter

from walletdesk import __version__
from walletdesk.config import get_settings
from walletdesk.web.contracts.blockchains import get_chain_options

router = APIRouter()


@router.get("/health")
async def health_check():
    """Report liveness and which Circle network the wallet form targets."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "walletdesk",
        "network": "testnet" if settings.testnet else "mainnet",
    }


@router.get("/health/detailed")
async def detailed_health():
    """Redacted configuration plus the blockchains offered for new wallets."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "walletdesk",
        "version": __version__,
        "blockchains": [chain.value for chain in get_chain_options(settings.testnet)],
        "config": settings.get_safe_dict(),
    }
