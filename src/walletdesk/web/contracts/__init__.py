"""Request, response and display contracts for the web layer."""

from walletdesk.web.contracts.blockchains import Blockchain, get_chain_options
from walletdesk.web.contracts.envelope import ApiResponse
from walletdesk.web.contracts.transactions import Balance, Token, Transaction
from walletdesk.web.contracts.wallets import (
    NewWalletInput,
    NewWalletSetInput,
    Wallet,
    WalletSet,
)

__all__ = [
    "ApiResponse",
    "Balance",
    "Blockchain",
    "NewWalletInput",
    "NewWalletSetInput",
    "Token",
    "Transaction",
    "Wallet",
    "WalletSet",
    "get_chain_options",
]
