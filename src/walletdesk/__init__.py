"""Wallet set and wallet browser backed by Circle developer-controlled wallets."""

__version__ = "0.1.0"
