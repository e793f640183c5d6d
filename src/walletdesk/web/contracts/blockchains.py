"""Blockchains supported by Circle developer-controlled wallets."""

from enum import Enum


class Blockchain(str, Enum):
    """Circle blockchain identifiers."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    SOL = "SOL"
    SOL_DEVNET = "SOL-DEVNET"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    BASE = "BASE"
    BASE_SEPOLIA = "BASE-SEPOLIA"
    OP = "OP"
    OP_SEPOLIA = "OP-SEPOLIA"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    NEAR = "NEAR"
    NEAR_TESTNET = "NEAR-TESTNET"
    APTOS = "APTOS"
    APTOS_TESTNET = "APTOS-TESTNET"
    EVM = "EVM"
    EVM_TESTNET = "EVM-TESTNET"

    @property
    def is_testnet(self) -> bool:
        return "-" in self.value

    @property
    def label(self) -> str:
        return CHAIN_LABELS.get(self, self.value)


# Display names
CHAIN_LABELS = {
    Blockchain.ETH: "Ethereum",
    Blockchain.ETH_SEPOLIA: "Ethereum Sepolia",
    Blockchain.MATIC: "Polygon PoS",
    Blockchain.MATIC_AMOY: "Polygon PoS Amoy",
    Blockchain.SOL: "Solana",
    Blockchain.SOL_DEVNET: "Solana Devnet",
    Blockchain.ARB: "Arbitrum",
    Blockchain.ARB_SEPOLIA: "Arbitrum Sepolia",
    Blockchain.AVAX: "Avalanche C-Chain",
    Blockchain.AVAX_FUJI: "Avalanche Fuji",
    Blockchain.BASE: "Base",
    Blockchain.BASE_SEPOLIA: "Base Sepolia",
    Blockchain.OP: "Optimism",
    Blockchain.OP_SEPOLIA: "Optimism Sepolia",
    Blockchain.UNI: "Unichain",
    Blockchain.UNI_SEPOLIA: "Unichain Sepolia",
    Blockchain.NEAR: "NEAR",
    Blockchain.NEAR_TESTNET: "NEAR Testnet",
    Blockchain.APTOS: "Aptos",
    Blockchain.APTOS_TESTNET: "Aptos Testnet",
    Blockchain.EVM: "EVM",
    Blockchain.EVM_TESTNET: "EVM Testnet",
}


def get_chain_options(testnet: bool) -> list[Blockchain]:
    """Blockchains offered by the wallet creation form."""
    return [chain for chain in Blockchain if chain.is_testnet == testnet]


def chain_label(value: str) -> str:
    """Display name for a raw blockchain identifier."""
    try:
        return Blockchain(value).label
    except ValueError:
        return value
