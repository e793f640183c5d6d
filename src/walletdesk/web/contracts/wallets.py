"""Wallet set and wallet contracts.

Shapes follow the Circle W3S API (camelCase on the wire). Unknown fields
are kept so payloads pass through untouched.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from walletdesk.web.contracts.blockchains import Blockchain, chain_label


class WalletSet(BaseModel):
    """A named group of developer-controlled wallets."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Wallet set ID")
    custody_type: Optional[str] = Field(
        None, alias="custodyType", description="DEVELOPER or ENDUSER"
    )
    name: Optional[str] = Field(None, description="Wallet set name")
    create_date: Optional[str] = Field(None, alias="createDate")
    update_date: Optional[str] = Field(None, alias="updateDate")


class Wallet(BaseModel):
    """A blockchain address managed by Circle, scoped to a wallet set."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Wallet ID")
    wallet_set_id: Optional[str] = Field(None, alias="walletSetId")
    blockchain: str = Field(..., description="Circle blockchain identifier")
    address: Optional[str] = Field(None, description="On-chain address")
    state: Optional[str] = Field(None, description="LIVE or FROZEN")
    custody_type: Optional[str] = Field(None, alias="custodyType")
    name: Optional[str] = Field(None, description="Wallet name")
    ref_id: Optional[str] = Field(None, alias="refId", description="Reference ID")
    account_type: Optional[str] = Field(None, alias="accountType", description="EOA or SCA")
    create_date: Optional[str] = Field(None, alias="createDate")
    update_date: Optional[str] = Field(None, alias="updateDate")

    @property
    def chain_label(self) -> str:
        return chain_label(self.blockchain)


class NewWalletSetInput(BaseModel):
    """Request to create a wallet set."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Wallet set name")
    custody_type: Literal["DEVELOPER"] = Field(
        "DEVELOPER",
        alias="custodyType",
        description="Only developer-controlled wallet sets can be created",
    )


class NewWalletInput(BaseModel):
    """Request to create one wallet in a wallet set."""

    model_config = ConfigDict(populate_by_name=True)

    wallet_set_id: Optional[str] = Field(
        None, alias="walletSetId", description="Must match the path wallet set ID"
    )
    blockchain: Blockchain = Field(..., description="Blockchain to create the wallet on")
    name: str = Field(..., min_length=1, description="Wallet name")
    description: Optional[str] = Field(None, description="Stored as the wallet refId")

    def to_metadata(self) -> dict:
        """Per-wallet metadata entry for the create call."""
        metadata = {"name": self.name}
        if self.description:
            metadata["refId"] = self.description
        return metadata
