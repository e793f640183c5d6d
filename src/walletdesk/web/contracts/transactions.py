"""Token, balance and transaction shapes.

Display-only: used by the components demo page, never created here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from walletdesk.web.contracts.blockchains import chain_label


class Token(BaseModel):
    """A token known to Circle on one blockchain."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    blockchain: str
    name: Optional[str] = None
    symbol: Optional[str] = None
    decimals: int = 18
    is_native: bool = Field(False, alias="isNative")
    token_address: Optional[str] = Field(None, alias="tokenAddress")
    create_date: Optional[str] = Field(None, alias="createDate")
    update_date: Optional[str] = Field(None, alias="updateDate")

    @property
    def display_symbol(self) -> str:
        return self.symbol or self.blockchain


class Balance(BaseModel):
    """Amount of a token held by a wallet."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    amount: str
    token: Token
    update_date: Optional[str] = Field(None, alias="updateDate")


class ScreeningEvaluation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    screening_date: Optional[str] = Field(None, alias="screeningDate")
    rule_name: Optional[str] = Field(None, alias="ruleName")
    actions: list[str] = Field(default_factory=list)


class Transaction(BaseModel):
    """An on-chain transfer as reported by Circle."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    blockchain: str
    state: str = Field(..., description="INITIATED ... COMPLETE, FAILED, DENIED")
    transaction_type: str = Field(..., alias="transactionType", description="INBOUND or OUTBOUND")
    token: Optional[Token] = None
    token_id: Optional[str] = Field(None, alias="tokenId")
    wallet_id: Optional[str] = Field(None, alias="walletId")
    source_address: Optional[str] = Field(None, alias="sourceAddress")
    destination_address: Optional[str] = Field(None, alias="destinationAddress")
    custody_type: Optional[str] = Field(None, alias="custodyType")
    operation: Optional[str] = None
    amounts: list[str] = Field(default_factory=list)
    tx_hash: Optional[str] = Field(None, alias="txHash")
    block_hash: Optional[str] = Field(None, alias="blockHash")
    block_height: Optional[int] = Field(None, alias="blockHeight")
    network_fee: Optional[str] = Field(None, alias="networkFee")
    first_confirm_date: Optional[str] = Field(None, alias="firstConfirmDate")
    screening_evaluation: Optional[ScreeningEvaluation] = Field(
        None, alias="transactionScreeningEvaluation"
    )
    create_date: Optional[str] = Field(None, alias="createDate")
    update_date: Optional[str] = Field(None, alias="updateDate")

    @property
    def chain_label(self) -> str:
        return chain_label(self.blockchain)

    @property
    def compliance_status(self) -> str:
        """Screening outcome: DENIED when any rule blocked it."""
        if self.screening_evaluation is None:
            return "UNSCREENED"
        if self.state == "DENIED" or "DENY" in self.screening_evaluation.actions:
            return "DENIED"
        return "APPROVED"
