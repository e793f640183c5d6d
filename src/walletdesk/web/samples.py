"""Sample payloads rendered by the components demo page."""

from walletdesk.web.contracts.transactions import Balance, Token, Transaction
from walletdesk.web.contracts.wallets import Wallet, WalletSet

SAMPLE_WALLET = Wallet.model_validate(
    {
        "id": "142e39d4-807f-5e0a-a1ba-8869365cf316",
        "state": "LIVE",
        "walletSetId": "70ebad9b-582b-506c-8fcb-6628ff959595",
        "custodyType": "DEVELOPER",
        "refId": "",
        "name": "My Wallet",
        "address": "0xf6c9efc84080217ccd13ef6d4a7f26a680f2c713",
        "blockchain": "ETH",
        "accountType": "EOA",
        "updateDate": "2024-12-03T10:51:31Z",
        "createDate": "2024-12-03T10:51:31Z",
    }
)

SAMPLE_WALLET_SET = WalletSet.model_validate(
    {
        "id": "f270e785-0a7b-578d-a43c-bd514fcc4d49",
        "custodyType": "DEVELOPER",
        "name": "Test Wallet Set",
        "updateDate": "2024-11-27T10:14:52Z",
        "createDate": "2024-11-27T10:14:52Z",
    }
)

SAMPLE_BALANCE = Balance.model_validate(
    {
        "amount": "60.50",
        "token": {
            "id": "1",
            "name": "USD Coin",
            "symbol": "USDC",
            "blockchain": "ETH",
            "decimals": 6,
            "isNative": False,
            "tokenAddress": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            "updateDate": "2024-01-22T09:42:00Z",
            "createDate": "2024-01-22T09:42:00Z",
        },
        "updateDate": "2024-01-22T09:42:00Z",
    }
)

SAMPLE_TOKEN = Token.model_validate(
    {
        "blockchain": "SOL",
        "createDate": "2024-08-12T21:58:31Z",
        "decimals": 18,
        "id": "9ad91eb5-e152-5d81-b60e-151d5fd2b3d3",
        "isNative": True,
        "name": "Solana",
        "symbol": "SOL",
        "updateDate": "2024-08-12T21:58:31Z",
    }
)

SAMPLE_TRANSACTION = Transaction.model_validate(
    {
        "id": "c0d471be-f36f-5e26-8962-9ebd38ec8a62",
        "token": {
            "blockchain": "MATIC",
            "isNative": True,
            "updateDate": "2024-12-10T13:52:57Z",
            "createDate": "2024-12-10T13:52:57Z",
            "decimals": 18,
            "id": "36b6931a-873a-56a8-8a27-b706b17104ee",
        },
        "blockchain": "MATIC",
        "tokenId": "36b6931a-873a-56a8-8a27-b706b17104ee",
        "walletId": "24d1ad14-cf0c-5d7d-96d1-aca6447d0fdc",
        "sourceAddress": "0x2da2bf0a07b015ffa80821df8b2203d473964d95",
        "destinationAddress": "0xf6c9efc84080217ccd13ef6d4a7f26a680f2c713",
        "transactionType": "INBOUND",
        "custodyType": "DEVELOPER",
        "state": "COMPLETE",
        "transactionScreeningEvaluation": {"screeningDate": "2024-12-10T13:52:57Z"},
        "amounts": ["30"],
        "txHash": "0x1aac3dd232d02797fb6c340cbda7d118fce0561aa7f78049f32ba167b0eaf225",
        "blockHash": "0x3bd9054deae68d0d5087da188f119eab2160c12c8a255668e6190c60ffed9ff6",
        "blockHeight": 15439404,
        "networkFee": "0.005164650002582325",
        "firstConfirmDate": "2024-12-10T13:52:57Z",
        "operation": "TRANSFER",
        "createDate": "2024-12-10T13:52:57Z",
        "updateDate": "2024-12-10T13:54:43Z",
    }
)
