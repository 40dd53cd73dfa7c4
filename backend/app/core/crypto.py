# backend/app/core/crypto.py
"""
Supported crypto assets and the mapping from asset symbol to profile columns.

Each symbol owns two columns on the trading profile:
    {symbol}wallet_address  - user's own receiving address (nullable)
    {symbol}wallet_balance  - per-asset balance

Column names are derived, never looked up, so an unknown symbol yields
a column name that does not exist on the table.
"""
from enum import Enum
from typing import Any, Dict, List, Mapping

WALLET_ADDRESS_SUFFIX = "wallet_address"
WALLET_BALANCE_SUFFIX = "wallet_balance"


class CryptoType(str, Enum):
    USDC = "USDC"
    USDT = "USDT"
    DOT = "DOT"
    XRP = "XRP"
    ETH = "ETH"
    AVAX = "AVAX"
    ADA = "ADA"
    SOL = "SOL"
    BTC = "BTC"
    BNB = "BNB"


CRYPTO_LABELS: Dict[CryptoType, str] = {
    CryptoType.USDC: "USDC",
    CryptoType.USDT: "Tether (USDT)",
    CryptoType.DOT: "Polkadot (DOT)",
    CryptoType.XRP: "XRP (XRP)",
    CryptoType.ETH: "Ethereum (ETH)",
    CryptoType.AVAX: "Avalanche (AVAX)",
    CryptoType.ADA: "Cardano (ADA)",
    CryptoType.SOL: "Solana (SOL)",
    CryptoType.BTC: "Bitcoin (BTC)",
    CryptoType.BNB: "BNB (BNB)",
}


def _symbol(crypto_type: Any) -> str:
    if isinstance(crypto_type, CryptoType):
        return crypto_type.value
    return str(crypto_type)


def wallet_address_field(crypto_type: Any) -> str:
    return f"{_symbol(crypto_type).lower()}{WALLET_ADDRESS_SUFFIX}"


def wallet_balance_field(crypto_type: Any) -> str:
    return f"{_symbol(crypto_type).lower()}{WALLET_BALANCE_SUFFIX}"


def wallet_address_fields() -> List[str]:
    return [wallet_address_field(c) for c in CryptoType]


def filter_wallet_addresses(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only the wallet address columns of a full profile row."""
    return {
        key: value
        for key, value in row.items()
        if key.endswith(WALLET_ADDRESS_SUFFIX)
    }


def balances_by_symbol(row: Mapping[str, Any]) -> Dict[str, float]:
    """Per-asset balances keyed by symbol; missing or null balances read as 0."""
    return {
        c.value: row.get(wallet_balance_field(c)) or 0
        for c in CryptoType
    }
