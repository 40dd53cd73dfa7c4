from backend.app.core.crypto import (
    CryptoType,
    balances_by_symbol,
    filter_wallet_addresses,
    wallet_address_field,
    wallet_address_fields,
    wallet_balance_field,
)
from backend.app.models import TradingProfile


def test_field_names_are_lowercase_symbol_plus_suffix():
    assert wallet_address_field(CryptoType.BTC) == "btcwallet_address"
    assert wallet_balance_field(CryptoType.AVAX) == "avaxwallet_balance"
    assert wallet_address_field("USDT") == "usdtwallet_address"


def test_every_derived_field_exists_on_the_profile_table():
    columns = set(TradingProfile.__table__.columns.keys())
    for crypto_type in CryptoType:
        assert wallet_address_field(crypto_type) in columns
        assert wallet_balance_field(crypto_type) in columns


def test_unknown_symbol_derives_a_column_that_does_not_exist():
    columns = set(TradingProfile.__table__.columns.keys())
    assert wallet_address_field("DOGE") == "dogewallet_address"
    assert "dogewallet_address" not in columns


def test_filter_keeps_only_wallet_address_keys():
    row = {
        "id": "abc",
        "first_name": "Ada",
        "balance": 10,
        "btcwallet_address": "bc1xyz",
        "btcwallet_balance": 0.5,
        "ethwallet_address": None,
    }
    assert filter_wallet_addresses(row) == {
        "btcwallet_address": "bc1xyz",
        "ethwallet_address": None,
    }


def test_full_row_projection_yields_ten_wallet_addresses():
    profile = TradingProfile(id="abc", first_name="Ada", last_name="Lovelace")
    wallets = filter_wallet_addresses(profile.as_dict())
    assert sorted(wallets) == sorted(wallet_address_fields())


def test_missing_balances_read_as_zero():
    balances = balances_by_symbol({"btcwallet_balance": 1.5, "ethwallet_balance": None})
    assert balances["BTC"] == 1.5
    assert balances["ETH"] == 0
    assert balances["USDC"] == 0
    assert list(balances) == [c.value for c in CryptoType]
