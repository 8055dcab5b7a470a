"""Shared test fixtures: raw record factories shaped like the indexer API payloads."""

from collections.abc import Callable
from typing import Any

import pytest

Factory = Callable[..., dict[str, Any]]

APT = {
    "account_address": "0x1",
    "module_name": "aptos_coin",
    "struct_name": "AptosCoin",
    "symbol": "APT",
    "name": "Aptos Coin",
    "decimals": 8,
}

USDC = {
    "account_address": "0xf22b",
    "module_name": "asset",
    "struct_name": "USDC",
    "symbol": "USDC",
    "name": "USD Coin",
    "decimals": 6,
}


def _build(defaults: dict[str, Any], kwargs: dict[str, Any]) -> dict[str, Any]:
    record = dict(defaults)
    record.update(kwargs)
    return record


@pytest.fixture
def make_coin() -> Factory:
    def factory(**kwargs: Any) -> dict[str, Any]:
        return _build(APT, kwargs)

    return factory


@pytest.fixture
def make_market() -> Factory:
    def factory(**kwargs: Any) -> dict[str, Any]:
        defaults = dict(
            market_id=1,
            name="APT/USDC",
            base=dict(APT),
            base_name_generic=None,
            quote=dict(USDC),
            lot_size=1000,
            tick_size=100,
            min_size=1000,
            underwriter_id=0,
            created_at="2023-01-01T00:00:00Z",
        )
        return _build(defaults, kwargs)

    return factory


@pytest.fixture
def make_order() -> Factory:
    def factory(**kwargs: Any) -> dict[str, Any]:
        defaults = dict(
            market_order_id=42,
            market_id=1,
            side="bid",
            size=500,
            price=1200,
            user_address="0xabc",
            custodian_id=None,
            order_state="open",
            created_at="2023-01-02T10:30:00Z",
        )
        return _build(defaults, kwargs)

    return factory


@pytest.fixture
def make_maker_event() -> Factory:
    def factory(**kwargs: Any) -> dict[str, Any]:
        defaults = dict(
            market_id=1,
            side="bid",
            market_order_id=42,
            user_address="0xabc",
            custodian_id=None,
            event_type="place",
            size=500,
            price=1200,
            time="2023-01-02T10:30:00Z",
        )
        return _build(defaults, kwargs)

    return factory


@pytest.fixture
def make_taker_event() -> Factory:
    def factory(**kwargs: Any) -> dict[str, Any]:
        defaults = dict(
            market_id=1,
            side="bid",
            market_order_id=42,
            maker="0xabc",
            custodian_id=None,
            size=100,
            price=1200,
            time="2023-01-02T10:31:00Z",
        )
        return _build(defaults, kwargs)

    return factory
