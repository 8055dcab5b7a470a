"""Wire record -> domain model conversion for coins and markets.

Normalizing an already-normalized value returns it unchanged, so
normalize_market(normalize_market(x)) == normalize_market(x).
"""

from collections.abc import Mapping
from typing import Any

from src.dx_common.datetime_utils import parse_timestamp
from src.dx_market.application.schemas import ApiCoin, ApiMarket
from src.dx_market.domain.models import BaseAsset, Coin, GenericBase, KnownBase, Market
from src.dx_market.domain.validator import validate_coin, validate_market


def normalize_coin(record: Coin | ApiCoin | Mapping[str, Any], prefix: str = "") -> Coin:
    if isinstance(record, Coin):
        return record
    api = validate_coin(record, prefix)
    return Coin(
        account_address=api.account_address,
        module_name=api.module_name,
        struct_name=api.struct_name,
        symbol=api.symbol,
        name=api.name,
        decimals=api.decimals,
    )


def normalize_market(
    record: Market | ApiMarket | Mapping[str, Any],
    enforce_min_size_lot_multiple: bool | None = None,
) -> Market:
    if isinstance(record, Market):
        return record
    api = validate_market(record, enforce_min_size_lot_multiple)

    base: BaseAsset
    if api.base is not None:
        base = KnownBase(normalize_coin(api.base, "base"))
    else:
        # validate_market guarantees base_name_generic is set and non-empty here
        base = GenericBase(api.base_name_generic or "")

    return Market(
        market_id=api.market_id,
        name=api.name,
        base=base,
        quote=normalize_coin(api.quote, "quote"),
        lot_size=api.lot_size,
        tick_size=api.tick_size,
        min_size=api.min_size,
        underwriter_id=api.underwriter_id,
        created_at=parse_timestamp(api.created_at),
    )
