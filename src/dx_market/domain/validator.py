"""Coin / Market validation: structural parse, then semantic invariants.

Returns the validated wire record unchanged, or raises SchemaViolation.
"""

import logging
from collections.abc import Mapping
from typing import Any

from config.settings import settings
from src.dx_common.errors import SchemaViolation
from src.dx_common.validation import (
    I16_MAX,
    U64_MAX,
    field_path,
    parse_record,
    require_at_most,
    require_non_empty,
    require_non_negative,
    require_positive,
    require_timestamp,
)
from src.dx_market.application.schemas import ApiCoin, ApiMarket

logger = logging.getLogger(__name__)

_COIN_IDENTITY_FIELDS = ("account_address", "module_name", "struct_name", "symbol")
_U64_FIELDS = ("market_id", "lot_size", "tick_size", "min_size", "underwriter_id")


def validate_coin(record: ApiCoin | Mapping[str, Any], prefix: str = "") -> ApiCoin:
    coin = parse_record(ApiCoin, record, prefix)
    for name in _COIN_IDENTITY_FIELDS:
        require_non_empty(getattr(coin, name), field_path(prefix, name))
    require_non_negative(coin.decimals, field_path(prefix, "decimals"))
    require_at_most(coin.decimals, I16_MAX, field_path(prefix, "decimals"))
    return coin


def validate_market(
    record: ApiMarket | Mapping[str, Any],
    enforce_min_size_lot_multiple: bool | None = None,
) -> ApiMarket:
    """Validate a Market record.

    base / base_name_generic must be mutually exclusive and one of them set.
    min_size % lot_size != 0 is logged and flagged unless enforcement is on
    (defaults to settings.ENFORCE_MIN_SIZE_LOT_MULTIPLE), then it is rejected.
    """
    market = parse_record(ApiMarket, record)

    require_non_negative(market.market_id, "market_id")

    has_base = market.base is not None
    has_generic = market.base_name_generic is not None
    if has_base and has_generic:
        raise SchemaViolation("base", "mutually_exclusive", "base and base_name_generic both set")
    if not has_base and not has_generic:
        raise SchemaViolation("base", "missing", "one of base or base_name_generic is required")
    if market.base is not None:
        validate_coin(market.base, "base")
    else:
        require_non_empty(market.base_name_generic or "", "base_name_generic")

    validate_coin(market.quote, "quote")

    require_positive(market.lot_size, "lot_size")
    require_positive(market.tick_size, "tick_size")
    require_positive(market.min_size, "min_size")
    require_non_negative(market.underwriter_id, "underwriter_id")
    for name in _U64_FIELDS:
        require_at_most(getattr(market, name), U64_MAX, name)
    require_timestamp(market.created_at, "created_at")

    if market.min_size % market.lot_size != 0:
        if enforce_min_size_lot_multiple is None:
            enforce_min_size_lot_multiple = settings.ENFORCE_MIN_SIZE_LOT_MULTIPLE
        if enforce_min_size_lot_multiple:
            raise SchemaViolation(
                "min_size",
                "not_lot_multiple",
                f"min_size={market.min_size} lot_size={market.lot_size}",
            )
        logger.warning(
            "Market %d: min_size=%d is not a multiple of lot_size=%d",
            market.market_id, market.min_size, market.lot_size,
        )

    return market
