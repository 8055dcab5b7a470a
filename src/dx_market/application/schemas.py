"""Pydantic schemas for dx_market records as received from the indexer API.

Wire shapes (Api*) use strict scalar types: a numeric field sent as a
string is rejected, never coerced. Semantic checks (positivity, mutual
exclusion) live in dx_market.domain.validator.

MarketView is the presentation shape handed to UI/state collaborators,
with display strings scaled by the attached coin decimals.
"""

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from src.dx_common.amounts import format_units
from src.dx_market.domain.models import GenericBase, KnownBase, Market

# ---------------------------------------------------------------------------
# Wire records
# ---------------------------------------------------------------------------


class ApiCoin(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_address: StrictStr
    module_name: StrictStr
    struct_name: StrictStr
    symbol: StrictStr
    name: StrictStr
    decimals: StrictInt


class ApiMarket(BaseModel):
    model_config = ConfigDict(frozen=True)

    market_id: StrictInt
    name: StrictStr
    base: ApiCoin | None = None
    base_name_generic: StrictStr | None = None
    quote: ApiCoin
    lot_size: StrictInt
    tick_size: StrictInt
    min_size: StrictInt
    underwriter_id: StrictInt
    created_at: StrictStr


class ApiMarketRegistrationEvent(BaseModel):
    """Flattened registration row: base type path columns are all set or all null."""

    model_config = ConfigDict(frozen=True)

    market_id: StrictInt
    time: StrictStr
    base_account_address: StrictStr | None = None
    base_module_name: StrictStr | None = None
    base_struct_name: StrictStr | None = None
    base_name_generic: StrictStr | None = None
    quote_account_address: StrictStr
    quote_module_name: StrictStr
    quote_struct_name: StrictStr
    lot_size: StrictInt
    tick_size: StrictInt
    min_size: StrictInt
    underwriter_id: StrictInt


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------


class MarketView(BaseModel):
    market_id: int
    name: str
    base_name: str
    base_type_tag: str | None
    is_generic: bool
    quote_symbol: str
    quote_type_tag: str
    lot_size: int
    tick_size: int
    min_size: int
    min_size_display: str
    lot_size_display: str
    tick_size_display: str
    underwriter_id: int
    created_at: str

    @classmethod
    def from_domain(cls, m: Market) -> "MarketView":
        base_type_tag = m.base.coin.type_tag if isinstance(m.base, KnownBase) else None
        return cls(
            market_id=m.market_id,
            name=m.name,
            base_name=m.base.display_name,
            base_type_tag=base_type_tag,
            is_generic=isinstance(m.base, GenericBase),
            quote_symbol=m.quote.symbol,
            quote_type_tag=m.quote.type_tag,
            lot_size=m.lot_size,
            tick_size=m.tick_size,
            min_size=m.min_size,
            min_size_display=format_units(m.min_size, m.base_decimals),
            lot_size_display=format_units(m.lot_size, m.base_decimals),
            tick_size_display=format_units(m.tick_size, m.quote_decimals),
            underwriter_id=m.underwriter_id,
            created_at=m.created_at.isoformat(),
        )
