# src/dx_order/application/schemas.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from src.dx_common.amounts import format_units, lots_to_base_units, ticks_to_quote_units
from src.dx_market.domain.models import Market
from src.dx_order.domain.models import Order


class ApiOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    market_order_id: StrictInt
    market_id: StrictInt
    side: Literal["bid", "ask"]
    size: StrictInt
    price: StrictInt
    user_address: StrictStr
    custodian_id: StrictInt | None = None
    order_state: Literal["open", "filled", "cancelled", "evicted"]
    created_at: StrictStr


class ApiMakerEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    market_id: StrictInt
    side: Literal["bid", "ask"]
    market_order_id: StrictInt
    user_address: StrictStr
    custodian_id: StrictInt | None = None
    event_type: Literal["place", "change", "cancel", "evict"]
    size: StrictInt
    price: StrictInt
    time: StrictStr


class ApiTakerEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    market_id: StrictInt
    side: Literal["bid", "ask"]
    market_order_id: StrictInt
    maker: StrictStr
    custodian_id: StrictInt | None = None
    size: StrictInt
    price: StrictInt
    time: StrictStr


class OrderView(BaseModel):
    market_order_id: int
    market_id: int
    side: str
    size: int
    price: int
    size_display: str
    price_display: str
    notional_display: str
    user_address: str
    custodian_id: int | None
    order_state: str
    created_at: str

    @classmethod
    def from_domain(cls, o: Order, market: Market) -> "OrderView":
        """size in lots -> base units; price in ticks per lot -> quote units per lot."""
        return cls(
            market_order_id=o.market_order_id,
            market_id=o.market_id,
            side=o.side.value,
            size=o.size,
            price=o.price,
            size_display=format_units(
                lots_to_base_units(o.size, market.lot_size), market.base_decimals
            ),
            price_display=format_units(o.price * market.tick_size, market.quote_decimals),
            notional_display=format_units(
                ticks_to_quote_units(o.size, o.price, market.tick_size), market.quote_decimals
            ),
            user_address=o.user_address,
            custodian_id=o.custodian_id,
            order_state=o.order_state.value,
            created_at=o.created_at.isoformat(),
        )
