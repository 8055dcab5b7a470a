"""Order domain models — frozen dataclasses, no I/O.

size is the remaining unfilled quantity in lots; price is in ticks.
base_decimals / quote_decimals are attached by the normalizer when the
order's market is known (base_decimals stays None on generic markets).
"""
from dataclasses import dataclass
from datetime import datetime

from src.dx_common.enums import MakerEventType, OrderState, Side

TERMINAL_STATES = frozenset({OrderState.FILLED, OrderState.CANCELLED, OrderState.EVICTED})


@dataclass(frozen=True)
class Order:
    market_order_id: int
    market_id: int
    side: Side
    size: int  # remaining lots
    price: int  # ticks
    user_address: str
    custodian_id: int | None  # None = user manages the order directly
    order_state: OrderState
    created_at: datetime
    base_decimals: int | None = None
    quote_decimals: int | None = None

    @property
    def key(self) -> tuple[int, int]:
        return (self.market_id, self.market_order_id)

    @property
    def is_open(self) -> bool:
        return self.order_state is OrderState.OPEN

    @property
    def is_terminal(self) -> bool:
        return self.order_state in TERMINAL_STATES

    @property
    def is_custodial(self) -> bool:
        return self.custodian_id is not None


@dataclass(frozen=True)
class MakerEvent:
    market_id: int
    side: Side
    market_order_id: int
    user_address: str
    custodian_id: int | None
    event_type: MakerEventType
    size: int
    price: int
    time: datetime


@dataclass(frozen=True)
class TakerEvent:
    """A fill of `size` lots against the resting maker order."""

    market_id: int
    side: Side
    market_order_id: int
    maker: str
    custodian_id: int | None
    size: int
    price: int
    time: datetime
