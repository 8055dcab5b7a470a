"""OrderStore — order-state reducer over normalized order snapshots.

Orders are keyed by (market_id, market_order_id). Every write replaces
the stored snapshot after check_successor accepts it, so a terminal order
can never be reopened and a size can never grow.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from src.dx_common.errors import OrderNotFoundError
from src.dx_common.ingest import IngestResult, ingest_records
from src.dx_market.application.service import MarketIndex
from src.dx_order.application.schemas import ApiMakerEvent, ApiOrder, ApiTakerEvent, OrderView
from src.dx_order.domain.lifecycle import apply_maker_event, apply_taker_event, check_successor
from src.dx_order.domain.models import MakerEvent, Order, TakerEvent
from src.dx_order.domain.normalizer import (
    normalize_maker_event,
    normalize_order,
    normalize_taker_event,
)

logger = logging.getLogger(__name__)


class OrderStore:
    def __init__(self, markets: MarketIndex | None = None) -> None:
        self._markets = markets
        self._orders: dict[tuple[int, int], Order] = {}

    def _attach(self, order: Order) -> Order:
        # Raises MarketNotFoundError when an index is configured and the market is unknown
        if self._markets is None:
            return order
        return normalize_order(order, self._markets.get(order.market_id))

    def _store(self, order: Order) -> Order:
        previous = self._orders.get(order.key)
        if previous is not None:
            check_successor(previous, order)
        self._orders[order.key] = order
        return order

    def upsert(self, record: Order | ApiOrder | Mapping[str, Any]) -> Order:
        return self._store(self._attach(normalize_order(record)))

    def ingest(self, records: Iterable[Any]) -> IngestResult[Order]:
        return ingest_records(records, self.upsert, "order")

    def apply_maker_event(self, record: MakerEvent | ApiMakerEvent | Mapping[str, Any]) -> Order:
        event = normalize_maker_event(record)
        current = self._orders.get((event.market_id, event.market_order_id))
        return self._store(self._attach(apply_maker_event(current, event)))

    def apply_taker_event(self, record: TakerEvent | ApiTakerEvent | Mapping[str, Any]) -> Order:
        event = normalize_taker_event(record)
        current = self.get(event.market_id, event.market_order_id)
        return self._store(apply_taker_event(current, event))

    def get(self, market_id: int, market_order_id: int) -> Order:
        order = self._orders.get((market_id, market_order_id))
        if order is None:
            raise OrderNotFoundError(market_id, market_order_id)
        return order

    def open_orders(self, market_id: int | None = None) -> list[Order]:
        return [
            o for o in self._orders.values()
            if o.is_open and (market_id is None or o.market_id == market_id)
        ]

    def for_user(self, user_address: str) -> list[Order]:
        return [o for o in self._orders.values() if o.user_address == user_address]

    def views(self, market_id: int) -> list[OrderView]:
        """Presentation rows for one market; needs a MarketIndex."""
        if self._markets is None:
            raise RuntimeError("OrderStore.views requires a MarketIndex")
        market = self._markets.get(market_id)
        orders = sorted(
            (o for o in self._orders.values() if o.market_id == market_id),
            key=lambda o: o.market_order_id,
        )
        return [OrderView.from_domain(o, market) for o in orders]

    def __contains__(self, key: object) -> bool:
        return key in self._orders

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders.values())

    def __len__(self) -> int:
        return len(self._orders)
