"""Tests for dx_order.application.service.OrderStore."""

import pytest

from src.dx_common.enums import OrderState
from src.dx_common.errors import (
    InvalidStateTransitionError,
    MarketNotFoundError,
    OrderNotFoundError,
    OrderSnapshotConflictError,
)
from src.dx_market.application.service import MarketIndex
from src.dx_order.application.service import OrderStore


@pytest.fixture
def markets(make_market) -> MarketIndex:
    index = MarketIndex()
    index.upsert(make_market(market_id=1))
    index.upsert(make_market(market_id=2, base=None, base_name_generic="Gold", underwriter_id=7))
    return index


class TestUpsert:
    def test_store_and_get(self, make_order) -> None:
        store = OrderStore()
        order = store.upsert(make_order())
        assert store.get(1, 42) is order
        assert (1, 42) in store
        assert len(store) == 1

    def test_get_missing(self) -> None:
        with pytest.raises(OrderNotFoundError):
            OrderStore().get(1, 42)

    def test_replacement_snapshot(self, make_order) -> None:
        store = OrderStore()
        store.upsert(make_order(size=500))
        store.upsert(make_order(size=200))
        assert store.get(1, 42).size == 200

    def test_terminal_not_reopened(self, make_order) -> None:
        store = OrderStore()
        store.upsert(make_order(order_state="cancelled", size=200))
        with pytest.raises(InvalidStateTransitionError):
            store.upsert(make_order(order_state="open", size=200))
        assert store.get(1, 42).order_state is OrderState.CANCELLED

    def test_size_growth_rejected(self, make_order) -> None:
        store = OrderStore()
        store.upsert(make_order(size=200))
        with pytest.raises(OrderSnapshotConflictError):
            store.upsert(make_order(size=500))

    def test_attaches_market_decimals(self, make_order, markets: MarketIndex) -> None:
        store = OrderStore(markets)
        assert store.upsert(make_order(market_id=1)).base_decimals == 8
        generic = store.upsert(make_order(market_id=2, market_order_id=7))
        assert generic.base_decimals is None
        assert generic.quote_decimals == 6

    def test_unknown_market(self, make_order, markets: MarketIndex) -> None:
        with pytest.raises(MarketNotFoundError):
            OrderStore(markets).upsert(make_order(market_id=99))


class TestIngest:
    def test_mixed_batch(self, make_order, markets: MarketIndex) -> None:
        store = OrderStore(markets)
        result = store.ingest([
            make_order(market_order_id=1),
            make_order(market_order_id=2, side="buy"),
            make_order(market_order_id=3, order_state="evicted", size=400),
            make_order(market_order_id=4, market_id=99),
        ])
        assert [o.market_order_id for o in result.accepted] == [1, 3]
        assert [r.index for r in result.rejected] == [1, 3]
        assert result.rejected[1].error.code == 3001
        assert store.get(1, 3).size == 400

    def test_open_orders(self, make_order) -> None:
        store = OrderStore()
        store.ingest([
            make_order(market_order_id=1),
            make_order(market_order_id=2, order_state="filled", size=0),
            make_order(market_order_id=3, market_id=2),
        ])
        assert {o.market_order_id for o in store.open_orders()} == {1, 3}
        assert [o.market_order_id for o in store.open_orders(market_id=1)] == [1]

    def test_for_user(self, make_order) -> None:
        store = OrderStore()
        store.ingest([
            make_order(market_order_id=1),
            make_order(market_order_id=2, user_address="0xdef"),
        ])
        assert [o.market_order_id for o in store.for_user("0xdef")] == [2]


class TestEvents:
    def test_place_fill_flow(self, make_maker_event, make_taker_event, markets) -> None:
        store = OrderStore(markets)
        placed = store.apply_maker_event(make_maker_event(size=500))
        assert placed.order_state is OrderState.OPEN
        assert placed.quote_decimals == 6

        store.apply_taker_event(make_taker_event(size=200))
        assert store.get(1, 42).size == 300

        done = store.apply_taker_event(make_taker_event(size=300))
        assert done.order_state is OrderState.FILLED
        assert store.open_orders() == []

    def test_evict_after_partial_fill(self, make_maker_event, make_taker_event) -> None:
        store = OrderStore()
        store.apply_maker_event(make_maker_event(size=500))
        store.apply_taker_event(make_taker_event(size=100))
        evicted = store.apply_maker_event(make_maker_event(event_type="evict", size=400))
        assert evicted.order_state is OrderState.EVICTED
        assert evicted.size == 400

    def test_fill_unknown_order(self, make_taker_event) -> None:
        with pytest.raises(OrderNotFoundError):
            OrderStore().apply_taker_event(make_taker_event())


class TestViews:
    def test_display_amounts(self, make_order, markets: MarketIndex) -> None:
        store = OrderStore(markets)
        store.upsert(make_order(size=5, price=12))
        (view,) = store.views(1)
        # 5 lots * 1000 base units, 8 decimals
        assert view.size_display == "0.00005000"
        # 12 ticks * 100 quote units, 6 decimals
        assert view.price_display == "0.001200"
        # 5 * 12 * 100 = 6000 quote units
        assert view.notional_display == "0.006000"
        assert view.side == "bid"
        assert view.order_state == "open"

    def test_views_need_markets(self) -> None:
        with pytest.raises(RuntimeError):
            OrderStore().views(1)
