"""Order lifecycle: open -> filled | cancelled | evicted. All three are terminal.

Orders are never mutated; every operation here returns a new snapshot.
size only ever shrinks, and side / price / owner / created_at are fixed
at placement.
"""

import logging
from dataclasses import replace

from src.dx_common.enums import MakerEventType, OrderState, Side
from src.dx_common.errors import (
    InvalidStateTransitionError,
    OrderNotFoundError,
    OrderSnapshotConflictError,
    OverfillError,
)
from src.dx_order.domain.models import MakerEvent, Order, TakerEvent

logger = logging.getLogger(__name__)

_ALLOWED_TRANSITIONS: dict[OrderState, frozenset[OrderState]] = {
    # open -> open covers partial fills and size reductions
    OrderState.OPEN: frozenset(OrderState),
    OrderState.FILLED: frozenset(),
    OrderState.CANCELLED: frozenset(),
    OrderState.EVICTED: frozenset(),
}

_IMMUTABLE_FIELDS = ("side", "price", "user_address", "created_at")

_EVENT_TARGET_STATE = {
    MakerEventType.PLACE: OrderState.OPEN,
    MakerEventType.CHANGE: OrderState.OPEN,
    MakerEventType.CANCEL: OrderState.CANCELLED,
    MakerEventType.EVICT: OrderState.EVICTED,
}


def can_transition(src: OrderState, dst: OrderState) -> bool:
    return dst in _ALLOWED_TRANSITIONS[src]


def _same_snapshot(previous: Order, current: Order) -> bool:
    """Equal apart from attached display decimals."""
    return replace(
        current,
        base_decimals=previous.base_decimals,
        quote_decimals=previous.quote_decimals,
    ) == previous


def check_successor(previous: Order, current: Order) -> None:
    """Raise unless `current` is a legal replacement snapshot of `previous`."""
    oid = current.market_order_id
    if previous.key != current.key:
        raise OrderSnapshotConflictError(oid, "key", f"{previous.key} != {current.key}")

    if previous.is_terminal:
        if _same_snapshot(previous, current):
            return
        raise InvalidStateTransitionError(
            oid, previous.order_state.value, current.order_state.value
        )

    for name in _IMMUTABLE_FIELDS:
        before, after = getattr(previous, name), getattr(current, name)
        if before != after:
            raise OrderSnapshotConflictError(oid, name, f"{before!r} -> {after!r}")

    if current.size > previous.size:
        raise OrderSnapshotConflictError(oid, "size", f"grew {previous.size} -> {current.size}")
    if current.order_state is OrderState.FILLED and current.size != 0:
        raise OrderSnapshotConflictError(oid, "size", f"filled with {current.size} remaining")
    if not can_transition(previous.order_state, current.order_state):
        raise InvalidStateTransitionError(
            oid, previous.order_state.value, current.order_state.value
        )


def apply_fill(order: Order, size: int) -> Order:
    """Fill `size` lots. Reaching zero remaining moves the order to filled."""
    if size <= 0:
        raise ValueError(f"Fill size must be positive, got {size}")
    if order.is_terminal:
        raise InvalidStateTransitionError(
            order.market_order_id, order.order_state.value, OrderState.FILLED.value
        )
    if size > order.size:
        raise OverfillError(order.market_order_id, size, order.size)

    remaining = order.size - size
    state = OrderState.FILLED if remaining == 0 else OrderState.OPEN
    logger.debug(
        "Order %d filled %d lots, remaining=%d state=%s",
        order.market_order_id, size, remaining, state.value,
    )
    return replace(order, size=remaining, order_state=state)


def _check_event_matches(order: Order, market_id: int, side: Side, price: int) -> None:
    oid = order.market_order_id
    if order.market_id != market_id:
        raise OrderSnapshotConflictError(oid, "market_id", f"{order.market_id} != {market_id}")
    if order.side != side:
        raise OrderSnapshotConflictError(oid, "side", f"{order.side.value} != {side.value}")
    if order.price != price:
        raise OrderSnapshotConflictError(oid, "price", f"{order.price} != {price}")


def apply_maker_event(order: Order | None, event: MakerEvent) -> Order:
    """Reduce one maker event onto the current order snapshot (None before placement)."""
    target = _EVENT_TARGET_STATE[event.event_type]

    if event.event_type is MakerEventType.PLACE:
        if order is not None:
            raise InvalidStateTransitionError(
                event.market_order_id, order.order_state.value, target.value
            )
        return Order(
            market_order_id=event.market_order_id,
            market_id=event.market_id,
            side=event.side,
            size=event.size,
            price=event.price,
            user_address=event.user_address,
            custodian_id=event.custodian_id,
            order_state=OrderState.OPEN,
            created_at=event.time,
        )

    if order is None:
        raise OrderNotFoundError(event.market_id, event.market_order_id)
    _check_event_matches(order, event.market_id, event.side, event.price)
    if order.user_address != event.user_address:
        raise OrderSnapshotConflictError(
            order.market_order_id, "user_address", f"{order.user_address} != {event.user_address}"
        )

    updated = replace(
        order,
        size=event.size,
        order_state=target,
        custodian_id=event.custodian_id,
    )
    check_successor(order, updated)
    logger.debug(
        "Order %d %s: size %d -> %d",
        order.market_order_id, event.event_type.value, order.size, updated.size,
    )
    return updated


def apply_taker_event(order: Order, event: TakerEvent) -> Order:
    """A taker fill against the resting maker order at the maker's price."""
    _check_event_matches(order, event.market_id, event.side, event.price)
    return apply_fill(order, event.size)
