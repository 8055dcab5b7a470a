"""Order / order event validation.

side, order_state and event_type are closed sets: anything else raises
UnknownEnumValue and is never mapped onto a default.
"""

from collections.abc import Mapping
from typing import Any

from src.dx_common.errors import SchemaViolation
from src.dx_common.validation import (
    U64_MAX,
    parse_record,
    require_at_most,
    require_non_empty,
    require_non_negative,
    require_positive,
    require_timestamp,
)
from src.dx_order.application.schemas import ApiMakerEvent, ApiOrder, ApiTakerEvent


def _check_ids(market_id: int, market_order_id: int, custodian_id: int | None) -> None:
    require_non_negative(market_id, "market_id")
    require_non_negative(market_order_id, "market_order_id")
    if custodian_id is not None:
        require_non_negative(custodian_id, "custodian_id")


def _check_u64(record: ApiOrder | ApiMakerEvent | ApiTakerEvent) -> None:
    """Ids, size and price are u64 on chain; custodian_id may be null."""
    for name in ("market_id", "market_order_id", "custodian_id", "size", "price"):
        value = getattr(record, name)
        if value is not None:
            require_at_most(value, U64_MAX, name)


def validate_order(record: ApiOrder | Mapping[str, Any]) -> ApiOrder:
    order = parse_record(ApiOrder, record)

    _check_ids(order.market_id, order.market_order_id, order.custodian_id)
    require_non_negative(order.size, "size")
    _check_u64(order)
    require_positive(order.price, "price")
    require_non_empty(order.user_address, "user_address")
    require_timestamp(order.created_at, "created_at")

    # cancelled / evicted keep their unfilled remainder; only filled implies zero
    if order.order_state == "filled" and order.size != 0:
        raise SchemaViolation("size", "filled_with_remaining_size", f"got {order.size}")

    return order


def validate_maker_event(record: ApiMakerEvent | Mapping[str, Any]) -> ApiMakerEvent:
    event = parse_record(ApiMakerEvent, record)

    _check_ids(event.market_id, event.market_order_id, event.custodian_id)
    require_non_negative(event.size, "size")
    _check_u64(event)
    require_positive(event.price, "price")
    require_non_empty(event.user_address, "user_address")
    require_timestamp(event.time, "time")
    # a resting order with zero size only exists as a cancel/evict remainder
    if event.event_type in ("place", "change"):
        require_positive(event.size, "size")

    return event


def validate_taker_event(record: ApiTakerEvent | Mapping[str, Any]) -> ApiTakerEvent:
    event = parse_record(ApiTakerEvent, record)

    _check_ids(event.market_id, event.market_order_id, event.custodian_id)
    _check_u64(event)
    require_positive(event.size, "size")
    require_positive(event.price, "price")
    require_non_empty(event.maker, "maker")
    require_timestamp(event.time, "time")

    return event
