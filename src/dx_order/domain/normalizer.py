"""Wire record -> domain model conversion for orders and order events.

Amounts stay integer lots/ticks. When the order's Market is supplied,
its coin decimals are attached so presentation can scale later.
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from src.dx_common.datetime_utils import parse_timestamp
from src.dx_common.enums import MakerEventType, OrderState, Side
from src.dx_common.errors import SchemaViolation
from src.dx_market.domain.models import Market
from src.dx_order.application.schemas import ApiMakerEvent, ApiOrder, ApiTakerEvent
from src.dx_order.domain.models import MakerEvent, Order, TakerEvent
from src.dx_order.domain.validator import (
    validate_maker_event,
    validate_order,
    validate_taker_event,
)


def attach_market(order: Order, market: Market) -> Order:
    if order.market_id != market.market_id:
        raise SchemaViolation(
            "market_id",
            "market_mismatch",
            f"order market {order.market_id} != market {market.market_id}",
        )
    return replace(
        order,
        base_decimals=market.base_decimals,
        quote_decimals=market.quote_decimals,
    )


def normalize_order(
    record: Order | ApiOrder | Mapping[str, Any],
    market: Market | None = None,
) -> Order:
    if isinstance(record, Order):
        order = record
    else:
        api = validate_order(record)
        order = Order(
            market_order_id=api.market_order_id,
            market_id=api.market_id,
            side=Side(api.side),
            size=api.size,
            price=api.price,
            user_address=api.user_address,
            custodian_id=api.custodian_id,
            order_state=OrderState(api.order_state),
            created_at=parse_timestamp(api.created_at),
        )
    if market is not None:
        order = attach_market(order, market)
    return order


def normalize_maker_event(record: MakerEvent | ApiMakerEvent | Mapping[str, Any]) -> MakerEvent:
    if isinstance(record, MakerEvent):
        return record
    api = validate_maker_event(record)
    return MakerEvent(
        market_id=api.market_id,
        side=Side(api.side),
        market_order_id=api.market_order_id,
        user_address=api.user_address,
        custodian_id=api.custodian_id,
        event_type=MakerEventType(api.event_type),
        size=api.size,
        price=api.price,
        time=parse_timestamp(api.time),
    )


def normalize_taker_event(record: TakerEvent | ApiTakerEvent | Mapping[str, Any]) -> TakerEvent:
    if isinstance(record, TakerEvent):
        return record
    api = validate_taker_event(record)
    return TakerEvent(
        market_id=api.market_id,
        side=Side(api.side),
        market_order_id=api.market_order_id,
        maker=api.maker,
        custodian_id=api.custodian_id,
        size=api.size,
        price=api.price,
        time=parse_timestamp(api.time),
    )
