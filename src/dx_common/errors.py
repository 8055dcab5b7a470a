"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Schema (record rejected at ingestion)
  3xxx: Market / Coin
  4xxx: Order
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Schema ---

class SchemaViolation(AppError):
    """Record is malformed or ambiguous. It must be discarded as a whole."""

    def __init__(
        self,
        field: str,
        reason: str,
        detail: str | None = None,
        code: int = 1001,
    ) -> None:
        self.field = field
        self.reason = reason
        self.detail = detail
        message = f"Schema violation at '{field}': {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(code, message)


class UnknownEnumValue(SchemaViolation):
    def __init__(self, field: str, value: object, allowed: list[str]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            field,
            "unknown_enum_value",
            f"got {value!r}, expected one of {', '.join(allowed)}",
            code=1002,
        )


# --- 3xxx: Market / Coin ---

class MarketNotFoundError(AppError):
    def __init__(self, market_id: int) -> None:
        super().__init__(3001, f"Market not found: {market_id}")


class MarketConflictError(AppError):
    def __init__(self, market_id: int, detail: str) -> None:
        super().__init__(3002, f"Market {market_id} snapshot conflicts: {detail}")


class CoinNotFoundError(AppError):
    def __init__(self, type_tag: str) -> None:
        super().__init__(3003, f"Coin not found: {type_tag}")


# --- 4xxx: Order ---

class OrderNotFoundError(AppError):
    def __init__(self, market_id: int, market_order_id: int) -> None:
        super().__init__(4004, f"Order not found: market={market_id} order={market_order_id}")


class InvalidStateTransitionError(AppError):
    def __init__(self, market_order_id: int, src: str, dst: str) -> None:
        super().__init__(
            4006,
            f"Order {market_order_id} cannot move from {src} to {dst}",
        )


class OrderSnapshotConflictError(AppError):
    def __init__(self, market_order_id: int, field: str, detail: str) -> None:
        self.field = field
        super().__init__(4007, f"Order {market_order_id} snapshot conflicts on {field}: {detail}")


class OverfillError(AppError):
    def __init__(self, market_order_id: int, fill_size: int, remaining: int) -> None:
        super().__init__(
            4008,
            f"Fill of {fill_size} exceeds remaining size {remaining} for order {market_order_id}",
        )
