"""Global enums — values must match the indexer API literals exactly."""

from enum import Enum


class Side(str, Enum):
    BID = "bid"
    ASK = "ask"


class OrderState(str, Enum):
    OPEN = "open"
    FILLED = "filled"
    CANCELLED = "cancelled"
    EVICTED = "evicted"


class MakerEventType(str, Enum):
    """Maker-side order book event: what happened to a resting order"""
    PLACE = "place"
    CHANGE = "change"
    CANCEL = "cancel"
    EVICT = "evict"
