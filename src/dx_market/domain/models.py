"""Domain models for dx_market — frozen dataclasses, no I/O.

A market's base asset is a tagged variant: KnownBase (a coin) or
GenericBase (a non-coin asset identified only by name). Consumers branch
on isinstance and never reach for coin fields on a generic market.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Coin:
    account_address: str
    module_name: str
    struct_name: str
    symbol: str
    name: str
    decimals: int

    @property
    def type_tag(self) -> str:
        """Unique on-chain type path, e.g. '0x1::aptos_coin::AptosCoin'."""
        return type_tag(self.account_address, self.module_name, self.struct_name)


def type_tag(account_address: str, module_name: str, struct_name: str) -> str:
    return f"{account_address}::{module_name}::{struct_name}"


@dataclass(frozen=True)
class KnownBase:
    coin: Coin

    @property
    def display_name(self) -> str:
        return self.coin.symbol

    @property
    def decimals(self) -> int:
        return self.coin.decimals


@dataclass(frozen=True)
class GenericBase:
    name: str

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def decimals(self) -> None:
        return None


BaseAsset = KnownBase | GenericBase


@dataclass(frozen=True)
class Market:
    market_id: int
    name: str
    base: BaseAsset
    quote: Coin
    lot_size: int       # base units per lot
    tick_size: int      # quote units per tick
    min_size: int       # base units, expected to be a lot_size multiple
    underwriter_id: int  # 0 = no underwriter
    created_at: datetime

    @property
    def is_generic(self) -> bool:
        return isinstance(self.base, GenericBase)

    @property
    def base_decimals(self) -> int | None:
        return self.base.decimals

    @property
    def quote_decimals(self) -> int:
        return self.quote.decimals

    @property
    def has_underwriter(self) -> bool:
        return self.underwriter_id != 0

    @property
    def min_size_is_lot_multiple(self) -> bool:
        return self.min_size % self.lot_size == 0
