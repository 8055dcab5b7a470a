"""Market registration events -> Market.

Registration rows carry only coin type paths, so coin metadata (symbol,
decimals) is resolved through a CoinRegistry before the market goes
through the ordinary validate/normalize path.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from src.dx_common.errors import CoinNotFoundError, SchemaViolation
from src.dx_common.validation import parse_record
from src.dx_market.application.schemas import ApiMarketRegistrationEvent
from src.dx_market.domain.models import Coin, Market, type_tag
from src.dx_market.domain.normalizer import normalize_coin, normalize_market

logger = logging.getLogger(__name__)


class CoinRegistry:
    """Coins keyed by type tag. The type path triple is the identity."""

    def __init__(self, coins: Iterable[Coin | Mapping[str, Any]] = ()) -> None:
        self._coins: dict[str, Coin] = {}
        for coin in coins:
            self.add(coin)

    def add(self, record: Coin | Mapping[str, Any]) -> Coin:
        coin = normalize_coin(record)
        existing = self._coins.get(coin.type_tag)
        if existing is not None and existing != coin:
            logger.info("Coin metadata replaced: %s", coin.type_tag)
        self._coins[coin.type_tag] = coin
        return coin

    def get(self, account_address: str, module_name: str, struct_name: str) -> Coin:
        tag = type_tag(account_address, module_name, struct_name)
        try:
            return self._coins[tag]
        except KeyError:
            raise CoinNotFoundError(tag) from None

    def __contains__(self, tag: object) -> bool:
        return tag in self._coins

    def __iter__(self) -> Iterator[Coin]:
        return iter(self._coins.values())

    def __len__(self) -> int:
        return len(self._coins)


def _coin_dict(coin: Coin) -> dict[str, Any]:
    return {
        "account_address": coin.account_address,
        "module_name": coin.module_name,
        "struct_name": coin.struct_name,
        "symbol": coin.symbol,
        "name": coin.name,
        "decimals": coin.decimals,
    }


def market_from_registration(
    record: ApiMarketRegistrationEvent | Mapping[str, Any],
    coins: CoinRegistry,
) -> Market:
    """Build a Market from a registration event, named '{BASE}/{QUOTE}'."""
    event = parse_record(ApiMarketRegistrationEvent, record)

    base_path = (event.base_account_address, event.base_module_name, event.base_struct_name)
    present = [part is not None for part in base_path]
    if any(present) and not all(present):
        raise SchemaViolation("base", "partial_type_path", "base type path must be complete or absent")

    quote = coins.get(
        event.quote_account_address, event.quote_module_name, event.quote_struct_name
    )
    base: Coin | None = None
    if all(present):
        base = coins.get(*base_path)  # type: ignore[arg-type]

    base_label = base.symbol if base is not None else (event.base_name_generic or "")
    return normalize_market(
        {
            "market_id": event.market_id,
            "name": f"{base_label}/{quote.symbol}",
            "base": _coin_dict(base) if base is not None else None,
            "base_name_generic": event.base_name_generic,
            "quote": _coin_dict(quote),
            "lot_size": event.lot_size,
            "tick_size": event.tick_size,
            "min_size": event.min_size,
            "underwriter_id": event.underwriter_id,
            "created_at": event.time,
        }
    )
