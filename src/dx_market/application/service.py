"""MarketIndex — in-memory lookup of normalized markets by market_id.

Markets are immutable values: a newer snapshot replaces the stored one.
market_id and created_at are fixed at registration, so a snapshot that
changes created_at for a known market_id is a conflict.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from src.dx_common.errors import MarketConflictError, MarketNotFoundError
from src.dx_common.ingest import IngestResult, ingest_records
from src.dx_market.application.schemas import ApiMarket, MarketView
from src.dx_market.domain.models import KnownBase, Market
from src.dx_market.domain.normalizer import normalize_market

logger = logging.getLogger(__name__)


class MarketIndex:
    def __init__(self, markets: Iterable[Market] = ()) -> None:
        self._markets: dict[int, Market] = {}
        for market in markets:
            self.upsert(market)

    def upsert(self, record: Market | ApiMarket | Mapping[str, Any]) -> Market:
        market = normalize_market(record)
        existing = self._markets.get(market.market_id)
        if existing is not None and existing.created_at != market.created_at:
            raise MarketConflictError(
                market.market_id,
                f"created_at {existing.created_at.isoformat()} -> {market.created_at.isoformat()}",
            )
        self._markets[market.market_id] = market
        logger.debug("Market %d stored: %s", market.market_id, market.name)
        return market

    def ingest(self, records: Iterable[Any]) -> IngestResult[Market]:
        return ingest_records(records, self.upsert, "market")

    def get(self, market_id: int) -> Market:
        market = self._markets.get(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market

    def find(self, market_id: int) -> Market | None:
        return self._markets.get(market_id)

    def for_coin(self, tag: str) -> list[Market]:
        """Markets where the coin with type tag `tag` is the base or the quote."""
        return [
            m for m in self._markets.values()
            if m.quote.type_tag == tag
            or (isinstance(m.base, KnownBase) and m.base.coin.type_tag == tag)
        ]

    def views(self) -> list[MarketView]:
        return [MarketView.from_domain(m) for m in sorted(self, key=lambda m: m.market_id)]

    def __contains__(self, market_id: object) -> bool:
        return market_id in self._markets

    def __iter__(self) -> Iterator[Market]:
        return iter(self._markets.values())

    def __len__(self) -> int:
        return len(self._markets)
