"""Unit tests for dx_market presentation schemas."""

from src.dx_market.application.schemas import MarketView
from src.dx_market.domain.normalizer import normalize_market


class TestMarketView:
    def test_coin_market(self, make_market) -> None:
        view = MarketView.from_domain(normalize_market(make_market()))
        assert view.base_name == "APT"
        assert view.base_type_tag == "0x1::aptos_coin::AptosCoin"
        assert not view.is_generic
        assert view.quote_symbol == "USDC"
        # 1000 base units at 8 decimals, 100 quote units at 6 decimals
        assert view.lot_size_display == "0.00001000"
        assert view.min_size_display == "0.00001000"
        assert view.tick_size_display == "0.000100"
        assert view.created_at == "2023-01-01T00:00:00+00:00"

    def test_generic_market_unscaled(self, make_market) -> None:
        market = normalize_market(
            make_market(base=None, base_name_generic="Gold", underwriter_id=3)
        )
        view = MarketView.from_domain(market)
        assert view.is_generic
        assert view.base_name == "Gold"
        assert view.base_type_tag is None
        assert view.lot_size_display == "1000"
        assert view.underwriter_id == 3

    def test_serialization(self, make_market) -> None:
        d = MarketView.from_domain(normalize_market(make_market())).model_dump()
        assert d["market_id"] == 1
        assert d["name"] == "APT/USDC"
