"""Tests for the simulated market data source and derived market metrics."""

from decimal import Decimal

from rto.data.base import MarketDataSource
from rto.data.market import (
    SimulatedMarketDataSource,
    apply_market_data,
    cap_rate,
    historical_trend,
    integration_status,
    market_indicators,
    opportunity_label,
    rent_to_price_ratio,
)
from rto.models.market import InventoryLevel, MarketLocation


class TestSimulatedMarketDataSource:
    def test_satisfies_protocol(self):
        assert isinstance(SimulatedMarketDataSource(), MarketDataSource)

    def test_default_snapshot(self):
        data = SimulatedMarketDataSource().get_market_data()
        assert data.location.city == "Austin"
        assert data.rental_market.median_rent == Decimal("2150")
        assert data.housing_market.median_price == Decimal("425000")
        assert data.housing_market.inventory_level == InventoryLevel.LOW
        assert data.opportunity_score == Decimal("8.4")

    def test_custom_location(self):
        loc = MarketLocation(city="Columbus", state="OH", zip_code="43215")
        data = SimulatedMarketDataSource(location=loc).get_market_data()
        assert data.location == loc

    def test_deterministic(self):
        source = SimulatedMarketDataSource()
        assert source.get_market_data() == source.get_market_data()

    def test_northern_location_scaled(self):
        data = SimulatedMarketDataSource().get_market_data_by_location(45.0, -93.0)
        assert data.rental_market.median_rent == Decimal("2580")
        assert data.housing_market.median_price == Decimal("552500")

    def test_southern_location_unchanged(self):
        source = SimulatedMarketDataSource()
        assert source.get_market_data_by_location(30.3, -97.7) == source.get_market_data()


class TestMarketMetrics:
    def test_historical_trend(self):
        data = SimulatedMarketDataSource().get_market_data()
        trend = historical_trend(data)
        assert len(trend) == 13
        assert [p.months_ago for p in trend] == list(range(12, -1, -1))
        # 2150 * (1 - 12 * 0.003) and 425000 * (1 - 12 * 0.005)
        assert trend[0].median_rent == Decimal("2073")
        assert trend[0].median_price == Decimal("399500")
        assert trend[-1].median_rent == Decimal("2150")
        assert trend[-1].median_price == Decimal("425000")

    def test_rent_to_price_ratio(self):
        data = SimulatedMarketDataSource().get_market_data()
        # 25800 / 425000
        assert rent_to_price_ratio(data) == Decimal("6.07")

    def test_cap_rate(self):
        data = SimulatedMarketDataSource().get_market_data()
        # 25800 * 0.7 / 425000
        assert cap_rate(data) == Decimal("4.25")

    def test_indicators_bounded(self):
        data = SimulatedMarketDataSource().get_market_data()
        indicators = {i.subject: i.value for i in market_indicators(data)}
        assert set(indicators) == {
            "Affordability", "Appreciation", "Rent Growth", "Job Market", "Population", "Inventory",
        }
        assert all(Decimal("0") <= v <= Decimal("10") for v in indicators.values())
        # Price-to-income of 5.4 is off the bottom of the affordability scale
        assert indicators["Affordability"] == Decimal("0")
        assert indicators["Appreciation"] == Decimal("6.8")
        assert indicators["Rent Growth"] == Decimal("8.4")
        assert indicators["Job Market"] == Decimal("3.6")
        assert indicators["Population"] == Decimal("6.3")
        assert indicators["Inventory"] == Decimal("8")

    def test_opportunity_label(self):
        assert opportunity_label(Decimal("8.4")) == "Excellent"
        assert opportunity_label(Decimal("5")) == "Good"
        assert opportunity_label(Decimal("4.9")) == "Fair"

    def test_integration_status(self):
        statuses = integration_status()
        assert [s.provider for s in statuses] == ["Apartment List API", "Zillow API", "RentSpree API"]
        assert all(s.status == "active" for s in statuses)

    def test_apply_market_data(self, canonical_input):
        data = SimulatedMarketDataSource().get_market_data()
        updated = apply_market_data(canonical_input, data)
        assert updated.property_appreciation_rate == Decimal("6.8")
        assert updated.property_value == canonical_input.property_value
        assert canonical_input.property_appreciation_rate == Decimal("3")
