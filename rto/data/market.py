"""Simulated third-party market data for the calculator's market panel.

Stands in for rent and price feeds (Apartment List, Zillow, RentSpree) with a
fixed snapshot. Deterministic: no randomness and no clock reads, so the same
call always returns the same data.
"""

import logging
from dataclasses import replace
from decimal import Decimal, ROUND_HALF_UP

from rto.config import settings
from rto.models.inputs import CalculatorInput
from rto.models.market import (
    EconomicIndicators,
    HousingMarket,
    IntegrationStatus,
    InventoryLevel,
    MarketData,
    MarketIndicator,
    MarketLocation,
    MarketTrendPoint,
    RentalMarket,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

# Northern markets (lat > 40) price higher in the simulation
NORTHERN_LATITUDE = 40.0
NORTHERN_RENT_MULTIPLIER = Decimal("1.2")
NORTHERN_PRICE_MULTIPLIER = Decimal("1.3")

# Historical trend: straight-line discount per month back
RENT_MONTHLY_DRIFT = Decimal("0.003")
PRICE_MONTHLY_DRIFT = Decimal("0.005")

CAP_RATE_EXPENSE_RATIO = Decimal("0.30")

INVENTORY_SCORES: dict[InventoryLevel, Decimal] = {
    InventoryLevel.LOW: Decimal("8"),
    InventoryLevel.MODERATE: Decimal("5"),
    InventoryLevel.HIGH: Decimal("2"),
}

RADAR_MIN = Decimal("0")
RADAR_MAX = Decimal("10")


class SimulatedMarketDataSource:
    """Returns a fixed market snapshot for the configured location."""

    def __init__(self, location: MarketLocation | None = None):
        self.location = location or MarketLocation(
            city=settings.market_city,
            state=settings.market_state,
            zip_code=settings.market_zip_code,
        )

    def get_market_data(self) -> MarketData:
        logger.debug("Simulating market data for %s, %s", self.location.city, self.location.state)
        return MarketData(
            location=self.location,
            rental_market=RentalMarket(
                median_rent=Decimal("2150"),
                year_over_year_growth=Decimal("4.2"),
                vacancy_rate=Decimal("3.8"),
                rent_per_sqft=Decimal("1.95"),
            ),
            housing_market=HousingMarket(
                median_price=Decimal("425000"),
                appreciation=Decimal("6.8"),
                days_on_market=28,
                inventory_level=InventoryLevel.LOW,
                price_per_sqft=Decimal("285"),
            ),
            economic_indicators=EconomicIndicators(
                unemployment_rate=Decimal("3.2"),
                population_growth=Decimal("2.1"),
                median_household_income=Decimal("78500"),
            ),
            opportunity_score=Decimal("8.4"),
        )

    def get_market_data_by_location(self, lat: float, lng: float) -> MarketData:
        logger.debug("Simulating market data for coordinates %s, %s", lat, lng)
        data = self.get_market_data()
        if lat <= NORTHERN_LATITUDE:
            return data
        return replace(
            data,
            rental_market=replace(
                data.rental_market,
                median_rent=data.rental_market.median_rent * NORTHERN_RENT_MULTIPLIER,
            ),
            housing_market=replace(
                data.housing_market,
                median_price=data.housing_market.median_price * NORTHERN_PRICE_MULTIPLIER,
            ),
        )


def historical_trend(data: MarketData, months: int = 12) -> list[MarketTrendPoint]:
    """Trailing monthly rent/price series, oldest first, ending at the snapshot."""
    points: list[MarketTrendPoint] = []
    for months_ago in range(months, -1, -1):
        rent = data.rental_market.median_rent * (1 - months_ago * RENT_MONTHLY_DRIFT)
        price = data.housing_market.median_price * (1 - months_ago * PRICE_MONTHLY_DRIFT)
        points.append(MarketTrendPoint(
            months_ago=months_ago,
            median_rent=rent.quantize(Decimal("1"), ROUND_HALF_UP),
            median_price=price.quantize(Decimal("1"), ROUND_HALF_UP),
        ))
    return points


def rent_to_price_ratio(data: MarketData) -> Decimal:
    """Annual median rent as a percent of median price."""
    annual_rent = data.rental_market.median_rent * 12
    return (annual_rent / data.housing_market.median_price * 100).quantize(TWO_PLACES, ROUND_HALF_UP)


def cap_rate(data: MarketData) -> Decimal:
    """Gross cap rate (%) assuming 30% of rent goes to operating expenses."""
    annual_rent = data.rental_market.median_rent * 12
    noi = annual_rent * (1 - CAP_RATE_EXPENSE_RATIO)
    return (noi / data.housing_market.median_price * 100).quantize(TWO_PLACES, ROUND_HALF_UP)


def _radar(value: Decimal) -> Decimal:
    return max(RADAR_MIN, min(RADAR_MAX, value)).quantize(TWO_PLACES, ROUND_HALF_UP)


def market_indicators(data: MarketData) -> list[MarketIndicator]:
    """Six 0-10 market health scores for the radar chart."""
    housing = data.housing_market
    rental = data.rental_market
    econ = data.economic_indicators

    price_to_income = housing.median_price / econ.median_household_income
    return [
        MarketIndicator("Affordability", _radar(10 - price_to_income / 5 * 10)),
        MarketIndicator("Appreciation", _radar(housing.appreciation)),
        MarketIndicator("Rent Growth", _radar(rental.year_over_year_growth * 2)),
        MarketIndicator("Job Market", _radar(10 - econ.unemployment_rate * 2)),
        MarketIndicator("Population", _radar(econ.population_growth * 3)),
        MarketIndicator("Inventory", INVENTORY_SCORES[housing.inventory_level]),
    ]


def opportunity_label(score: Decimal) -> str:
    if score >= 7:
        return "Excellent"
    if score >= 5:
        return "Good"
    return "Fair"


def integration_status() -> list[IntegrationStatus]:
    """Simulated provider list; every integration reports active."""
    return [
        IntegrationStatus(
            name="rent_data",
            provider="Apartment List API",
            endpoint="https://api.apartmentlist.com/v2/rent-estimates",
            status="active",
        ),
        IntegrationStatus(
            name="property_values",
            provider="Zillow API",
            endpoint="https://api.zillow.com/webservice/GetZestimate.htm",
            status="active",
        ),
        IntegrationStatus(
            name="market_trends",
            provider="RentSpree API",
            endpoint="https://api.rentspree.com/v1/market-data",
            status="active",
        ),
    ]


def apply_market_data(inputs: CalculatorInput, data: MarketData) -> CalculatorInput:
    """Feed the market's appreciation rate into a copy of the calculator input."""
    return replace(inputs, property_appreciation_rate=data.housing_market.appreciation)
