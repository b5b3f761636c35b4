"""Market snapshot shown alongside the calculator. Simulated, not fetched."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class InventoryLevel(Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class MarketLocation:
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True)
class RentalMarket:
    median_rent: Decimal
    year_over_year_growth: Decimal  # %
    vacancy_rate: Decimal  # %
    rent_per_sqft: Decimal


@dataclass(frozen=True)
class HousingMarket:
    median_price: Decimal
    appreciation: Decimal  # Annual %
    days_on_market: int
    inventory_level: InventoryLevel
    price_per_sqft: Decimal


@dataclass(frozen=True)
class EconomicIndicators:
    unemployment_rate: Decimal  # %
    population_growth: Decimal  # %
    median_household_income: Decimal  # Annual


@dataclass(frozen=True)
class MarketData:
    location: MarketLocation
    rental_market: RentalMarket
    housing_market: HousingMarket
    economic_indicators: EconomicIndicators
    opportunity_score: Decimal  # 0-10


@dataclass(frozen=True)
class MarketTrendPoint:
    months_ago: int
    median_rent: Decimal
    median_price: Decimal


@dataclass(frozen=True)
class MarketIndicator:
    subject: str
    value: Decimal  # 0-10 radar score


@dataclass(frozen=True)
class IntegrationStatus:
    name: str
    provider: str
    endpoint: str
    status: str
