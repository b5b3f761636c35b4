"""Market data routes."""

from fastapi import APIRouter, Depends

from rto.api.deps import get_market_source
from rto.api.schemas import (
    EconomicIndicatorsResponse,
    HousingMarketResponse,
    IntegrationStatusResponse,
    MarketIndicatorResponse,
    MarketLocationResponse,
    MarketSnapshotResponse,
    MarketTrendPointResponse,
    RentalMarketResponse,
)
from rto.data.base import MarketDataSource
from rto.data.market import (
    cap_rate,
    historical_trend,
    integration_status,
    market_indicators,
    opportunity_label,
    rent_to_price_ratio,
)

router = APIRouter(prefix="/api/v1/market", tags=["market"])


@router.get("/snapshot", response_model=MarketSnapshotResponse)
async def get_snapshot(
    lat: float | None = None,
    lng: float | None = None,
    source: MarketDataSource = Depends(get_market_source),
):
    """Simulated market snapshot with derived metrics and a 12-month trend."""
    if lat is not None and lng is not None:
        data = source.get_market_data_by_location(lat, lng)
    else:
        data = source.get_market_data()

    loc = data.location
    rental = data.rental_market
    housing = data.housing_market
    econ = data.economic_indicators
    return MarketSnapshotResponse(
        location=MarketLocationResponse(city=loc.city, state=loc.state, zip_code=loc.zip_code),
        rental_market=RentalMarketResponse(
            median_rent=rental.median_rent,
            year_over_year_growth=rental.year_over_year_growth,
            vacancy_rate=rental.vacancy_rate,
            rent_per_sqft=rental.rent_per_sqft,
        ),
        housing_market=HousingMarketResponse(
            median_price=housing.median_price,
            appreciation=housing.appreciation,
            days_on_market=housing.days_on_market,
            inventory_level=housing.inventory_level.value,
            price_per_sqft=housing.price_per_sqft,
        ),
        economic_indicators=EconomicIndicatorsResponse(
            unemployment_rate=econ.unemployment_rate,
            population_growth=econ.population_growth,
            median_household_income=econ.median_household_income,
        ),
        opportunity_score=data.opportunity_score,
        opportunity_label=opportunity_label(data.opportunity_score),
        rent_to_price_ratio=rent_to_price_ratio(data),
        cap_rate=cap_rate(data),
        indicators=[
            MarketIndicatorResponse(subject=i.subject, value=i.value)
            for i in market_indicators(data)
        ],
        historical_trend=[
            MarketTrendPointResponse(
                months_ago=p.months_ago,
                median_rent=p.median_rent,
                median_price=p.median_price,
            )
            for p in historical_trend(data)
        ],
    )


@router.get("/integrations", response_model=list[IntegrationStatusResponse])
async def get_integrations():
    """Status of the (simulated) third-party data providers."""
    return [
        IntegrationStatusResponse(
            name=s.name, provider=s.provider, endpoint=s.endpoint, status=s.status
        )
        for s in integration_status()
    ]
