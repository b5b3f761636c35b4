"""FastAPI dependency injection."""

from rto.data.base import MarketDataSource
from rto.data.market import SimulatedMarketDataSource


def get_market_source() -> MarketDataSource:
    return SimulatedMarketDataSource()
