"""Protocol for market data providers.

The calculator only consumes plain figures from a provider (median rent,
price, appreciation); any concrete source must satisfy this interface.
"""

from typing import Protocol, runtime_checkable

from rto.models.market import MarketData


@runtime_checkable
class MarketDataSource(Protocol):
    def get_market_data(self) -> MarketData:
        """Market snapshot for the provider's default location."""
        ...

    def get_market_data_by_location(self, lat: float, lng: float) -> MarketData:
        """Market snapshot adjusted for a coordinate."""
        ...
