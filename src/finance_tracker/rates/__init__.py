from .client import ExchangeRateClient
from .sync import sync_exchange_rate

__all__ = ["ExchangeRateClient", "sync_exchange_rate"]
