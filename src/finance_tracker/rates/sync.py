from __future__ import annotations

import logging

from ..storage.models import AppData
from .client import ExchangeRateClient

logger = logging.getLogger(__name__)


def sync_exchange_rate(data: AppData, client: ExchangeRateClient) -> AppData:
    """
    Pulls the live rate into settings when auto mode is on.
    No rate -> the document comes back unchanged.
    """
    if not data.settings.autoExchangeRate:
        return data

    rate = client.fetch_live_rate()
    if rate is None:
        logger.info("No live rate, keeping %.4f", data.settings.exchangeRate)
        return data

    settings = data.settings.model_copy(update={"exchangeRate": rate})
    return data.model_copy(update={"settings": settings})
