from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from .. import __version__
from ..core.cache import JsonDiskCache

logger = logging.getLogger(__name__)

DEFAULT_RATE_URL = "https://open.er-api.com/v6/latest/USD"


def _extract_pln_rate(payload: Any) -> float | None:
    if not isinstance(payload, dict):
        return None
    rates = payload.get("rates")
    if not isinstance(rates, dict):
        return None
    rate = rates.get("PLN")
    # bool is an int subclass; "true" is not a rate
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return None
    if rate <= 0:
        return None
    return float(rate)


class ExchangeRateClient:
    """
    USD->PLN live rate. One GET per cache miss, no retries: any failure
    yields None and the caller keeps whatever rate it already had.
    """

    CACHE_KEY = "rates:usd-pln"
    RATE_TTL = 60 * 60

    def __init__(
        self,
        url: str = DEFAULT_RATE_URL,
        cache_root: Path | None = None,
        ttl_seconds: int = RATE_TTL,
        timeout: float = 10.0,
    ):
        self._url = url
        self._ttl = ttl_seconds
        self._cache = JsonDiskCache(cache_root or (Path(".cache") / "rates"))
        self._client = httpx.Client(
            headers={"User-Agent": f"finance-tracker/{__version__}"},
            timeout=httpx.Timeout(timeout),
        )

    def close(self) -> None:
        self._client.close()

    def _cached_rate(self) -> float | None:
        cached = self._cache.get(self.CACHE_KEY)
        if cached is None:
            return None
        rate = _extract_pln_rate({"rates": {"PLN": cached}})
        if rate is None:
            self._cache.delete(self.CACHE_KEY)
        return rate

    def fetch_live_rate(self) -> float | None:
        cached = self._cached_rate()
        if cached is not None:
            return cached

        try:
            resp = self._client.get(self._url)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as e:
            logger.warning("Live rate fetch failed: %s", e)
            return None
        except ValueError as e:
            logger.warning("Live rate response is not JSON: %s", e)
            return None

        rate = _extract_pln_rate(payload)
        if rate is None:
            logger.warning("Live rate response has no usable rates.PLN")
            return None

        self._cache.set(self.CACHE_KEY, rate, ttl_seconds=self._ttl)
        return rate
