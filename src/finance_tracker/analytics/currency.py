from __future__ import annotations

from .models import Currency

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "PLN": "zł",
}


def currency_symbol(currency: Currency) -> str:
    return CURRENCY_SYMBOLS[currency]


def convert_currency(amount: float, from_currency: Currency, to_currency: Currency, exchange_rate: float) -> float:
    """
    exchange_rate is always quoted as PLN per 1 USD.
    """
    if from_currency == to_currency:
        return amount
    if from_currency == "USD" and to_currency == "PLN":
        return amount * exchange_rate
    if from_currency == "PLN" and to_currency == "USD":
        return amount / exchange_rate
    return amount


def format_currency(amount: float, currency: Currency) -> str:
    if currency == "PLN":
        # pl-PL: space thousands, comma decimals, symbol after the number
        s = f"{abs(amount):,.2f}".replace(",", " ").replace(".", ",")
        sign = "-" if amount < 0 else ""
        return f"{sign}{s} zł"

    s = f"{abs(amount):,.2f}"
    sign = "-" if amount < 0 else ""
    return f"{sign}${s}"
