from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from ..core.time_ranges import MonthWindow, parse_calendar_date
from ..storage.models import Transaction
from .categories import DEBT_CATEGORY, NEEDS_CATEGORIES, WANTS_CATEGORIES, category_color
from .currency import convert_currency
from .models import BudgetBreakdown, CategoryAmount, Currency


def _month_transactions(transactions: Iterable[Transaction], window: MonthWindow) -> list[Transaction]:
    out: list[Transaction] = []
    for t in transactions:
        d = parse_calendar_date(t.date)
        if d is not None and window.contains(d):
            out.append(t)
    return out


def amount_in(t: Transaction, primary_currency: Currency, exchange_rate: float) -> float:
    # Historical rate wins over the global fallback.
    rate = t.exchangeRateAtTime if t.exchangeRateAtTime is not None else exchange_rate
    return convert_currency(t.amount, t.currency, primary_currency, rate)


def monthly_breakdown(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    primary_currency: Currency,
    exchange_rate: float,
) -> BudgetBreakdown:
    """
    month: 1..12

    Every expense lands in exactly one of needs / wants / debt_payments,
    so needs + wants + debt_payments == total_expenses.
    """
    window = MonthWindow(year=year, month=month)

    total_income = 0.0
    total_expenses = 0.0
    needs = 0.0
    wants = 0.0
    debt_payments = 0.0

    for t in _month_transactions(transactions, window):
        amount = amount_in(t, primary_currency, exchange_rate)
        if t.type == "income":
            total_income += amount
            continue

        total_expenses += amount
        if t.category == DEBT_CATEGORY:
            debt_payments += amount
        elif t.category in NEEDS_CATEGORIES:
            needs += amount
        elif t.category in WANTS_CATEGORIES:
            wants += amount
        else:
            # "Other" has no bucket of its own
            wants += amount

    net = total_income - total_expenses
    return BudgetBreakdown(
        total_income=total_income,
        total_expenses=total_expenses,
        needs=needs,
        wants=wants,
        savings=net,
        debt_payments=debt_payments,
        net_balance=net,
    )


def expenses_by_category(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    primary_currency: Currency,
    exchange_rate: float,
) -> list[CategoryAmount]:
    window = MonthWindow(year=year, month=month)

    # dict keeps discovery order, sorted() is stable
    by_category: dict[str, float] = defaultdict(float)
    for t in _month_transactions(transactions, window):
        if t.type != "expense":
            continue
        by_category[t.category] += amount_in(t, primary_currency, exchange_rate)

    items = [
        CategoryAmount(category=cat, amount=amount, color=category_color(cat))
        for cat, amount in by_category.items()
    ]
    return sorted(items, key=lambda x: x.amount, reverse=True)
