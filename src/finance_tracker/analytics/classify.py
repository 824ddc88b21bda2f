from __future__ import annotations

from .categories import OTHER_EXPENSE, OTHER_INCOME, is_expense_category, is_income_category
from .models import TxType


def classify_type(amount: float) -> TxType:
    """
    amount: negative = money out, positive = money in
    """
    return "income" if amount > 0 else "expense"


def suggest_category(category: str, tx_type: TxType) -> str:
    # Keyword table falls back to the expense-side "Other"; income gets its own bucket.
    if tx_type == "income" and category == OTHER_EXPENSE:
        return OTHER_INCOME
    return category


def fit_category(category: str, tx_type: TxType) -> str:
    """
    Category that is valid for tx_type: keeps `category` when it belongs to
    the type's set, otherwise the type's "Other" bucket.
    """
    if tx_type == "income":
        return category if is_income_category(category) else OTHER_INCOME
    return category if is_expense_category(category) else OTHER_EXPENSE
