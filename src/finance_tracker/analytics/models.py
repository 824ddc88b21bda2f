from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..storage.models import Currency, TxType

__all__ = ["AdviceStatus", "BudgetBreakdown", "CategoryAmount", "Currency", "SavingsAdvice", "TxType"]

AdviceStatus = Literal["excellent", "good", "fair", "needs_attention"]


@dataclass(frozen=True)
class BudgetBreakdown:
    """One calendar month, all amounts in the primary currency."""

    total_income: float = 0.0
    total_expenses: float = 0.0
    needs: float = 0.0
    wants: float = 0.0
    savings: float = 0.0
    debt_payments: float = 0.0
    net_balance: float = 0.0


@dataclass(frozen=True)
class CategoryAmount:
    category: str
    amount: float
    color: str


@dataclass(frozen=True)
class SavingsAdvice:
    optimal_savings_rate: float
    optimal_savings_amount: float
    current_savings_rate: float
    needs_percent: float
    wants_percent: float
    savings_percent: float
    status: AdviceStatus
    tips: list[str] = field(default_factory=list)
