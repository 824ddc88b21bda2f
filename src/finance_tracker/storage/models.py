from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from ..analytics.categories import is_expense_category, is_income_category

Currency = Literal["USD", "PLN"]
TxType = Literal["income", "expense"]
RecurringInterval = Literal["weekly", "monthly", "yearly"]

DEFAULT_EXCHANGE_RATE = 4.05


class Transaction(BaseModel):
    id: str
    type: TxType
    amount: float = Field(gt=0)
    currency: Currency
    category: str
    description: str = ""
    date: str  # YYYY-MM-DD
    # USD->PLN rate captured at creation; only set on PLN transactions.
    exchangeRateAtTime: float | None = Field(default=None, gt=0)
    recurring: bool | None = None
    recurringInterval: RecurringInterval | None = None

    @model_validator(mode="after")
    def _category_matches_type(self) -> "Transaction":
        ok = is_income_category(self.category) if self.type == "income" else is_expense_category(self.category)
        if not ok:
            raise ValueError(f"{self.category!r} is not an {self.type} category")
        return self


class Debt(BaseModel):
    id: str
    name: str
    totalAmount: float
    paidAmount: float = 0.0
    currency: Currency
    interestRate: float | None = None
    dueDate: str | None = None
    minimumPayment: float | None = None


class SavingsGoal(BaseModel):
    id: str
    name: str
    targetAmount: float
    currentAmount: float = 0.0
    currency: Currency
    deadline: str | None = None


class UserSettings(BaseModel):
    primaryCurrency: Currency = "USD"
    exchangeRate: float = Field(default=DEFAULT_EXCHANGE_RATE, gt=0)
    autoExchangeRate: bool = True
    monthlyBudget: float | None = None


class AppData(BaseModel):
    transactions: list[Transaction] = Field(default_factory=list)
    debts: list[Debt] = Field(default_factory=list)
    savingsGoals: list[SavingsGoal] = Field(default_factory=list)
    settings: UserSettings = Field(default_factory=UserSettings)
