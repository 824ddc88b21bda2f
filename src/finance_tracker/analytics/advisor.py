from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .models import AdviceStatus, BudgetBreakdown, SavingsAdvice

BASELINE_SAVINGS_RATE = 20.0
MIN_SAVINGS_RATE_WITH_DEBT = 10.0

NO_INCOME_TIP = "Start by tracking your income to get personalized advice."


def _fixed(value: float, digits: int) -> str:
    # Halves round up (2.5 -> "3"), unlike format()'s round-half-even.
    return str(Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def optimal_savings_rate(breakdown: BudgetBreakdown) -> float:
    """
    50/30/20 baseline. Debt service lowers the target, never below 10%.
    """
    if breakdown.debt_payments > 0 and breakdown.total_income != 0:
        debt_pct = breakdown.debt_payments / breakdown.total_income * 100
        return max(MIN_SAVINGS_RATE_WITH_DEBT, BASELINE_SAVINGS_RATE - debt_pct)
    return BASELINE_SAVINGS_RATE


def _status_and_tips(
    savings_pct: float,
    needs_pct: float,
    wants_pct: float,
    total_income: float,
) -> tuple[AdviceStatus, list[str]]:
    tips: list[str] = []

    if savings_pct >= 20:
        tips.append("You're saving 20%+ of your income. Keep it up!")
        if needs_pct > 50:
            tips.append(
                "Your needs spending is above 50%. See if you can reduce housing or transportation costs."
            )
        return "excellent", tips

    if savings_pct >= 10:
        tips.append(f"You're saving {_fixed(savings_pct, 1)}%. Try to reach 20% for optimal financial health.")
        if wants_pct > 30:
            tips.append("Consider cutting back on wants - entertainment, shopping, or subscriptions.")
        return "good", tips

    if savings_pct >= 0:
        tips.append("You're breaking even or barely saving. Look for areas to cut expenses.")
        if needs_pct > 60:
            tips.append(
                "Your essential expenses are high. Consider cheaper alternatives for housing or transport."
            )
        if wants_pct > 30:
            tips.append("Reduce discretionary spending to boost your savings rate.")
        return "fair", tips

    tips.append("You're spending more than you earn. This needs immediate attention.")
    tips.append("Prioritize cutting non-essential expenses first.")
    if wants_pct > 20:
        excess = (wants_pct - 20) * total_income / 100
        tips.append(f"Cut wants spending by {_fixed(excess, 0)} to start saving.")
    return "needs_attention", tips


def savings_advice(breakdown: BudgetBreakdown) -> SavingsAdvice:
    income = breakdown.total_income

    if income == 0:
        return SavingsAdvice(
            optimal_savings_rate=BASELINE_SAVINGS_RATE,
            optimal_savings_amount=0.0,
            current_savings_rate=0.0,
            needs_percent=0.0,
            wants_percent=0.0,
            savings_percent=0.0,
            status="needs_attention",
            tips=[NO_INCOME_TIP],
        )

    # Not clamped: over-spending gives > 100 or negative values.
    needs_pct = breakdown.needs / income * 100
    wants_pct = breakdown.wants / income * 100
    savings_pct = breakdown.savings / income * 100

    rate = optimal_savings_rate(breakdown)
    status, tips = _status_and_tips(savings_pct, needs_pct, wants_pct, income)

    return SavingsAdvice(
        optimal_savings_rate=rate,
        optimal_savings_amount=income * rate / 100,
        current_savings_rate=savings_pct,
        needs_percent=needs_pct,
        wants_percent=wants_pct,
        savings_percent=savings_pct,
        status=status,
        tips=tips,
    )
