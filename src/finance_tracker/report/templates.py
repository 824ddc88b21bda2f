from __future__ import annotations

from typing import Iterable

from ..analytics.currency import format_currency
from ..analytics.models import BudgetBreakdown, CategoryAmount, Currency, SavingsAdvice
from ..importer.models import ParseResult

STATUS_LABELS = {
    "excellent": "Excellent",
    "good": "Good",
    "fair": "Fair",
    "needs_attention": "Needs attention",
}


def section(title: str, lines: Iterable[str]) -> str:
    body = "\n".join(line for line in lines if line)
    return f"{title}\n{body}".strip()


def info(message: str) -> str:
    return f"[i] {message}"


def success(message: str) -> str:
    return f"[ok] {message}"


def warning(message: str) -> str:
    return f"[!] {message}"


def error(message: str) -> str:
    return f"[x] {message}"


def divider() -> str:
    return "──────────────────"


def bullets(items: Iterable[str], *, prefix: str = "• ") -> str:
    xs = [x for x in items if x]
    return "\n".join(prefix + x for x in xs)


def report_layout(
    header: str,
    summary_block: str,
    categories_block: str | None = None,
    advice_block: str | None = None,
) -> str:
    parts: list[str] = [header]

    if summary_block:
        parts.append(summary_block)

    if categories_block:
        parts.append(divider())
        parts.append(categories_block)

    if advice_block:
        parts.append(divider())
        parts.append(advice_block)

    return "\n\n".join(parts).strip()


def render_breakdown(b: BudgetBreakdown, currency: Currency) -> str:
    def money(x: float) -> str:
        return format_currency(x, currency)

    return section(
        "Summary",
        [
            f"Income: {money(b.total_income)}",
            f"Expenses: {money(b.total_expenses)}",
            f"  Needs: {money(b.needs)}",
            f"  Wants: {money(b.wants)}",
            f"  Debt payments: {money(b.debt_payments)}",
            f"Net balance: {money(b.net_balance)}",
        ],
    )


def render_categories(items: list[CategoryAmount], currency: Currency) -> str:
    if not items:
        return section("Expenses by category", [info("No expenses this month.")])
    return section(
        "Expenses by category",
        [bullets(f"{x.category}: {format_currency(x.amount, currency)}" for x in items)],
    )


def render_advice(advice: SavingsAdvice, currency: Currency) -> str:
    head = [
        f"Status: {STATUS_LABELS.get(advice.status, advice.status)}",
        f"Savings rate: {advice.savings_percent:.1f}% "
        f"(target {advice.optimal_savings_rate:.1f}% = {format_currency(advice.optimal_savings_amount, currency)})",
        f"Needs {advice.needs_percent:.1f}% / Wants {advice.wants_percent:.1f}%",
    ]
    return section("Savings advice", [*head, bullets(advice.tips)])


def render_import_preview(result: ParseResult, limit: int = 20) -> str:
    if result.is_empty:
        return error("File appears empty or unrecognized.")

    m = result.mapping
    lines = [
        f"Columns: {', '.join(result.headers)}",
        f"Mapping: date={m.date} amount={m.amount} description={m.description} "
        f"currency={m.currency} counterparty={m.counterparty}",
    ]
    if not result.auto_mapped:
        lines.append(warning("Columns were not recognized, check the mapping (--mapping)."))

    rows = [
        f"{t.date}  {t.suggested_type:<7}  {t.amount:>10.2f} {t.currency}  "
        f"{t.suggested_category:<14}  {t.description}"
        for t in result.transactions[:limit]
    ]
    lines.append(bullets(rows))
    if len(result.transactions) > limit:
        lines.append(f"... and {len(result.transactions) - limit} more transactions")
    lines.append(f"Parsed transactions: {len(result.transactions)}")
    return section("Import preview", lines)
