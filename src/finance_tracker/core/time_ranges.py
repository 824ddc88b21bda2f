from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class MonthWindow:
    year: int
    month: int  # 1..12

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError("month must be in 1..12")

    def contains(self, d: date) -> bool:
        return d.year == self.year and d.month == self.month

    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_calendar_date(value: str | date | None) -> date | None:
    """
    Reads the YYYY-MM-DD prefix of a stored date. Imported rows may keep
    non-canonical dates; those return None instead of raising.
    """
    if isinstance(value, date):
        return value
    s = (value or "").strip()
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        return None


def current_month(today: date | None = None) -> MonthWindow:
    d = today or date.today()
    return MonthWindow(year=d.year, month=d.month)

