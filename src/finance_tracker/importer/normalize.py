from __future__ import annotations

import math
import re

from ..storage.models import Currency

_ws_re = re.compile(r"\s+", re.UNICODE)
# Leading numeric prefix; a trailing label such as "PLN" is ignored.
_number_prefix_re = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_iso_date_re = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_day_first_re = re.compile(r"^(\d{2})[.\-/](\d{2})[.\-/](\d{4})$")
_year_first_re = re.compile(r"^(\d{4})[.\-/](\d{2})[.\-/](\d{2})$")


def parse_amount(raw: str) -> float | None:
    """
    Locale-tolerant amount parser. Sign is kept.

      "1234,56", "1 234,56", "1.234,56", "1234.56" -> 1234.56
      "-50,00" -> -50.0

    Returns None when there is no number to read.
    """
    s = _ws_re.sub("", raw or "")
    # U+2212 minus sign shows up in some exports
    s = s.replace("−", "-")

    if "," in s and "." in s:
        s = s.replace(".", "").replace(",", ".", 1)
    elif "," in s:
        s = s.replace(",", ".", 1)

    m = _number_prefix_re.match(s)
    if m is None:
        return None

    value = float(m.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_date(raw: str) -> str:
    """
    Best-effort YYYY-MM-DD. Unknown shapes come back trimmed but unchanged.
    """
    s = (raw or "").strip()
    if _iso_date_re.match(s):
        return s

    m = _day_first_re.match(s)
    if m:
        return f"{m.group(3)}-{m.group(2)}-{m.group(1)}"

    m = _year_first_re.match(s)
    if m:
        return f"{m.group(1)}-{m.group(2)}-{m.group(3)}"

    return s


def parse_currency(raw: str) -> Currency:
    c = (raw or "").strip().upper()
    if c == "USD":
        return "USD"
    return "PLN"
