from __future__ import annotations

from dataclasses import dataclass

# Header variants as exported by PKO BP; works as a generic name table.
# Candidates are tried in the listed order.
KNOWN_COLUMNS: dict[str, list[str]] = {
    "date": ["data operacji", "data transakcji", "data księgowania"],
    "amount": ["kwota", "kwota transakcji"],
    "currency": ["waluta"],
    "description": ["opis transakcji", "tytuł", "tytul", "tytuł transakcji"],
    "counterparty": ["nadawca / odbiorca", "nadawca/odbiorca", "nazwa kontrahenta", "kontrahent"],
}

NOT_PRESENT = -1


@dataclass(frozen=True)
class ColumnMapping:
    date: int
    amount: int
    description: int
    currency: int = NOT_PRESENT
    counterparty: int = NOT_PRESENT

    @classmethod
    def from_string(cls, spec: str) -> "ColumnMapping":
        """
        "0,1,2" or "0,3,6,4,-1" -> date, amount, description[, currency, counterparty]
        """
        parts = [p.strip() for p in spec.split(",") if p.strip()]
        if len(parts) not in (3, 4, 5):
            raise ValueError("mapping needs 3 to 5 comma separated column indices")
        idx = [int(p) for p in parts]
        if any(i < 0 for i in idx[:3]):
            raise ValueError("date, amount and description columns are required")
        while len(idx) < 5:
            idx.append(NOT_PRESENT)
        return cls(date=idx[0], amount=idx[1], description=idx[2], currency=idx[3], counterparty=idx[4])


DEFAULT_MAPPING = ColumnMapping(date=0, amount=1, description=2)


def find_column_index(headers: list[str], candidates: list[str]) -> int:
    normalized = [h.strip().lower() for h in headers]
    for candidate in candidates:
        if candidate in normalized:
            return normalized.index(candidate)
    return NOT_PRESENT


def detect_mapping(headers: list[str]) -> tuple[ColumnMapping, bool]:
    """
    Returns (mapping, auto_mapped). When any of date / amount / description
    is missing, those fall back to columns 0 / 1 / 2 and auto_mapped is
    False so the caller can ask for a manual mapping.
    """
    date_idx = find_column_index(headers, KNOWN_COLUMNS["date"])
    amount_idx = find_column_index(headers, KNOWN_COLUMNS["amount"])
    desc_idx = find_column_index(headers, KNOWN_COLUMNS["description"])
    currency_idx = find_column_index(headers, KNOWN_COLUMNS["currency"])
    counterparty_idx = find_column_index(headers, KNOWN_COLUMNS["counterparty"])

    auto_mapped = date_idx != NOT_PRESENT and amount_idx != NOT_PRESENT and desc_idx != NOT_PRESENT

    mapping = ColumnMapping(
        date=date_idx if date_idx != NOT_PRESENT else DEFAULT_MAPPING.date,
        amount=amount_idx if amount_idx != NOT_PRESENT else DEFAULT_MAPPING.amount,
        description=desc_idx if desc_idx != NOT_PRESENT else DEFAULT_MAPPING.description,
        currency=currency_idx,
        counterparty=counterparty_idx,
    )
    return mapping, auto_mapped
