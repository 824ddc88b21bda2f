from __future__ import annotations

import logging
import uuid
from typing import Iterable

from ..analytics.categories import detect_category
from ..analytics.classify import classify_type, fit_category, suggest_category
from ..storage.models import Transaction
from .columns import NOT_PRESENT, ColumnMapping, detect_mapping
from .csv_parser import parse_csv
from .models import MAX_DESCRIPTION_LEN, ParseResult, ParsedBankTransaction
from .normalize import parse_amount, parse_currency, parse_date

logger = logging.getLogger(__name__)


def _field(fields: list[str], idx: int) -> str:
    if idx == NOT_PRESENT or idx < 0 or idx >= len(fields):
        return ""
    return fields[idx]


def normalize_row(fields: list[str], mapping: ColumnMapping) -> ParsedBankTransaction | None:
    """
    Turns one raw CSV row into a ParsedBankTransaction under `mapping`.
    None means "skip": unreadable or zero amount.

    Both the first parse and any manual remap go through here.
    """
    amount = parse_amount(_field(fields, mapping.amount) or "0")
    if amount is None or amount == 0:
        return None

    description = _field(fields, mapping.description)
    counterparty = _field(fields, mapping.counterparty)
    full_desc = f"{counterparty} - {description}" if counterparty else description

    tx_type = classify_type(amount)
    category = suggest_category(detect_category(full_desc), tx_type)

    return ParsedBankTransaction(
        date=parse_date(_field(fields, mapping.date)),
        amount=abs(amount),
        description=full_desc[:MAX_DESCRIPTION_LEN],
        currency=parse_currency(_field(fields, mapping.currency)),
        counterparty=counterparty,
        suggested_category=category,
        suggested_type=tx_type,
        raw=tuple(fields),
    )


def normalize_rows(rows: Iterable[list[str]], mapping: ColumnMapping) -> list[ParsedBankTransaction]:
    out: list[ParsedBankTransaction] = []
    for fields in rows:
        parsed = normalize_row(fields, mapping)
        if parsed is not None:
            out.append(parsed)
    return out


def parse_bank_csv(text: str) -> ParseResult:
    table = parse_csv(text)
    if not table.headers:
        logger.info("CSV has no header/data lines, nothing parsed")
        return ParseResult()

    mapping, auto_mapped = detect_mapping(table.headers)
    transactions = normalize_rows(table.rows, mapping)

    logger.debug(
        "Parsed CSV: rows=%d transactions=%d auto_mapped=%s mapping=%s",
        len(table.rows),
        len(transactions),
        auto_mapped,
        mapping,
    )
    return ParseResult(
        headers=table.headers,
        rows=table.rows,
        transactions=transactions,
        auto_mapped=auto_mapped,
        mapping=mapping,
    )


def remap_transactions(result: ParseResult, mapping: ColumnMapping) -> ParseResult:
    """
    Re-normalizes every stored raw row under a user supplied mapping.
    The input result is left as is.
    """
    transactions = normalize_rows(result.rows, mapping)
    logger.debug("Remapped CSV: mapping=%s transactions=%d", mapping, len(transactions))
    return ParseResult(
        headers=list(result.headers),
        rows=result.rows,
        transactions=transactions,
        auto_mapped=False,
        mapping=mapping,
    )


def to_transaction(
    parsed: ParsedBankTransaction,
    exchange_rate: float,
    category: str | None = None,
) -> Transaction:
    """
    Confirm step: PLN rows are stamped with the rate in effect at import time.
    A suggestion from the other side of the income/expense split becomes
    that side's "Other"; an explicit `category` is used as given.
    """
    return Transaction(
        id=str(uuid.uuid4()),
        type=parsed.suggested_type,
        amount=parsed.amount,
        currency=parsed.currency,
        category=category or fit_category(parsed.suggested_category, parsed.suggested_type),
        description=parsed.description,
        date=parsed.date,
        exchangeRateAtTime=exchange_rate if parsed.currency == "PLN" else None,
    )
