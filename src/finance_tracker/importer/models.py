from __future__ import annotations

from dataclasses import dataclass, field

from ..storage.models import Currency, TxType
from .columns import DEFAULT_MAPPING, ColumnMapping

MAX_DESCRIPTION_LEN = 200


@dataclass(frozen=True)
class ParsedBankTransaction:
    date: str
    amount: float  # absolute value
    description: str
    currency: Currency
    counterparty: str
    suggested_category: str
    suggested_type: TxType
    raw: tuple[str, ...]


@dataclass(frozen=True)
class ParseResult:
    headers: list[str] = field(default_factory=list)
    # every data row that survived tokenizing, kept so a new mapping can be applied
    rows: list[list[str]] = field(default_factory=list)
    transactions: list[ParsedBankTransaction] = field(default_factory=list)
    auto_mapped: bool = False
    mapping: ColumnMapping = DEFAULT_MAPPING

    @property
    def is_empty(self) -> bool:
        return not self.headers
