from .columns import DEFAULT_MAPPING, ColumnMapping, detect_mapping
from .models import ParseResult, ParsedBankTransaction
from .pipeline import normalize_row, parse_bank_csv, remap_transactions, to_transaction

__all__ = [
    "ColumnMapping",
    "DEFAULT_MAPPING",
    "ParseResult",
    "ParsedBankTransaction",
    "detect_mapping",
    "normalize_row",
    "parse_bank_csv",
    "remap_transactions",
    "to_transaction",
]
