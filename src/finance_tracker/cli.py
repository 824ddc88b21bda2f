import argparse
import logging
from pathlib import Path

from . import __version__
from .config import load_settings
from .logging_setup import setup_logging

COMMANDS = [
    "health",
    "import-csv",
    "breakdown",
    "advice",
    "categories",
    "rate",
    "add",
    "delete",
    "export",
    "import-data",
]


def _read_text(path: str) -> str | None:
    p = Path(path)
    if not p.is_file():
        return None
    return p.read_text(encoding="utf-8-sig")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="finance-tracker")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument("command", nargs="?", default="health", choices=COMMANDS, help="Command to run")
    parser.add_argument("target", nargs="?", default=None, help="File path (import-csv / import-data) or id (delete)")

    parser.add_argument(
        "--mapping",
        type=str,
        default=None,
        help="Manual column mapping for import-csv: date,amount,description[,currency,counterparty]. "
        "Use -1 for a missing optional column.",
    )
    parser.add_argument("--commit", action="store_true", help="Save parsed rows (import-csv)")

    parser.add_argument("--month", type=int, default=None, help="Month 1-12 (default: current)")
    parser.add_argument("--year", type=int, default=None, help="Year (default: current)")

    parser.add_argument("--refresh", action="store_true", help="Fetch the live USD/PLN rate (rate)")

    parser.add_argument("--type", choices=["income", "expense"], default="expense")
    parser.add_argument("--amount", type=float, default=None)
    parser.add_argument("--currency", choices=["USD", "PLN"], default="USD")
    parser.add_argument("--category", type=str, default=None)
    parser.add_argument("--description", type=str, default="")
    parser.add_argument("--date", type=str, default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--rate", type=float, default=None, help="USD->PLN rate for a PLN transaction")

    parser.add_argument("--out", type=str, default=None, help="Write export to this file instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    from .storage import DataStore

    store = DataStore(settings.data_file)

    if args.command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    if args.command == "categories":
        from .analytics.categories import EXPENSE_CATEGORIES, INCOME_CATEGORIES

        print("income:", ", ".join(INCOME_CATEGORIES))
        print("expense:", ", ".join(EXPENSE_CATEGORIES))
        return 0

    if args.command == "import-csv":
        from .importer import ColumnMapping, parse_bank_csv, remap_transactions, to_transaction
        from .report import templates

        text = _read_text(args.target or "")
        if text is None:
            print(templates.error(f"File not found: {args.target}"))
            return 2

        result = parse_bank_csv(text)
        if args.mapping:
            try:
                mapping = ColumnMapping.from_string(args.mapping)
            except ValueError as e:
                print(templates.error(f"Bad --mapping: {e}"))
                return 2
            result = remap_transactions(result, mapping)

        print(templates.render_import_preview(result))

        if args.commit:
            if not result.transactions:
                print(templates.warning("Nothing to import."))
                return 1
            data = store.load()
            rate = data.settings.exchangeRate
            txs = [to_transaction(t, exchange_rate=rate) for t in result.transactions]
            store.add_transactions(data, txs)
            print(templates.success(f"Imported {len(txs)} transactions."))
        return 0

    if args.command in ("breakdown", "advice"):
        from .analytics.advisor import savings_advice
        from .analytics.compute import expenses_by_category, monthly_breakdown
        from .core.time_ranges import current_month
        from .report import templates

        now = current_month()
        month = args.month if args.month is not None else now.month
        year = args.year if args.year is not None else now.year
        if not 1 <= month <= 12:
            print(templates.error("--month must be 1-12"))
            return 2

        data = store.load()
        currency = data.settings.primaryCurrency
        rate = data.settings.exchangeRate

        b = monthly_breakdown(data.transactions, month, year, currency, rate)
        advice_block = templates.render_advice(savings_advice(b), currency)

        if args.command == "advice":
            print(advice_block)
            return 0

        cats = expenses_by_category(data.transactions, month, year, currency, rate)
        print(
            templates.report_layout(
                header=f"Budget {year:04d}-{month:02d} ({currency})",
                summary_block=templates.render_breakdown(b, currency),
                categories_block=templates.render_categories(cats, currency),
                advice_block=advice_block,
            )
        )
        return 0

    if args.command == "rate":
        data = store.load()
        if args.refresh:
            from .rates import ExchangeRateClient, sync_exchange_rate

            client = ExchangeRateClient(
                url=settings.rate_api_url,
                cache_root=settings.cache_dir / "rates",
                ttl_seconds=settings.rate_cache_ttl,
                timeout=settings.rate_timeout,
            )
            try:
                updated = sync_exchange_rate(data, client)
            finally:
                client.close()

            if updated is not data:
                store.save(updated)
                data = updated

        print("exchange_rate =", data.settings.exchangeRate)
        print("auto_exchange_rate =", data.settings.autoExchangeRate)
        return 0

    if args.command == "add":
        from datetime import date

        from pydantic import ValidationError

        from .analytics.categories import OTHER_EXPENSE, OTHER_INCOME

        if args.amount is None:
            print("--amount is required")
            return 2

        data = store.load()
        fields = {
            "type": args.type,
            "amount": args.amount,
            "currency": args.currency,
            "category": args.category or (OTHER_INCOME if args.type == "income" else OTHER_EXPENSE),
            "description": args.description.strip(),
            "date": args.date or date.today().isoformat(),
        }
        if args.currency == "PLN":
            fields["exchangeRateAtTime"] = args.rate or data.settings.exchangeRate

        try:
            data = store.add_transaction(data, **fields)
        except ValidationError as e:
            print(f"Invalid transaction: {e}")
            return 2

        print("id =", data.transactions[-1].id)
        return 0

    if args.command == "delete":
        if not args.target:
            print("transaction id is required")
            return 2
        data = store.load()
        before = len(data.transactions)
        data = store.delete_transaction(data, args.target)
        print("deleted =", before - len(data.transactions))
        return 0

    if args.command == "export":
        payload = store.export_data(store.load())
        if args.out:
            Path(args.out).write_text(payload, encoding="utf-8")
            print("written =", args.out)
        else:
            print(payload)
        return 0

    if args.command == "import-data":
        text = _read_text(args.target or "")
        if text is None:
            print(f"File not found: {args.target}")
            return 2
        imported = store.import_data(text)
        if imported is None:
            print("Import rejected: expected a JSON document with transactions and settings.")
            return 1
        print("transactions =", len(imported.transactions))
        return 0

    return 1
