from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from .models import AppData, Debt, SavingsGoal, Transaction, UserSettings

logger = logging.getLogger(__name__)

M = TypeVar("M", Debt, SavingsGoal, Transaction)


def _new_id() -> str:
    return str(uuid.uuid4())


def export_data(data: AppData) -> str:
    return data.model_dump_json(indent=2, exclude_none=True)


def parse_app_data(text: str) -> AppData | None:
    """
    Minimal import validation: a JSON object with a `transactions` list and
    a `settings` object, and every record must validate.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Rejected import: invalid JSON (%s)", e)
        return None

    if not isinstance(raw, dict):
        logger.warning("Rejected import: top level is not an object")
        return None
    if not isinstance(raw.get("transactions"), list) or not isinstance(raw.get("settings"), dict):
        logger.warning("Rejected import: missing transactions list or settings object")
        return None

    try:
        return AppData.model_validate(raw)
    except ValidationError as e:
        logger.warning("Rejected import: %d validation error(s)", e.error_count())
        return None


def _valid_records(model: type[M], items: Any, path: Path) -> list[M]:
    if not isinstance(items, list):
        return []
    out: list[M] = []
    for i, item in enumerate(items):
        try:
            out.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping invalid %s #%d in %s: %s", model.__name__, i, path, e)
    return out


class DataStore:
    """
    The whole dataset lives in one JSON document:

      { "transactions": [...], "debts": [...], "savingsGoals": [...], "settings": {...} }

    Every mutation returns a fresh AppData and rewrites the file
    (last writer wins).
    """

    def __init__(self, path: Path | None = None):
        self.path = path or (Path(".cache") / "finance-data.json")
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load_raw(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Cannot read %s, starting from defaults: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> AppData:
        """
        Invalid records are dropped one by one (logged), so a single bad row
        never costs the rest of the document. Invalid settings fall back to
        defaults.
        """
        raw = self.load_raw()

        settings_raw = raw.get("settings")
        settings = {**UserSettings().model_dump(), **(settings_raw if isinstance(settings_raw, dict) else {})}
        try:
            user_settings = UserSettings.model_validate(settings)
        except ValidationError as e:
            logger.warning("Stored settings in %s are invalid, using defaults: %s", self.path, e)
            user_settings = UserSettings()

        return AppData(
            transactions=_valid_records(Transaction, raw.get("transactions"), self.path),
            debts=_valid_records(Debt, raw.get("debts"), self.path),
            savingsGoals=_valid_records(SavingsGoal, raw.get("savingsGoals"), self.path),
            settings=user_settings,
        )

    def save(self, data: AppData) -> Path:
        tmp = self.path.with_suffix(".json.tmp")
        tmp.write_text(export_data(data), encoding="utf-8")
        tmp.replace(self.path)
        return self.path

    def _commit(self, data: AppData, **changes: Any) -> AppData:
        updated = data.model_copy(update=changes)
        self.save(updated)
        return updated

    # transactions

    def add_transaction(self, data: AppData, **fields: Any) -> AppData:
        tx = Transaction.model_validate({**fields, "id": _new_id()})
        return self._commit(data, transactions=[*data.transactions, tx])

    def add_transactions(self, data: AppData, txs: list[Transaction]) -> AppData:
        return self._commit(data, transactions=[*data.transactions, *txs])

    def update_transaction(self, data: AppData, tx: Transaction) -> AppData:
        return self._commit(data, transactions=[tx if t.id == tx.id else t for t in data.transactions])

    def delete_transaction(self, data: AppData, tx_id: str) -> AppData:
        return self._commit(data, transactions=[t for t in data.transactions if t.id != tx_id])

    # debts

    def add_debt(self, data: AppData, **fields: Any) -> AppData:
        debt = Debt.model_validate({**fields, "id": _new_id()})
        return self._commit(data, debts=[*data.debts, debt])

    def update_debt(self, data: AppData, debt: Debt) -> AppData:
        return self._commit(data, debts=[debt if d.id == debt.id else d for d in data.debts])

    def delete_debt(self, data: AppData, debt_id: str) -> AppData:
        return self._commit(data, debts=[d for d in data.debts if d.id != debt_id])

    # savings goals

    def add_savings_goal(self, data: AppData, **fields: Any) -> AppData:
        goal = SavingsGoal.model_validate({**fields, "id": _new_id()})
        return self._commit(data, savingsGoals=[*data.savingsGoals, goal])

    def update_savings_goal(self, data: AppData, goal: SavingsGoal) -> AppData:
        return self._commit(data, savingsGoals=[goal if g.id == goal.id else g for g in data.savingsGoals])

    def delete_savings_goal(self, data: AppData, goal_id: str) -> AppData:
        return self._commit(data, savingsGoals=[g for g in data.savingsGoals if g.id != goal_id])

    # settings

    def update_settings(self, data: AppData, **changes: Any) -> AppData:
        merged = {**data.settings.model_dump(), **changes}
        return self._commit(data, settings=UserSettings.model_validate(merged))

    # export / import

    def export_data(self, data: AppData) -> str:
        return export_data(data)

    def import_data(self, text: str) -> AppData | None:
        parsed = parse_app_data(text)
        if parsed is None:
            return None
        self.save(parsed)
        return parsed
