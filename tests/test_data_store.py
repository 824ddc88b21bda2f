import json

import pytest
from pydantic import ValidationError

from finance_tracker.storage import AppData, DataStore, export_data, parse_app_data
from finance_tracker.storage.models import DEFAULT_EXCHANGE_RATE


def _store(tmp_path) -> DataStore:
    return DataStore(tmp_path / "data.json")


def _seeded(store: DataStore) -> AppData:
    data = store.load()
    data = store.add_transaction(
        data, type="income", amount=5000, currency="USD", category="Salary", description="Pay", date="2025-01-01"
    )
    data = store.add_transaction(
        data,
        type="expense",
        amount=400,
        currency="PLN",
        category="Food",
        description="Biedronka",
        date="2025-01-02",
        exchangeRateAtTime=4.0,
    )
    data = store.add_debt(data, name="Car loan", totalAmount=10000, paidAmount=2500, currency="PLN", interestRate=7.5)
    data = store.add_savings_goal(data, name="Trip", targetAmount=3000, currency="USD", deadline="2025-12-31")
    return store.update_settings(data, primaryCurrency="PLN", monthlyBudget=2000)


def test_missing_file_gives_defaults(tmp_path):
    data = _store(tmp_path).load()
    assert data == AppData()
    assert data.settings.primaryCurrency == "USD"
    assert data.settings.exchangeRate == DEFAULT_EXCHANGE_RATE
    assert data.settings.autoExchangeRate is True


def test_corrupt_file_gives_defaults(tmp_path):
    store = _store(tmp_path)
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() == AppData()


def test_partial_settings_are_merged_with_defaults(tmp_path):
    store = _store(tmp_path)
    store.path.write_text(json.dumps({"transactions": [], "settings": {"exchangeRate": 3.9}}), encoding="utf-8")
    data = store.load()
    assert data.settings.exchangeRate == 3.9
    assert data.settings.primaryCurrency == "USD"
    assert data.debts == []


def test_mutations_persist_and_do_not_touch_input(tmp_path):
    store = _store(tmp_path)
    empty = store.load()
    data = _seeded(store)

    assert empty.transactions == []
    assert len(data.transactions) == 2
    assert len({t.id for t in data.transactions}) == 2
    assert data.settings.primaryCurrency == "PLN"
    assert data.settings.exchangeRate == DEFAULT_EXCHANGE_RATE
    assert store.load() == data


def test_update_and_delete_by_id(tmp_path):
    store = _store(tmp_path)
    data = _seeded(store)
    first = data.transactions[0]

    changed = first.model_copy(update={"amount": 5200.0})
    data2 = store.update_transaction(data, changed)
    assert data2.transactions[0].amount == 5200.0
    assert data.transactions[0].amount == 5000.0

    data3 = store.delete_transaction(data2, first.id)
    assert [t.id for t in data3.transactions] == [data.transactions[1].id]

    assert store.delete_transaction(data3, "missing") == data3

    debt = data3.debts[0]
    data4 = store.update_debt(data3, debt.model_copy(update={"paidAmount": 3000.0}))
    assert data4.debts[0].paidAmount == 3000.0
    assert store.delete_debt(data4, debt.id).debts == []

    goal = data4.savingsGoals[0]
    data5 = store.update_savings_goal(data4, goal.model_copy(update={"currentAmount": 100.0}))
    assert data5.savingsGoals[0].currentAmount == 100.0
    assert store.delete_savings_goal(data5, goal.id).savingsGoals == []


def test_non_positive_amount_is_rejected(tmp_path):
    store = _store(tmp_path)
    with pytest.raises(ValidationError):
        store.add_transaction(
            store.load(), type="expense", amount=0, currency="USD", category="Food", date="2025-01-01"
        )


def test_export_import_round_trip(tmp_path):
    store = _store(tmp_path)
    data = _seeded(store)

    other = DataStore(tmp_path / "other.json")
    imported = other.import_data(export_data(data))

    assert imported == data
    assert other.load() == data


def test_export_uses_persisted_document_keys(tmp_path):
    data = _seeded(_store(tmp_path))
    doc = json.loads(export_data(data))
    assert set(doc) == {"transactions", "debts", "savingsGoals", "settings"}
    assert doc["transactions"][1]["exchangeRateAtTime"] == 4.0
    assert "exchangeRateAtTime" not in doc["transactions"][0]
    assert doc["settings"]["primaryCurrency"] == "PLN"


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        json.dumps({"settings": {}}),
        json.dumps({"transactions": []}),
        json.dumps({"transactions": {}, "settings": {}}),
        json.dumps({"transactions": [{"id": "x", "type": "expense"}], "settings": {}}),
    ],
)
def test_invalid_import_is_rejected_without_writing(tmp_path, text):
    store = _store(tmp_path)
    data = _seeded(store)
    before = store.path.read_text(encoding="utf-8")

    assert parse_app_data(text) is None
    assert store.import_data(text) is None
    assert store.path.read_text(encoding="utf-8") == before
    assert store.load() == data


def test_import_accepts_minimal_document(tmp_path):
    store = _store(tmp_path)
    imported = store.import_data(json.dumps({"transactions": [], "settings": {}}))
    assert imported == AppData()


def test_invalid_record_is_dropped_without_losing_the_rest(tmp_path):
    store = _store(tmp_path)
    good = {"id": "a", "type": "income", "amount": 100, "currency": "USD", "category": "Salary", "date": "2025-01-01"}
    bad = {**good, "id": "b", "currency": "EUR"}
    store.path.write_text(
        json.dumps(
            {
                "transactions": [good, bad],
                "debts": [{"id": "d", "name": "Loan"}],
                "settings": {"exchangeRate": 3.9},
            }
        ),
        encoding="utf-8",
    )

    data = store.load()
    assert [t.id for t in data.transactions] == ["a"]
    assert data.debts == []
    assert data.settings.exchangeRate == 3.9

    store.delete_transaction(data, "missing")
    reloaded = store.load()
    assert [t.id for t in reloaded.transactions] == ["a"]
    assert reloaded.settings.exchangeRate == 3.9


def test_invalid_settings_fall_back_without_dropping_records(tmp_path):
    store = _store(tmp_path)
    good = {"id": "a", "type": "expense", "amount": 10, "currency": "PLN", "category": "Food", "date": "2025-01-01"}
    store.path.write_text(json.dumps({"transactions": [good], "settings": {"exchangeRate": -1}}), encoding="utf-8")

    data = store.load()
    assert [t.id for t in data.transactions] == ["a"]
    assert data.settings.exchangeRate == DEFAULT_EXCHANGE_RATE


@pytest.mark.parametrize(
    ("tx_type", "category"),
    [("income", "Food"), ("expense", "Salary"), ("expense", "Bananas"), ("income", "Bananas")],
)
def test_category_must_belong_to_transaction_type(tmp_path, tx_type, category):
    store = _store(tmp_path)
    with pytest.raises(ValidationError):
        store.add_transaction(
            store.load(), type=tx_type, amount=10, currency="USD", category=category, date="2025-01-01"
        )
    assert store.load().transactions == []
