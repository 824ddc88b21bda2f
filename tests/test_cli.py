import json

import pytest

from finance_tracker import cli
from finance_tracker.config import load_settings


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "cache" / "data.json"))
    load_settings.cache_clear()
    yield tmp_path
    load_settings.cache_clear()


def test_health(env, capsys):
    assert cli.main(["health"]) == 0
    assert capsys.readouterr().out.strip() == "ok"


def test_import_commit_then_breakdown(env, capsys):
    csv = env / "statement.csv"
    csv.write_text(
        "Data operacji;Kwota;Opis transakcji;Waluta\n"
        "15.01.2025;5000,00;Wynagrodzenie;USD\n"
        "16.01.2025;-400,00;Biedronka;PLN\n",
        encoding="utf-8",
    )

    assert cli.main(["import-csv", str(csv), "--commit"]) == 0
    out = capsys.readouterr().out
    assert "Imported 2 transactions." in out

    data = json.loads((env / "cache" / "data.json").read_text(encoding="utf-8"))
    pln = [t for t in data["transactions"] if t["currency"] == "PLN"][0]
    assert pln["exchangeRateAtTime"] == data["settings"]["exchangeRate"]

    assert cli.main(["breakdown", "--month", "1", "--year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Budget 2025-01 (USD)" in out
    assert "Income: $5,000.00" in out
    assert "Food" in out


def test_import_with_manual_mapping(env, capsys):
    csv = env / "generic.csv"
    csv.write_text("Opis,Kiedy,Ile\nBiedronka,2025-01-15,-50.00\n", encoding="utf-8")

    assert cli.main(["import-csv", str(csv), "--mapping", "1,2,0"]) == 0
    out = capsys.readouterr().out
    assert "Parsed transactions: 1" in out
    assert "Food" in out


def test_missing_file_and_bad_mapping(env, capsys):
    assert cli.main(["import-csv", str(env / "nope.csv")]) == 2
    csv = env / "x.csv"
    csv.write_text("a,b\n1,2\n", encoding="utf-8")
    assert cli.main(["import-csv", str(csv), "--mapping", "0,1"]) == 2


def test_add_delete_export_import(env, capsys):
    assert cli.main(["add", "--type", "expense", "--amount", "20", "--currency", "PLN", "--category", "Food"]) == 0
    tx_id = capsys.readouterr().out.split("=")[1].strip()

    backup = env / "backup.json"
    assert cli.main(["export", "--out", str(backup)]) == 0
    doc = json.loads(backup.read_text(encoding="utf-8"))
    assert doc["transactions"][0]["id"] == tx_id
    assert doc["transactions"][0]["exchangeRateAtTime"] == doc["settings"]["exchangeRate"]

    assert cli.main(["delete", tx_id]) == 0
    assert "deleted = 1" in capsys.readouterr().out

    assert cli.main(["import-data", str(backup)]) == 0
    assert "transactions = 1" in capsys.readouterr().out

    bad = env / "bad.json"
    bad.write_text('{"transactions": []}', encoding="utf-8")
    assert cli.main(["import-data", str(bad)]) == 1


@pytest.mark.parametrize(
    "argv",
    [
        ["add", "--type", "income", "--amount", "10", "--category", "Food"],
        ["add", "--type", "expense", "--amount", "10", "--category", "Bananas"],
    ],
)
def test_add_rejects_category_outside_type(env, capsys, argv):
    assert cli.main(argv) == 2
    assert "Invalid transaction" in capsys.readouterr().out
    assert not (env / "cache" / "data.json").exists()


def test_month_zero_is_rejected(env, capsys):
    assert cli.main(["breakdown", "--month", "0", "--year", "2025"]) == 2
    assert "--month must be 1-12" in capsys.readouterr().out
