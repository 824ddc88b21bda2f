import pytest

from finance_tracker.analytics.categories import (
    CATEGORY_KEYWORDS,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    category_color,
    detect_category,
)
from finance_tracker.analytics.classify import classify_type, fit_category, suggest_category


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Zakup w Biedronka", "Food"),
        ("Orlen paliwo", "Transportation"),
        ("PGE Energia", "Utilities"),
        ("NETFLIX.COM", "Entertainment"),
        ("Allegro zamowienie", "Shopping"),
        ("MEDICOVER wizyta", "Healthcare"),
        ("Czynsz za mieszkanie", "Housing"),
        ("Wynagrodzenie za styczeń", "Salary"),
        ("Random purchase XYZ", "Other"),
    ],
)
def test_detect_category(description, expected):
    assert detect_category(description) == expected


def test_first_keyword_in_table_order_wins():
    # "uber eats" is listed before "uber"
    assert detect_category("UBER EATS order") == "Food"
    assert detect_category("Uber trip") == "Transportation"
    assert detect_category("Bolt Food") == "Food"


def test_keyword_table_only_targets_known_categories():
    known = set(INCOME_CATEGORIES) | set(EXPENSE_CATEGORIES)
    assert all(cat in known for _, cat in CATEGORY_KEYWORDS)
    assert not set(INCOME_CATEGORIES) & set(EXPENSE_CATEGORIES)


def test_type_from_sign():
    assert classify_type(10.0) == "income"
    assert classify_type(-10.0) == "expense"


def test_income_other_becomes_other_income():
    assert suggest_category("Other", "income") == "Other Income"
    assert suggest_category("Other", "expense") == "Other"
    assert suggest_category("Shopping", "income") == "Shopping"


def test_category_color_fallback():
    assert category_color("Food") == "#ec4899"
    assert category_color("Something else") == "#64748b"


def test_fit_category_keeps_matching_side():
    assert fit_category("Salary", "income") == "Salary"
    assert fit_category("Food", "expense") == "Food"
    assert fit_category("Food", "income") == "Other Income"
    assert fit_category("Salary", "expense") == "Other"
