from __future__ import annotations

# Fixed enumerations. Income and expense sets are disjoint.
INCOME_CATEGORIES: list[str] = [
    "Salary",
    "Freelance",
    "Investment",
    "Rental",
    "Gift",
    "Other Income",
]

EXPENSE_CATEGORIES: list[str] = [
    "Housing",
    "Transportation",
    "Food",
    "Utilities",
    "Healthcare",
    "Insurance",
    "Entertainment",
    "Shopping",
    "Education",
    "Personal",
    "Subscriptions",
    "Debt Payment",
    "Other",
]

# 50/30/20 buckets. Anything outside NEEDS and DEBT_CATEGORY counts as wants.
NEEDS_CATEGORIES: frozenset[str] = frozenset(
    {"Housing", "Transportation", "Food", "Utilities", "Healthcare", "Insurance"}
)
WANTS_CATEGORIES: frozenset[str] = frozenset(
    {"Entertainment", "Shopping", "Education", "Personal", "Subscriptions"}
)
DEBT_CATEGORY = "Debt Payment"

OTHER_EXPENSE = "Other"
OTHER_INCOME = "Other Income"

DEFAULT_COLOR = "#64748b"

CATEGORY_COLORS: dict[str, str] = {
    "Housing": "#6366f1",
    "Transportation": "#8b5cf6",
    "Food": "#ec4899",
    "Utilities": "#f59e0b",
    "Healthcare": "#ef4444",
    "Insurance": "#f97316",
    "Entertainment": "#10b981",
    "Shopping": "#14b8a6",
    "Education": "#3b82f6",
    "Personal": "#a855f7",
    "Subscriptions": "#06b6d4",
    "Debt Payment": "#dc2626",
    "Other": "#64748b",
    "Salary": "#10b981",
    "Freelance": "#34d399",
    "Investment": "#6366f1",
    "Rental": "#8b5cf6",
    "Gift": "#f59e0b",
    "Other Income": "#64748b",
}

# Evaluated top to bottom, first substring hit wins.
# "uber eats" must stay above "uber", "bolt food" above "bolt".
CATEGORY_KEYWORDS: list[tuple[str, str]] = [
    # Housing
    ("czynsz", "Housing"),
    ("wynajem", "Housing"),
    ("mieszkanie", "Housing"),
    ("rent", "Housing"),
    ("mortgage", "Housing"),
    ("hipoteka", "Housing"),
    # Food
    ("biedronka", "Food"),
    ("lidl", "Food"),
    ("żabka", "Food"),
    ("zabka", "Food"),
    ("auchan", "Food"),
    ("carrefour", "Food"),
    ("kaufland", "Food"),
    ("stokrotka", "Food"),
    ("netto", "Food"),
    ("restaurant", "Food"),
    ("restauracja", "Food"),
    ("mcdonalds", "Food"),
    ("kfc", "Food"),
    ("uber eats", "Food"),
    ("glovo", "Food"),
    ("bolt food", "Food"),
    ("pyszne", "Food"),
    # Transportation
    ("uber", "Transportation"),
    ("bolt", "Transportation"),
    ("orlen", "Transportation"),
    ("bp", "Transportation"),
    ("shell", "Transportation"),
    ("paliwo", "Transportation"),
    ("mpk", "Transportation"),
    ("ztm", "Transportation"),
    ("koleje", "Transportation"),
    ("pkp", "Transportation"),
    ("flixbus", "Transportation"),
    ("parking", "Transportation"),
    # Utilities
    ("pge", "Utilities"),
    ("tauron", "Utilities"),
    ("enea", "Utilities"),
    ("energa", "Utilities"),
    ("wodociągi", "Utilities"),
    ("wodociagi", "Utilities"),
    ("internet", "Utilities"),
    ("orange", "Utilities"),
    ("play", "Utilities"),
    ("t-mobile", "Utilities"),
    ("plus", "Utilities"),
    # Entertainment
    ("netflix", "Entertainment"),
    ("spotify", "Entertainment"),
    ("hbo", "Entertainment"),
    ("disney", "Entertainment"),
    ("cinema", "Entertainment"),
    ("kino", "Entertainment"),
    ("multikino", "Entertainment"),
    ("helios", "Entertainment"),
    # Shopping
    ("allegro", "Shopping"),
    ("amazon", "Shopping"),
    ("zalando", "Shopping"),
    ("mediamarkt", "Shopping"),
    ("media markt", "Shopping"),
    ("rtv euro", "Shopping"),
    ("ikea", "Shopping"),
    ("decathlon", "Shopping"),
    ("rossmann", "Shopping"),
    ("hebe", "Shopping"),
    # Healthcare
    ("apteka", "Healthcare"),
    ("pharmacy", "Healthcare"),
    ("lekarz", "Healthcare"),
    ("doctor", "Healthcare"),
    ("medicover", "Healthcare"),
    ("luxmed", "Healthcare"),
    ("enel-med", "Healthcare"),
    # Insurance
    ("ubezpieczenie", "Insurance"),
    ("pzu", "Insurance"),
    ("warta", "Insurance"),
    ("ergo hestia", "Insurance"),
    # Education
    ("uczelnia", "Education"),
    ("szkoła", "Education"),
    ("kurs", "Education"),
    ("udemy", "Education"),
    ("coursera", "Education"),
    # Subscriptions
    ("subskrypcja", "Subscriptions"),
    ("subscription", "Subscriptions"),
    ("apple", "Subscriptions"),
    ("google storage", "Subscriptions"),
    ("youtube premium", "Subscriptions"),
    # Income
    ("wynagrodzenie", "Salary"),
    ("przelew z tytulu wynagrodzenia", "Salary"),
    ("salary", "Salary"),
    ("pensja", "Salary"),
]


def detect_category(description: str) -> str:
    d = (description or "").lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in d:
            return category
    return OTHER_EXPENSE


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, DEFAULT_COLOR)


def is_income_category(category: str) -> bool:
    return category in INCOME_CATEGORIES


def is_expense_category(category: str) -> bool:
    return category in EXPENSE_CATEGORIES
