from .data_store import DataStore, export_data, parse_app_data
from .models import AppData, Debt, SavingsGoal, Transaction, UserSettings

__all__ = [
    "DataStore",
    "AppData",
    "Transaction",
    "Debt",
    "SavingsGoal",
    "UserSettings",
    "export_data",
    "parse_app_data",
]
