"""
Static reference data: currencies, categories per transaction kind and the
per-category saving suggestions shown for the top expenses.
"""
from types import MappingProxyType
from typing import Optional, Tuple

from expense_manager.models.transaction import Currency, TransactionKind


CURRENCIES: Tuple[Currency, ...] = (
    Currency(code="USD", symbol="$", name="US Dollar"),
    Currency(code="EUR", symbol="€", name="Euro"),
    Currency(code="GBP", symbol="£", name="British Pound"),
    Currency(code="JPY", symbol="¥", name="Japanese Yen"),
    Currency(code="INR", symbol="₹", name="Indian Rupee"),
    Currency(code="CAD", symbol="C$", name="Canadian Dollar"),
    Currency(code="AUD", symbol="A$", name="Australian Dollar"),
)

CATEGORIES = MappingProxyType({
    TransactionKind.INCOME: (
        "Salary",
        "Freelance",
        "Investments",
        "Business",
        "Gifts",
        "Other",
    ),
    TransactionKind.EXPENSE: (
        "Housing",
        "Transportation",
        "Food",
        "Utilities",
        "Entertainment",
        "Shopping",
        "Healthcare",
        "Education",
        "Other",
    ),
})

SUGGESTIONS = MappingProxyType({
    "Housing": "Consider roommates or a smaller place to reduce rent/mortgage",
    "Transportation": "Use public transport or carpool to save on fuel costs",
    "Food": "Cook meals at home and plan your grocery shopping",
    "Utilities": "Install energy-efficient appliances and monitor usage",
    "Entertainment": "Look for free events and activities in your area",
    "Shopping": "Make a shopping list and stick to it, wait for sales",
})

FALLBACK_SUGGESTION = "Track your spending in this category and look for areas to cut back."


def get_currency(code: str) -> Optional[Currency]:
    code = code.upper()
    return next((c for c in CURRENCIES if c.code == code), None)


def categories_for(kind: TransactionKind) -> Tuple[str, ...]:
    return CATEGORIES[TransactionKind(kind)]
