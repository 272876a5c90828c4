"""
Reference Router
Static currencies and categories used by the transaction form
"""
from typing import Dict, List

from fastapi import APIRouter

from expense_manager.core.reference import CATEGORIES, CURRENCIES
from expense_manager.models.transaction import Currency

router = APIRouter()


@router.get("/currencies", response_model=List[Currency])
def list_currencies():
    return list(CURRENCIES)


@router.get("/categories")
def list_categories() -> Dict[str, List[str]]:
    return {kind.value: list(labels) for kind, labels in CATEGORIES.items()}
