import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response, status

from expense_manager.core.session import SessionState, get_session
from expense_manager.models.transaction import Transaction, TransactionCreate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=Transaction, status_code=status.HTTP_201_CREATED)
def create_transaction(payload: TransactionCreate, session: SessionState = Depends(get_session)):
    data = payload.model_dump()
    if data["date"] is None:
        # the form's month picker: use the selected month
        data["date"] = datetime.combine(session.selected_month, datetime.min.time())
    return session.store.add(Transaction(**data))


@router.get("", response_model=List[Transaction])
def list_transactions(session: SessionState = Depends(get_session)):
    """Newest first."""
    return session.store.list()


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(transaction_id: str, session: SessionState = Depends(get_session)):
    session.store.remove(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
