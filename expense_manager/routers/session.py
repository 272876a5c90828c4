"""
Session Router
User name, currency and month selection for the in-memory session
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from expense_manager.core.session import SessionState, get_session
from expense_manager.models.session import CurrencyUpdate, MonthUpdate, SessionPublic, UserNameUpdate
from expense_manager.utils.analyzer import format_period, month_key, parse_month

router = APIRouter()
logger = logging.getLogger(__name__)


def _public(session: SessionState) -> SessionPublic:
    return SessionPublic(
        user_name=session.user_name,
        currency=session.currency,
        selected_month=month_key(session.selected_month),
        period=format_period(session.selected_month),
        phase=session.phase.value,
        transaction_count=len(session.store),
    )


@router.get("", response_model=SessionPublic)
def get_session_state(session: SessionState = Depends(get_session)):
    return _public(session)


@router.put("/name", response_model=SessionPublic)
def set_user_name(update: UserNameUpdate, session: SessionState = Depends(get_session)):
    session.set_user_name(update.name)
    return _public(session)


@router.put("/currency", response_model=SessionPublic)
def select_currency(update: CurrencyUpdate, session: SessionState = Depends(get_session)):
    if session.select_currency(update.code) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown currency '{update.code}'")
    return _public(session)


@router.put("/month", response_model=SessionPublic)
def select_month(update: MonthUpdate, session: SessionState = Depends(get_session)):
    try:
        target = parse_month(update.month)
    except ValueError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    session.select_month(target)
    return _public(session)
