import logging
from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from expense_manager.core.session import SessionState, get_session
from expense_manager.utils.analyzer import FinanceAnalyzer, format_period, month_key, parse_month

router = APIRouter()
logger = logging.getLogger(__name__)


def get_analyzer(request: Request) -> FinanceAnalyzer:
    return request.app.state.analyzer


def resolve_month(month: Optional[str], session: SessionState) -> date:
    """Parse a YYYY-MM path/query value, defaulting to the session's selected month."""
    if month is None:
        return session.selected_month
    try:
        return parse_month(month)
    except ValueError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("")
def monthly_analysis(
    month: Optional[str] = None,
    session: SessionState = Depends(get_session),
    analyzer: FinanceAnalyzer = Depends(get_analyzer),
) -> Dict:
    """
    Totals, savings and ranked categories for the given month (e.g. '2025-01').
    """
    target = resolve_month(month, session)
    result = analyzer.summarize(session.store, target)
    logger.info(
        f"Analysis for {month_key(target)}: income={result.total_income:.2f}, "
        f"expense={result.total_expense:.2f}"
    )
    return {
        "month": month_key(target),
        "period": format_period(target),
        "currency": session.currency.model_dump(),
        **result.to_dict(),
    }
