"""
Health Check Router
Simple health check endpoint
"""
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from expense_manager.core.session import SessionState, get_session

router = APIRouter()


@router.get("/health")
async def health_check(request: Request, session: SessionState = Depends(get_session)):
    """
    Health check endpoint.
    Returns API status and the size of the in-memory session.
    """
    return {
        "status": "healthy",
        "service": request.app.title,
        "transactions": len(session.store),
        "timestamp": datetime.now().isoformat(),
    }
