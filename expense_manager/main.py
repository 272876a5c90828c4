import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expense_manager.core.config import Settings, settings as default_settings
from expense_manager.core.session import SessionState
from expense_manager.routers import analysis, health, reference, reports, session, transactions
from expense_manager.utils.analyzer import FinanceAnalyzer

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Session started, transactions are kept in memory only")
        yield
        logger.info(f"Session ended, discarding {len(app.state.session.store)} transaction(s)")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session = SessionState(settings)
    app.state.analyzer = FinanceAnalyzer(top_count=settings.TOP_EXPENSE_COUNT)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.PROJECT_NAME} API"}

    prefix = settings.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["Health"])  # /api/health
    app.include_router(session.router, prefix=f"{prefix}/session", tags=["Session"])
    app.include_router(reference.router, prefix=f"{prefix}/reference", tags=["Reference"])
    app.include_router(transactions.router, prefix=f"{prefix}/transactions", tags=["Transactions"])
    app.include_router(analysis.router, prefix=f"{prefix}/analysis", tags=["Analysis"])
    app.include_router(reports.router, prefix=f"{prefix}/reports", tags=["Reports"])
    return app


app = create_app()
