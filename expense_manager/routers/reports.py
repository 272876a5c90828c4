import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from expense_manager.core.session import SessionState, get_session
from expense_manager.routers.analysis import get_analyzer, resolve_month
from expense_manager.utils import pdf_report
from expense_manager.utils.analyzer import FinanceAnalyzer, month_key

router = APIRouter()
logger = logging.getLogger(__name__)


def _attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/monthly/{month}")
def download_monthly_report(
    month: str,
    session: SessionState = Depends(get_session),
    analyzer: FinanceAnalyzer = Depends(get_analyzer),
):
    """
    Render the analysis for the given month (e.g. '2025-01') as a PDF download.
    """
    target = resolve_month(month, session)
    summary = analyzer.summarize(session.store, target)

    try:
        content = pdf_report.generate_pdf(
            analysis=summary,
            currency=session.currency,
            user_name=session.user_name,
            period=target,
        )
    except Exception as e:
        logger.error(f"Error generating PDF for {month_key(target)}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating report: {str(e)}")

    filename = pdf_report.report_filename(target, "pdf")
    logger.info(f"Generated {filename} ({len(content)} bytes)")
    return _attachment(content, "application/pdf", filename)


@router.get("/monthly/{month}/csv")
def download_monthly_csv(
    month: str,
    session: SessionState = Depends(get_session),
    analyzer: FinanceAnalyzer = Depends(get_analyzer),
):
    target = resolve_month(month, session)
    transactions = analyzer.filter_by_month(session.store, target)
    filename = pdf_report.report_filename(target, "csv")
    logger.info(f"Exporting {len(transactions)} transaction(s) to {filename}")
    return _attachment(pdf_report.generate_csv(transactions), "text/csv", filename)
