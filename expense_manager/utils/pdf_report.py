import csv
import io
from datetime import date
from typing import Iterable, List

from fpdf import FPDF

from expense_manager.models.transaction import Currency, Transaction
from expense_manager.utils.analyzer import AnalysisResult, CategoryBreakdown, format_period

MARGIN = 20
TABLE_COLORS = {
    "income": (46, 204, 113),
    "top": (231, 76, 60),
    "other": (149, 165, 166),
}


def report_filename(period: date, ext: str = "pdf") -> str:
    return f"expense-report-{period:%b-%Y}.{ext}"


def _latin1(text: str) -> str:
    # core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def currency_label(currency: Currency) -> str:
    """Symbol when the core fonts can draw it, otherwise the code."""
    try:
        currency.symbol.encode("latin-1")
        return currency.symbol
    except UnicodeEncodeError:
        return f"{currency.code} "


def _section_title(pdf: FPDF, title: str) -> None:
    pdf.set_font("helvetica", "B", 18)
    pdf.set_text_color(0)
    pdf.cell(0, 10, title, new_x="LMARGIN", new_y="NEXT")


def _table(pdf: FPDF, rows: List[CategoryBreakdown], color, symbol: str, empty_text: str) -> None:
    width = pdf.w - MARGIN * 2
    amount_x = pdf.w - 80
    percent_x = pdf.w - 40

    y = pdf.get_y()
    if y > pdf.h - MARGIN - 30:
        pdf.add_page()
        y = MARGIN
    pdf.set_fill_color(*color)
    pdf.rect(MARGIN, y, width, 10, style="F")
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("helvetica", "B", 12)
    pdf.text(MARGIN + 5, y + 7, "Category")
    pdf.text(amount_x, y + 7, "Amount")
    pdf.text(percent_x, y + 7, "Percentage")

    y += 15
    pdf.set_text_color(0)
    if not rows:
        pdf.set_font("helvetica", "I", 12)
        pdf.text(MARGIN + 5, y, empty_text)
        pdf.set_y(y + 15)
        return

    pdf.set_font("helvetica", "", 12)
    for row in rows:
        if y > pdf.h - MARGIN:
            pdf.add_page()
            y = MARGIN
        pdf.text(MARGIN + 5, y, _latin1(row.category))
        pdf.text(amount_x, y, _latin1(f"{symbol}{row.amount:.2f}"))
        pdf.text(percent_x, y, f"{row.percentage:.1f}%")
        y += 10
    pdf.set_y(y + 10)


def generate_pdf(
    analysis: AnalysisResult,
    currency: Currency,
    user_name: str,
    period: date,
    compress: bool = True,
) -> bytes:
    """
    Render the monthly analysis as a PDF: header, summary, income table,
    top expenses, remaining expenses and suggestions.
    """
    symbol = currency_label(currency)

    pdf = FPDF(unit="mm", format="A4")
    pdf.set_compression(compress)
    pdf.set_margins(MARGIN, MARGIN, MARGIN)
    pdf.set_auto_page_break(auto=True, margin=MARGIN)
    pdf.add_page()
    width = pdf.w - MARGIN * 2

    # Header band
    pdf.set_fill_color(52, 152, 219)
    pdf.rect(0, 0, pdf.w, 40, style="F")
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("helvetica", "B", 24)
    pdf.set_xy(0, 15)
    pdf.cell(pdf.w, 10, "Expense Analysis Report", align="C")

    pdf.set_xy(MARGIN, 45)
    pdf.set_text_color(0)
    pdf.set_font("helvetica", "B", 16)
    pdf.cell(0, 10, _latin1(f"Report for: {user_name}"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("helvetica", "", 14)
    pdf.cell(0, 10, f"Period: {format_period(period)}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(10)

    # Financial summary
    y = pdf.get_y()
    pdf.set_fill_color(245, 247, 250)
    pdf.rect(MARGIN, y, width, 50, style="F")
    pdf.set_xy(MARGIN + 5, y + 5)
    pdf.set_font("helvetica", "B", 18)
    pdf.cell(0, 10, "Financial Summary", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("helvetica", "", 14)
    for line in (
        f"Total Income: {symbol}{analysis.total_income:.2f}",
        f"Total Expenses: {symbol}{analysis.total_expense:.2f}",
        f"Net Savings: {symbol}{analysis.savings:.2f}",
    ):
        pdf.set_x(MARGIN + 10)
        pdf.cell(0, 10, _latin1(line), new_x="LMARGIN", new_y="NEXT")
    pdf.set_y(y + 60)

    _section_title(pdf, "Income Breakdown")
    _table(pdf, analysis.income_categories, TABLE_COLORS["income"], symbol,
           "No income recorded for this period")

    _section_title(pdf, f"Top {analysis.top_count} Expenses")
    _table(pdf, analysis.top_expenses, TABLE_COLORS["top"], symbol,
           "No expenses recorded for this period")

    if analysis.other_expenses:
        _section_title(pdf, "Other Expenses")
        _table(pdf, analysis.other_expenses, TABLE_COLORS["other"], symbol, "")

    if pdf.get_y() > pdf.h - 100:
        pdf.add_page()

    _section_title(pdf, "Suggestions for Improvement")
    pdf.ln(5)
    for item in analysis.suggestions:
        pdf.set_font("helvetica", "B", 12)
        pdf.cell(0, 7, _latin1(f"{item.category}:"), new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("helvetica", "", 12)
        pdf.set_x(MARGIN + 10)
        pdf.multi_cell(width - 20, 7, _latin1(item.suggestion), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(5)

    return bytes(pdf.output())


def generate_csv(transactions: Iterable[Transaction]) -> bytes:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=["date", "kind", "category", "description", "amount"])
    writer.writeheader()
    for t in transactions:
        writer.writerow({
            "date": t.date.isoformat(),
            "kind": t.kind.value,
            "category": t.category,
            "description": t.description,
            "amount": f"{t.amount:.2f}",
        })
    return output.getvalue().encode()
