from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass, asdict, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from expense_manager.core.reference import FALLBACK_SUGGESTION, SUGGESTIONS
from expense_manager.models.transaction import Transaction, TransactionKind


def start_of_month(target: date) -> date:
    return date(target.year, target.month, 1)


def end_of_month(target: date) -> date:
    last_day = calendar.monthrange(target.year, target.month)[1]
    return date(target.year, target.month, last_day)


def parse_month(value: str) -> date:
    """
    Parse a 'YYYY-MM' month key (e.g. '2025-01') into the first day of that month.
    """
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM") from None


def month_key(target: date) -> str:
    return target.strftime("%Y-%m")


def format_period(target: date) -> str:
    return target.strftime("%B %Y")


@dataclass
class CategoryBreakdown:
    """Summed amount of one category and its share of the group total."""

    category: str
    amount: float
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpenseSuggestion:
    category: str
    suggestion: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AnalysisResult:
    """Monthly aggregate figures; recomputed on demand and never stored."""

    total_income: float = 0.0
    total_expense: float = 0.0
    savings: float = 0.0
    expense_categories: List[CategoryBreakdown] = field(default_factory=list)
    income_categories: List[CategoryBreakdown] = field(default_factory=list)
    suggestions: List[ExpenseSuggestion] = field(default_factory=list)
    top_count: int = 3

    @property
    def top_expenses(self) -> List[CategoryBreakdown]:
        return self.expense_categories[: self.top_count]

    @property
    def other_expenses(self) -> List[CategoryBreakdown]:
        return self.expense_categories[self.top_count:]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "savings": self.savings,
            "income_categories": [c.to_dict() for c in self.income_categories],
            "expense_categories": [c.to_dict() for c in self.expense_categories],
            "top_expenses": [c.to_dict() for c in self.top_expenses],
            "other_expenses": [c.to_dict() for c in self.other_expenses],
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


class FinanceAnalyzer:
    """
    Monthly analysis over a sequence of transactions: totals, savings, ranked
    category breakdowns and suggestions for the largest expense categories.
    """

    def __init__(
        self,
        top_count: int = 3,
        suggestions: Optional[Mapping[str, str]] = None,
        fallback_suggestion: str = FALLBACK_SUGGESTION,
    ) -> None:
        self._top_count = top_count
        self._suggestions = dict(SUGGESTIONS if suggestions is None else suggestions)
        self._fallback = fallback_suggestion

    @staticmethod
    def filter_by_month(transactions: Iterable[Transaction], target: date) -> List[Transaction]:
        start, end = start_of_month(target), end_of_month(target)
        return [t for t in transactions if start <= t.date.date() <= end]

    @staticmethod
    def group_total(transactions: Iterable[Transaction]) -> float:
        return sum((t.amount for t in transactions), 0.0)

    @staticmethod
    def category_totals(transactions: Iterable[Transaction]) -> Dict[str, float]:
        # dicts keep insertion order, so categories stay in first-seen order
        totals: Dict[str, float] = defaultdict(float)
        for t in transactions:
            totals[t.category] += t.amount
        return dict(totals)

    @staticmethod
    def rank_categories(totals: Dict[str, float], group_total: float) -> List[CategoryBreakdown]:
        """
        Rank categories by amount, largest first. Ties keep first-seen order
        because sorted() is stable. Percentages are zero for a zero total.
        """
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [
            CategoryBreakdown(
                category=category,
                amount=amount,
                percentage=amount / group_total * 100 if group_total > 0 else 0.0,
            )
            for category, amount in ranked
        ]

    def suggestion_for(self, category: str) -> str:
        return self._suggestions.get(category, self._fallback)

    def summarize(self, transactions: Iterable[Transaction], target: date) -> AnalysisResult:
        monthly = self.filter_by_month(transactions, target)
        if not monthly:
            return AnalysisResult(top_count=self._top_count)

        incomes = [t for t in monthly if t.kind == TransactionKind.INCOME]
        expenses = [t for t in monthly if t.kind == TransactionKind.EXPENSE]

        total_income = self.group_total(incomes)
        total_expense = self.group_total(expenses)

        result = AnalysisResult(
            total_income=total_income,
            total_expense=total_expense,
            savings=total_income - total_expense,
            expense_categories=self.rank_categories(self.category_totals(expenses), total_expense),
            income_categories=self.rank_categories(self.category_totals(incomes), total_income),
            top_count=self._top_count,
        )
        result.suggestions = [
            ExpenseSuggestion(category=c.category, suggestion=self.suggestion_for(c.category))
            for c in result.top_expenses
        ]
        return result


def analyze_month(transactions: Iterable[Transaction], target: date) -> AnalysisResult:
    return FinanceAnalyzer().summarize(transactions, target)
