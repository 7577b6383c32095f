"""Domain models for period nutrition reports."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from meal_metrics.domain.meals import DailyTotals


class SuggestionKind(Enum):
    """Tone of a nutrition suggestion."""

    SUCCESS = "success"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class Suggestion:
    """Actionable advice derived from period averages."""

    title: str
    message: str
    kind: SuggestionKind


@dataclass(frozen=True)
class PeriodReport:
    """Per-day series, suggestions and one-line insights for a date range.

    ``days`` covers every calendar day from ``start`` to ``end``; days without
    meals carry zero totals.
    """

    start: date
    end: date
    days: tuple[DailyTotals, ...]
    suggestions: tuple[Suggestion, ...]
    calorie_insight: str | None
    protein_insight: str | None
    meal_distribution_insight: str | None
