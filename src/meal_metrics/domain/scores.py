"""Domain models for the daily health score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreLabel:
    """Display band for a score range."""

    min: int
    max: int
    label: str
    color: str


GREAT = ScoreLabel(min=80, max=100, label="Great day", color="#10B981")
GOOD = ScoreLabel(min=50, max=79, label="Good effort", color="#F59E0B")
IMPROVE = ScoreLabel(min=0, max=49, label="Room to improve", color="#EF4444")

SCORE_LABELS = (GREAT, GOOD, IMPROVE)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points earned per scoring category."""

    calories: int = 0
    protein: int = 0
    consistency: int = 0

    @property
    def total(self) -> int:
        return self.calories + self.protein + self.consistency


@dataclass(frozen=True)
class HealthScoreResult:
    """Daily health score with its breakdown."""

    score: int
    breakdown: ScoreBreakdown
    label: ScoreLabel
    has_data: bool
