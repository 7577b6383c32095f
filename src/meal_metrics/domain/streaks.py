"""Domain models for logging streaks and badges."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class StreakStatus(Enum):
    """State of the user's logging streak relative to today."""

    NO_DATA = "no_data"
    ACTIVE = "active"
    PAUSED = "paused"
    BROKEN = "broken"


@dataclass(frozen=True)
class Badge:
    """Achievement unlocked by reaching a streak threshold."""

    id: str
    name: str
    emoji: str
    description: str
    requirement: int


STREAK_3 = Badge(
    id="streak_3",
    name="3-Day Streak",
    emoji="\N{FIRE}",
    description="Keep the fire burning!",
    requirement=3,
)
STREAK_7 = Badge(
    id="streak_7",
    name="Perfect Week",
    emoji="\N{WHITE MEDIUM STAR}",
    description="A full week of consistency!",
    requirement=7,
)
STREAK_14 = Badge(
    id="streak_14",
    name="Two Week Champion",
    emoji="\N{TROPHY}",
    description="Two weeks strong!",
    requirement=14,
)
STREAK_30 = Badge(
    id="streak_30",
    name="Monthly Master",
    emoji="\N{CROWN}",
    description="A full month of dedication!",
    requirement=30,
)
BOUNCE_BACK = Badge(
    id="bounce_back",
    name="Bounce Back",
    emoji="\N{SEEDLING}",
    description="Started fresh after a break!",
    requirement=1,
)

# Threshold badges, ascending by requirement.
STREAK_BADGES = (STREAK_3, STREAK_7, STREAK_14, STREAK_30)


@dataclass(frozen=True)
class StreakResult:
    """Current and best logging streak with earned badges."""

    current_streak: int
    best_streak: int
    badges: tuple[Badge, ...]
    streak_status: StreakStatus
    last_logged_date: date | None
    days_with_pause: int = 0
