"""Domain models for weekly insights and reminders."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Insight:
    """Short observation about a detected eating pattern."""

    title: str
    message: str


@dataclass(frozen=True)
class Reminder:
    """Notification content the scheduling collaborator may deliver."""

    id: str
    title: str
    body: str


DAILY_LOGGING = Reminder(
    id="daily_logging",
    title="NutriSnap",
    body="You haven't logged any meals today. It only takes 30 seconds.",
)
STREAK_PROTECTION = Reminder(
    id="streak_protection",
    title="Keep Your Streak",
    body="One log today keeps your streak alive.",
)
LOW_PROTEIN = Reminder(
    id="low_protein",
    title="Protein Check",
    body="Low protein today. A small boost can help.",
)
WEEKLY_SUMMARY = Reminder(
    id="weekly_summary",
    title="Weekly Report Ready",
    body="Your weekly nutrition report is ready.",
)
