"""Dependency container wiring for the metrics engine."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from meal_metrics.app_logging import configure_logging
from meal_metrics.config import Settings
from meal_metrics.services.cache import InMemoryCache
from meal_metrics.services.metrics import MealSource, MetricsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cache: InMemoryCache
    metrics_service: MetricsService


def build_clock(timezone_name: str) -> Callable[[], datetime]:
    """Return a wall clock in the given timezone."""
    tz = ZoneInfo(timezone_name)

    def clock() -> datetime:
        return datetime.now(tz=tz)

    return clock


def build_container(
    source: MealSource, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container around a meal source."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    cache = InMemoryCache(max_entries=resolved_settings.cache_max_entries)
    metrics_service = MetricsService(
        source=source,
        goals=resolved_settings.daily_goals(),
        clock=build_clock(resolved_settings.timezone),
        cache=cache,
        cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        cache=cache,
        metrics_service=metrics_service,
    )
