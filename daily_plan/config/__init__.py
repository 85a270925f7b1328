"""Daily Plan 설정"""

from .settings import settings, DailyPlanSettings

__all__ = ["settings", "DailyPlanSettings"]
