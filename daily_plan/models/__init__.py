"""Daily Plan Models"""

from .plan import PlanNotice, PlanEntry, join_notice_messages

__all__ = [
    "PlanNotice",
    "PlanEntry",
    "join_notice_messages",
]
