"""Daily Plan Services"""

from .sampling import pick_random
from .catalog import ExerciseCatalog
from .plan_generator import PlanGenerator
from .weight_overrides import WeightOverrideStore
from .session import PlanSession

__all__ = [
    "pick_random",
    "ExerciseCatalog",
    "PlanGenerator",
    "WeightOverrideStore",
    "PlanSession",
]
