"""App-facing request/response models for Daily Plan endpoints."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict

from shared.models import Exercise, Category
from daily_plan.models.plan import PlanEntry, PlanNotice


class AppExercise(BaseModel):
    """앱 운동 스키마"""

    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(..., alias="exerciseId", min_length=1, description="운동 ID")
    name: str = Field(..., min_length=1, description="운동 이름")
    category: Category = Field(..., description="카테고리 (ankle/hamstring/quad/hip)")
    default_weight: float = Field(..., alias="defaultWeight", ge=0, description="기본 무게 (lb)")
    is_active: bool = Field(default=True, alias="isActive", description="플랜 생성 대상 여부")

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "AppExercise":
        return cls(
            exercise_id=exercise.id,
            name=exercise.name,
            category=exercise.category,
            default_weight=exercise.default_weight,
            is_active=exercise.is_active,
        )

    def to_exercise(self) -> Exercise:
        return Exercise(
            id=self.exercise_id,
            name=self.name,
            category=self.category,
            default_weight=self.default_weight,
            is_active=self.is_active,
        )


class AppPlanNotice(BaseModel):
    """앱 부족 안내 스키마"""

    kind: str = Field(..., description="partial / empty")
    category: Category = Field(..., description="카테고리")
    available: int = Field(..., description="선택 가능한 운동 수")
    required: int = Field(..., description="쿼터")
    message: str = Field(..., description="표시 문구")

    @classmethod
    def from_notice(cls, notice: PlanNotice) -> "AppPlanNotice":
        return cls(
            kind=notice.kind,
            category=notice.category,
            available=notice.available,
            required=notice.required,
            message=notice.message,
        )


class AppPlanExercise(BaseModel):
    """오늘 플랜 운동 행"""

    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(..., alias="exerciseId")
    name: str
    category: Category
    default_weight: float = Field(..., alias="defaultWeight")
    current_weight: float = Field(..., alias="currentWeight")
    exercise_order: int = Field(..., alias="exerciseOrder")

    @classmethod
    def from_entry(cls, entry: PlanEntry) -> "AppPlanExercise":
        return cls(
            exercise_id=entry.exercise_id,
            name=entry.name,
            category=entry.category,
            default_weight=entry.default_weight,
            current_weight=entry.current_weight,
            exercise_order=entry.order,
        )


class AppPlanResponse(BaseModel):
    """오늘 플랜 응답"""

    model_config = ConfigDict(populate_by_name=True)

    day_id: Optional[str] = Field(default=None, alias="dayId", description="세션 날짜 식별자")
    plan_ids: List[str] = Field(default_factory=list, alias="planIds")
    exercises: List[AppPlanExercise] = Field(default_factory=list)
    notices: List[AppPlanNotice] = Field(default_factory=list)
    notice: Optional[str] = Field(default=None, description="안내 문구 한 줄")
    notes: str = Field(default="", description="세션 메모")


class AppWeightRequest(BaseModel):
    """세션 무게 변경 요청 (범위 검증 없음)"""

    weight: float = Field(..., description="무게 (lb)")


class AppWeightResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    exercise_id: str = Field(..., alias="exerciseId")
    weight: float


class AppDayRequest(BaseModel):
    """새 세션 시작 요청"""

    model_config = ConfigDict(populate_by_name=True)

    day_id: Optional[str] = Field(default=None, alias="dayId", description="날짜 식별자 (형식 무관)")


class AppNotesRequest(BaseModel):
    notes: str = Field(default="", description="세션 메모")


class AppActiveCatalogResponse(BaseModel):
    """카테고리별 활성 운동"""

    categories: Dict[str, List[AppExercise]] = Field(default_factory=dict)
