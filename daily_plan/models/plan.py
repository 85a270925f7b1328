"""플랜 생성 결과 모델"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from shared.models import Category


class PlanNotice(BaseModel):
    """운동 부족 안내

    - partial: 풀이 쿼터보다 작음 (일부만 선택)
    - empty: 풀이 비어 있음
    """

    kind: Literal["partial", "empty"] = Field(..., description="부족 유형")
    category: Category = Field(..., description="부족한 카테고리")
    available: int = Field(..., ge=0, description="선택 가능한 운동 수")
    required: int = Field(..., ge=1, description="쿼터")

    @property
    def message(self) -> str:
        """사용자 표시용 문구"""
        if self.kind == "empty":
            return f"no {self.category} exercise available."
        return f"only {self.available}/{self.required} {self.category} exercises available."


class PlanEntry(BaseModel):
    """오늘 플랜의 운동 한 줄 (표시용)"""

    exercise_id: str = Field(..., description="운동 ID")
    name: str = Field(..., description="운동 이름")
    category: Category = Field(..., description="카테고리")
    default_weight: float = Field(..., description="카탈로그 기본 무게")
    current_weight: float = Field(..., description="현재 세션 무게 (오버라이드 또는 기본값)")
    order: int = Field(..., ge=1, description="플랜 내 순서")


def join_notice_messages(notices: List[PlanNotice]) -> Optional[str]:
    """안내 문구를 한 줄로 합침 (없으면 None)"""
    if not notices:
        return None
    return " ".join(n.message for n in notices)
