"""운동 카탈로그 항목 모델 (공유)"""

from typing import List, Literal, get_args
from pydantic import BaseModel, Field, field_validator

Category = Literal["ankle", "hamstring", "quad", "hip"]

# 카테고리는 닫힌 집합
CATEGORIES: List[str] = list(get_args(Category))


class Exercise(BaseModel):
    """카탈로그 운동 항목

    - is_active=False 인 운동은 플랜 생성에서 제외되지만 카탈로그에는 남음
    - default_weight=0 은 맨몸 운동
    """

    id: str = Field(..., min_length=1, description="운동 ID (카탈로그 내 고유)")
    name: str = Field(..., min_length=1, description="표시 이름")
    category: Category = Field(..., description="부위 카테고리 (ankle/hamstring/quad/hip)")
    default_weight: float = Field(..., ge=0, description="기본 무게 (lb, 0 = 맨몸)")
    is_active: bool = Field(default=True, description="플랜 생성 대상 여부")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("운동 이름이 비어 있습니다")
        return v
