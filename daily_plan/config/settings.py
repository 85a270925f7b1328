"""Daily Plan 설정

환경 변수:
- PLAN_QUOTAS: 카테고리별 쿼터 JSON (기본값: {"quad": 2, "ankle": 1, "hamstring": 1, "hip": 1})
- RANDOM_SEED: 무작위 선택 시드 (기본값: 없음, 매 호출 독립 샘플)
- CATALOG_PATH: 시드 카탈로그 JSON 경로
- LOG_LEVEL: 로그 레벨 (기본값: INFO)
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from shared.models import CATEGORIES


def _default_quotas() -> Dict[str, int]:
    # 순서 = 플랜 생성 순서
    return {"quad": 2, "ankle": 1, "hamstring": 1, "hip": 1}


class DailyPlanSettings(BaseSettings):
    """일일 플랜 설정"""

    # 플랜 생성 설정
    plan_quotas: Dict[str, int] = Field(
        default_factory=_default_quotas,
        description="카테고리별 필요 운동 수 (반복 순서 = 플랜 순서)",
    )
    random_seed: Optional[int] = Field(
        default=None, description="무작위 선택 시드 (재현용)"
    )

    # 데이터 경로
    catalog_path: Path = Field(
        default=Path(__file__).parent.parent / "data" / "catalog.json",
        description="시드 카탈로그 파일",
    )

    # 로깅
    log_level: str = Field(default="INFO", description="로그 레벨")

    # 서버 설정
    host: str = Field(default="0.0.0.0", description="호스트")
    port: int = Field(default=8000, description="포트")

    @field_validator("plan_quotas")
    @classmethod
    def validate_quotas(cls, v: Dict[str, int]) -> Dict[str, int]:
        for category, count in v.items():
            if category not in CATEGORIES:
                raise ValueError(f"지원하지 않는 카테고리: {category}. 가능한 값: {CATEGORIES}")
            if count < 0:
                raise ValueError(f"쿼터는 0 이상이어야 합니다: {category}={count}")
        return v

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = DailyPlanSettings()
