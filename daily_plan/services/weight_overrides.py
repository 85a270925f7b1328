"""세션 무게 오버라이드 저장소"""

from typing import Dict, Iterable, List
import logging

from daily_plan.errors import ExerciseNotFoundError
from daily_plan.services.catalog import ExerciseCatalog

logger = logging.getLogger(__name__)


class WeightOverrideStore:
    """운동 ID → 현재 세션 무게

    값 범위 검증은 하지 않는다 (음수 포함, 입력 위젯이 담당).
    """

    def __init__(self):
        self._weights: Dict[str, float] = {}

    def __contains__(self, exercise_id: str) -> bool:
        return exercise_id in self._weights

    def set_weight(self, exercise_id: str, value: float) -> None:
        """오버라이드 무조건 덮어쓰기"""
        self._weights[exercise_id] = value

    def get_weight(self, exercise_id: str, catalog: ExerciseCatalog) -> float:
        """오버라이드가 있으면 그 값, 없으면 카탈로그 기본 무게"""
        if exercise_id in self._weights:
            return self._weights[exercise_id]
        return catalog.get(exercise_id).default_weight

    def seed(self, exercise_ids: Iterable[str], catalog: ExerciseCatalog) -> List[str]:
        """
        오버라이드가 없는 운동만 현재 기본 무게로 채움

        기존 값은 덮어쓰지 않는다 (플랜을 다시 생성해도 입력 중인 무게 유지).

        Returns:
            새로 시드된 운동 ID 리스트
        """
        seeded = []
        for exercise_id in exercise_ids:
            if exercise_id in self._weights:
                continue
            if exercise_id not in catalog:
                raise ExerciseNotFoundError(exercise_id)
            self._weights[exercise_id] = catalog.get(exercise_id).default_weight
            seeded.append(exercise_id)

        if seeded:
            logger.debug(f"무게 시드: {seeded}")
        return seeded

    def clear(self) -> None:
        """전체 오버라이드 삭제 (새 날짜/세션)"""
        self._weights.clear()

    def as_dict(self) -> Dict[str, float]:
        return dict(self._weights)
