"""운동 카탈로그 저장소"""

from typing import Dict, Iterable, List, Optional
import json
from pathlib import Path
import logging

from shared.models import Exercise, CATEGORIES
from daily_plan.errors import ExerciseNotFoundError, DuplicateExerciseError

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """운동 카탈로그

    기본 무게의 단일 원본. 변경은 add_exercise 와 set_default_weight 로만 한다.
    """

    def __init__(self, exercises: Optional[Iterable[Exercise]] = None):
        self._exercises: Dict[str, Exercise] = {}
        for ex in exercises or []:
            self.add_exercise(ex)

    @classmethod
    def from_json(cls, path: Path) -> "ExerciseCatalog":
        """시드 카탈로그 JSON 로드

        형식: {"exercises": {"q1": {"name": ..., "category": ..., ...}}}
        "_" 로 시작하는 키(_metadata 등)는 건너뛴다.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"카탈로그 파일을 찾을 수 없습니다: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw_data = json.load(f)

        exercises_data = raw_data.get("exercises", raw_data)

        exercises = []
        for ex_id, ex_data in exercises_data.items():
            if ex_id.startswith("_"):
                continue
            exercises.append(Exercise(id=ex_id, **ex_data))

        logger.info(f"카탈로그 로드: {len(exercises)}개 운동 ({path.name})")
        return cls(exercises)

    def __contains__(self, exercise_id: str) -> bool:
        return exercise_id in self._exercises

    def __len__(self) -> int:
        return len(self._exercises)

    def get(self, exercise_id: str) -> Exercise:
        """운동 조회 (없으면 ExerciseNotFoundError)"""
        try:
            return self._exercises[exercise_id]
        except KeyError:
            raise ExerciseNotFoundError(exercise_id) from None

    def add_exercise(self, exercise: Exercise) -> Exercise:
        """카탈로그 끝에 운동 추가"""
        if exercise.id in self._exercises:
            raise DuplicateExerciseError(exercise.id)
        self._exercises[exercise.id] = exercise
        return exercise

    def set_default_weight(self, exercise_id: str, weight: float) -> Exercise:
        """기본 무게 변경 (기본값 승격 전용)"""
        current = self.get(exercise_id)
        updated = current.model_copy(update={"default_weight": weight})
        self._exercises[exercise_id] = updated
        return updated

    def list_exercises(self) -> List[Exercise]:
        """전체 운동 (비활성 포함, 추가 순서)"""
        return list(self._exercises.values())

    def list_active_by_category(self) -> Dict[str, List[Exercise]]:
        """활성 운동을 카테고리별로 그룹화

        모든 카테고리 키가 항상 존재한다 (빈 리스트 가능).
        """
        groups: Dict[str, List[Exercise]] = {cat: [] for cat in CATEGORIES}
        for ex in self._exercises.values():
            if ex.is_active:
                groups[ex.category].append(ex)
        return groups
