"""오늘 세션 서비스

카탈로그, 무게 오버라이드, 마지막 생성 플랜/안내를 한 객체가 소유한다.
"""

from typing import Dict, List, Optional, Tuple
from pathlib import Path
import random
import threading
import logging

from langsmith import traceable

from shared.models import Exercise
from daily_plan.config import settings
from daily_plan.errors import InvalidWeightError
from daily_plan.models import PlanNotice, PlanEntry, join_notice_messages
from daily_plan.services.catalog import ExerciseCatalog
from daily_plan.services.plan_generator import PlanGenerator
from daily_plan.services.weight_overrides import WeightOverrideStore

logger = logging.getLogger(__name__)


class PlanSession:
    """하루 단위 PT 세션

    모든 연산은 하나의 락 안에서 실행된다. 기본값 승격은
    오버라이드 읽기 → 카탈로그 쓰기를 한 번에 처리해야 하기 때문.
    """

    def __init__(
        self,
        catalog: Optional[ExerciseCatalog] = None,
        quotas: Optional[Dict[str, int]] = None,
        rng: Optional[random.Random] = None,
        day_id: Optional[str] = None,
    ):
        """
        Args:
            catalog: 운동 카탈로그 (기본값: 빈 카탈로그)
            quotas: 카테고리 쿼터 (기본값: settings.plan_quotas)
            rng: 난수 생성기
            day_id: 세션 날짜 식별자 (형식 무관)
        """
        self.catalog = catalog if catalog is not None else ExerciseCatalog()
        self.quotas = dict(quotas if quotas is not None else settings.plan_quotas)
        self.overrides = WeightOverrideStore()
        self._generator = PlanGenerator(rng)
        self._lock = threading.RLock()

        self.day_id = day_id
        self.notes = ""
        self._plan_ids: List[str] = []
        self._notices: List[PlanNotice] = []

    @classmethod
    def from_settings(cls, catalog_path: Optional[Path] = None) -> "PlanSession":
        """설정 기반 세션 생성 (시드 카탈로그 + 쿼터 + 시드)"""
        catalog = ExerciseCatalog.from_json(catalog_path or settings.catalog_path)
        rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
        return cls(catalog=catalog, quotas=settings.plan_quotas, rng=rng)

    # ===== 플랜 =====

    @property
    def plan_ids(self) -> List[str]:
        return list(self._plan_ids)

    @property
    def notices(self) -> List[PlanNotice]:
        return list(self._notices)

    @property
    def notice_message(self) -> Optional[str]:
        """안내 문구 한 줄 (부족 없으면 None)"""
        return join_notice_messages(self._notices)

    def generate_plan(self) -> Tuple[List[str], List[PlanNotice]]:
        """
        오늘 플랜 생성 + 새로 등장한 운동의 무게 시드

        Returns:
            (운동 ID 리스트, 부족 안내 리스트)
        """
        with self._lock:
            plan_ids, notices = self._generator.generate(self.catalog, self.quotas)
            self.overrides.seed(plan_ids, self.catalog)

            self._plan_ids = plan_ids
            self._notices = notices

            logger.info(
                f"플랜 생성: {len(plan_ids)}개 운동, 안내 {len(notices)}건 (day={self.day_id})"
            )
            return list(plan_ids), list(notices)

    def plan_entries(self) -> List[PlanEntry]:
        """플랜 ID 를 표시용 행으로 변환 (카탈로그에서 사라진 ID 는 제외)"""
        with self._lock:
            entries = []
            for exercise_id in self._plan_ids:
                if exercise_id not in self.catalog:
                    continue
                ex = self.catalog.get(exercise_id)
                entries.append(
                    PlanEntry(
                        exercise_id=ex.id,
                        name=ex.name,
                        category=ex.category,
                        default_weight=ex.default_weight,
                        current_weight=self.overrides.get_weight(ex.id, self.catalog),
                        order=len(entries) + 1,
                    )
                )
            return entries

    # ===== 무게 =====

    def current_weight(self, exercise_id: str) -> float:
        """현재 세션 무게 (오버라이드 또는 기본값)"""
        with self._lock:
            return self.overrides.get_weight(exercise_id, self.catalog)

    def set_weight(self, exercise_id: str, value: float) -> None:
        """세션 무게 변경"""
        with self._lock:
            if exercise_id not in self.catalog:
                logger.warning(f"카탈로그에 없는 운동의 무게 설정: {exercise_id}={value}")
            self.overrides.set_weight(exercise_id, value)

    @traceable(name="weight_default_promotion")
    def promote_to_default(self, exercise_id: str) -> Exercise:
        """
        현재 세션 무게를 카탈로그 기본 무게로 승격

        같은 값으로 반복 호출해도 결과는 같다.

        Returns:
            갱신된 운동
        """
        with self._lock:
            current = self.catalog.get(exercise_id)
            weight = self.overrides.get_weight(exercise_id, self.catalog)

            if weight < 0:
                raise InvalidWeightError(exercise_id, weight)

            if weight == current.default_weight:
                return current

            updated = self.catalog.set_default_weight(exercise_id, weight)
            logger.info(
                f"기본 무게 승격: {exercise_id} {current.default_weight} → {weight}"
            )
            return updated

    # ===== 카탈로그 =====

    def add_exercise(self, exercise: Exercise) -> Exercise:
        """카탈로그에 운동 추가"""
        with self._lock:
            added = self.catalog.add_exercise(exercise)
            logger.info(f"운동 추가: {added.id} ({added.category}, {added.default_weight})")
            return added

    def list_exercises(self) -> List[Exercise]:
        with self._lock:
            return self.catalog.list_exercises()

    def list_active_by_category(self) -> Dict[str, List[Exercise]]:
        with self._lock:
            return self.catalog.list_active_by_category()

    # ===== 세션 수명 =====

    def start_day(self, day_id: Optional[str]) -> None:
        """새 날짜로 세션 시작 (오버라이드, 플랜, 안내, 메모 초기화)"""
        with self._lock:
            self.overrides.clear()
            self._plan_ids = []
            self._notices = []
            self.notes = ""
            self.day_id = day_id
            logger.info(f"새 세션 시작: day={day_id}")

    def set_notes(self, notes: str) -> None:
        with self._lock:
            self.notes = notes
