"""카테고리 쿼터 기반 일일 플랜 생성 서비스"""

from typing import Dict, List, Optional, Tuple
import random
import logging

from langsmith import traceable

from daily_plan.models import PlanNotice
from daily_plan.services.catalog import ExerciseCatalog
from daily_plan.services.sampling import pick_random

logger = logging.getLogger(__name__)


class PlanGenerator:
    """일일 플랜 생성

    카탈로그나 무게 오버라이드를 변경하지 않는다. 오버라이드 시드는 세션이 담당.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: 난수 생성기 (None 이면 random 모듈 전역 생성기)
        """
        self._rng = rng

    @traceable(name="daily_plan_generation")
    def generate(
        self,
        catalog: ExerciseCatalog,
        quotas: Dict[str, int],
    ) -> Tuple[List[str], List[PlanNotice]]:
        """
        카테고리별 쿼터만큼 활성 운동을 무작위 선택

        처리 케이스:
        1. 풀 >= 쿼터: 쿼터만큼 비복원 추출
        2. 0 < 풀 < 쿼터: 풀 전체 선택 + partial 안내
        3. 풀 = 0: 선택 없음 + empty 안내
        다른 카테고리에서 부족분을 채우지 않는다.

        Args:
            catalog: 운동 카탈로그
            quotas: 카테고리별 필요 개수 (반복 순서 = 플랜 순서)

        Returns:
            (운동 ID 리스트, 부족 안내 리스트)
        """
        pools = catalog.list_active_by_category()

        chosen: List[str] = []
        notices: List[PlanNotice] = []

        for category, required in quotas.items():
            pool = pools.get(category, [])
            picks = pick_random(pool, required, self._rng)
            chosen.extend(ex.id for ex in picks)

            if len(picks) >= required:
                continue

            notice = PlanNotice(
                kind="empty" if not picks else "partial",
                category=category,
                available=len(picks),
                required=required,
            )
            logger.info(f"운동 부족: {notice.message}")
            notices.append(notice)

        # 카테고리는 서로 겹치지 않지만 결과의 고유성은 계약으로 보장
        plan_ids = list(dict.fromkeys(chosen))

        return plan_ids, notices
