"""비복원 무작위 추출"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def pick_random(
    items: Sequence[T],
    n: int,
    rng: Optional[random.Random] = None,
) -> List[T]:
    """
    items 에서 서로 다른 n 개를 균등 확률로 추출 (부분 Fisher-Yates)

    n 이 풀 크기보다 크면 풀 전체를 섞어서 반환한다. 입력 시퀀스는 변경하지 않는다.

    Args:
        items: 후보 풀
        n: 추출할 개수
        rng: 난수 생성기 (기본값: random 모듈 전역 생성기)

    Returns:
        추출된 항목 리스트 (추출 순서)
    """
    rng = rng or random
    pool = list(items)
    count = min(max(n, 0), len(pool))

    for i in range(count):
        j = rng.randrange(i, len(pool))
        pool[i], pool[j] = pool[j], pool[i]

    return pool[:count]
