"""Daily Plan - PT 일일 운동 플랜 엔진

사용 빈도: 매일 (오늘 플랜 생성 시)

주요 기능:
- 카테고리 쿼터 기반 무작위 플랜 생성 (quad 2, ankle 1, hamstring 1, hip 1)
- 운동 부족 카테고리 안내 (notice)
- 세션별 무게 오버라이드
- 세션 무게 → 기본 무게 승격
"""

__version__ = "1.0.0"
