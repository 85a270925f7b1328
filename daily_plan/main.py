"""Daily Plan FastAPI 서버

오늘 운동 플랜 생성 + 세션 무게 관리 API
포트: 8000 (기본)

사용법:
    python -m daily_plan.main
"""

import os
from typing import List
from dotenv import load_dotenv
load_dotenv(override=True)

# LangSmith 프로젝트 분리
os.environ.setdefault("LANGSMITH_PROJECT", "pt-daily-plan")

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from shared.utils import get_logger
from daily_plan.config import settings
from daily_plan.errors import ExerciseNotFoundError, DuplicateExerciseError, InvalidWeightError
from daily_plan.models.api import (
    AppExercise,
    AppPlanExercise,
    AppPlanNotice,
    AppPlanResponse,
    AppWeightRequest,
    AppWeightResponse,
    AppDayRequest,
    AppNotesRequest,
    AppActiveCatalogResponse,
)
from daily_plan.services import PlanSession

logger = get_logger("daily_plan", settings.log_level)

app = FastAPI(
    title="PT Daily Plan",
    description="일일 운동 플랜 생성 + 세션 무게 API",
    version="1.0.0",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 세션 인스턴스 (단일 사용자, 메모리 전용)
session = PlanSession.from_settings()


def get_session() -> PlanSession:
    return session


def _error_payload(error: Exception, hint: str = None) -> dict:
    """오류 응답용 페이로드"""
    return {
        "error": str(error),
        "type": type(error).__name__,
        "hint": hint,
    }


def _plan_response(plan_session: PlanSession) -> AppPlanResponse:
    return AppPlanResponse(
        day_id=plan_session.day_id,
        plan_ids=plan_session.plan_ids,
        exercises=[AppPlanExercise.from_entry(e) for e in plan_session.plan_entries()],
        notices=[AppPlanNotice.from_notice(n) for n in plan_session.notices],
        notice=plan_session.notice_message,
        notes=plan_session.notes,
    )


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {"status": "healthy", "service": "daily-plan"}


# ===== 카탈로그 =====

@app.get("/api/v1/exercises", response_model=List[AppExercise])
async def list_exercises(plan_session: PlanSession = Depends(get_session)):
    """전체 운동 목록 (비활성 포함)"""
    return [AppExercise.from_exercise(ex) for ex in plan_session.list_exercises()]


@app.get("/api/v1/exercises/active", response_model=AppActiveCatalogResponse)
async def list_active_exercises(plan_session: PlanSession = Depends(get_session)):
    """카테고리별 활성 운동"""
    groups = plan_session.list_active_by_category()
    return AppActiveCatalogResponse(
        categories={
            category: [AppExercise.from_exercise(ex) for ex in exercises]
            for category, exercises in groups.items()
        }
    )


@app.post("/api/v1/exercises", response_model=AppExercise, status_code=201)
async def add_exercise(
    request: AppExercise,
    plan_session: PlanSession = Depends(get_session),
):
    """운동 추가

    입력 검증(이름, 무게 >= 0)은 요청 모델에서 처리
    """
    try:
        added = plan_session.add_exercise(request.to_exercise())
        return AppExercise.from_exercise(added)
    except DuplicateExerciseError as e:
        raise HTTPException(
            status_code=409,
            detail=_error_payload(e, hint="새 운동 ID를 사용하세요."),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=_error_payload(e))


@app.post("/api/v1/exercises/{exercise_id}/promote", response_model=AppExercise)
async def promote_to_default(
    exercise_id: str,
    plan_session: PlanSession = Depends(get_session),
):
    """현재 세션 무게를 기본 무게로 승격"""
    try:
        updated = plan_session.promote_to_default(exercise_id)
        return AppExercise.from_exercise(updated)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=_error_payload(e))
    except InvalidWeightError as e:
        raise HTTPException(
            status_code=400,
            detail=_error_payload(e, hint="세션 무게를 0 이상으로 수정한 뒤 다시 시도하세요."),
        )


# ===== 무게 =====

@app.get("/api/v1/weights/{exercise_id}", response_model=AppWeightResponse)
async def get_weight(
    exercise_id: str,
    plan_session: PlanSession = Depends(get_session),
):
    """현재 세션 무게"""
    try:
        weight = plan_session.current_weight(exercise_id)
        return AppWeightResponse(exercise_id=exercise_id, weight=weight)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=_error_payload(e))


@app.put("/api/v1/weights/{exercise_id}", response_model=AppWeightResponse)
async def set_weight(
    exercise_id: str,
    request: AppWeightRequest,
    plan_session: PlanSession = Depends(get_session),
):
    """세션 무게 변경"""
    plan_session.set_weight(exercise_id, request.weight)
    return AppWeightResponse(exercise_id=exercise_id, weight=request.weight)


# ===== 플랜 / 세션 =====

@app.post("/api/v1/plan/generate", response_model=AppPlanResponse)
async def generate_plan(plan_session: PlanSession = Depends(get_session)):
    """
    오늘 플랜 생성

    쿼터: quad 2, ankle 1, hamstring 1, hip 1 (활성 운동만)
    부족한 카테고리는 notices 로 안내 (오류 아님)
    """
    try:
        plan_session.generate_plan()
        return _plan_response(plan_session)
    except Exception as e:
        logger.exception("플랜 생성 실패")
        raise HTTPException(status_code=500, detail=_error_payload(e))


@app.get("/api/v1/plan", response_model=AppPlanResponse)
async def get_plan(plan_session: PlanSession = Depends(get_session)):
    """마지막으로 생성한 플랜"""
    return _plan_response(plan_session)


@app.post("/api/v1/session/day", response_model=AppPlanResponse)
async def start_day(
    request: AppDayRequest,
    plan_session: PlanSession = Depends(get_session),
):
    """새 날짜 세션 시작 (무게 오버라이드, 플랜, 메모 초기화)"""
    plan_session.start_day(request.day_id)
    return _plan_response(plan_session)


@app.put("/api/v1/session/notes", response_model=AppPlanResponse)
async def set_notes(
    request: AppNotesRequest,
    plan_session: PlanSession = Depends(get_session),
):
    """세션 메모 저장"""
    plan_session.set_notes(request.notes)
    return _plan_response(plan_session)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Daily Plan 시작: http://{settings.host}:{settings.port}")
    uvicorn.run(
        "daily_plan.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
