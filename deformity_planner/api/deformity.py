from fastapi import APIRouter, Depends, HTTPException
from typing import Literal, Optional
import logging

from deformity_planner.common.dependencies import verify_api_key, resolve_language
from deformity_planner.domain.deformity import DeformityInputError
from deformity_planner.domain.deformity import messages
from deformity_planner.schemas.analyze_request import AnalyzeDeformityApiRequest
from deformity_planner.schemas.analyze_response import (
    AnalyzeDeformityApiResponse,
    DeformityFormState,
)
from deformity_planner.services.service_factory import create_deformity_planning_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/deformity", tags=["Deformity Analysis"])


def _input_error(e: DeformityInputError, language: str) -> HTTPException:
    """검증 실패 → 422 (어떤 제약을 위반했는지 code/fields 포함)"""
    logger.warning(f"❌ 입력 검증 실패: {e.code} {e.fields}")
    return HTTPException(
        status_code=422,
        detail={
            "code": e.code,
            "message": messages.error_message(e.code, language),
            "fields": list(e.fields),
            "reason": e.message,
        },
    )


# ========== API Endpoint ==========
@router.post("/analyze", response_model=AnalyzeDeformityApiResponse)
async def analyze_deformity(
        req: AnalyzeDeformityApiRequest,
        _: bool = Depends(verify_api_key),
) -> AnalyzeDeformityApiResponse:
    """
    MPTA / LDFA / JLCA → 수술 전략 결정

    - 빈 값/숫자 아님 → 422 invalid_input
    - JLCA < 0 → 422 negative_jlca
    - GD <= 0 → 결정은 반환, warnings 에 경고 포함
    """
    service = create_deformity_planning_service(language=req.language)
    logger.info(f"📥 분석 요청: mpta={req.mpta!r}, ldfa={req.ldfa!r}, jlca={req.jlca!r}, lang={service.language}")

    try:
        return await service.analyze(req)
    except DeformityInputError as e:
        raise _input_error(e, service.language)


@router.get("/demo", response_model=AnalyzeDeformityApiResponse)
async def analyze_demo(
        language: str = Depends(resolve_language),
        _: bool = Depends(verify_api_key),
) -> AnalyzeDeformityApiResponse:
    """데모 프리셋 (MPTA 84.0, LDFA 90.0, JLCA 4.0) 분석 결과"""
    service = create_deformity_planning_service(language=language)
    return await service.demo()


@router.get("/form", response_model=DeformityFormState)
def form_state(
        preset: Optional[Literal["demo"]] = None,
        language: str = Depends(resolve_language),
        _: bool = Depends(verify_api_key),
) -> DeformityFormState:
    """폼 초기 상태 (preset=demo 면 데모 값 채움, 아니면 초기화 상태)"""
    service = create_deformity_planning_service(language=language)
    if preset == "demo":
        return service.demo_form()
    return service.reset_form()


ROUTERS = [router]
