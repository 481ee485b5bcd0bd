from typing import Optional

from deformity_planner.config.settings import settings
from deformity_planner.domain.deformity import DeformityAnalyzer
from deformity_planner.services.deformity_service import DeformityPlanningService


def create_deformity_planning_service(language: Optional[str] = None) -> DeformityPlanningService:
    """
    DeformityPlanningService 인스턴스 생성

    Args:
        language: 결과 문구 언어 (없거나 미지원이면 settings.DEFAULT_LANGUAGE)

    Returns:
        DeformityPlanningService 인스턴스
    """
    analyzer = DeformityAnalyzer(language=settings.language_or_default(language))
    return DeformityPlanningService(analyzer=analyzer)
