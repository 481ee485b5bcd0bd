"""
변형 분석 Service Layer
입력 파싱 → Domain 분석 → 표시 포맷을 조합
"""
import logging
import time
import uuid
from datetime import datetime

from deformity_planner.domain.deformity import DeformityAnalyzer, DEMO_PRESET
from deformity_planner.report.formatter import build_display, empty_display
from deformity_planner.schemas.analyze_request import AnalyzeDeformityApiRequest
from deformity_planner.schemas.analyze_response import (
    AnalyzeDeformityApiResponse,
    DeformityFormState,
)
from deformity_planner.utils.angle_parser import parse_angles

logger = logging.getLogger(__name__)


class DeformityPlanningService:
    """
    변형 분석 메인 서비스

    책임:
    - 폼 입력(문자열/숫자) 파싱
    - DeformityAnalyzer 호출
    - 결과 + 화면 표시 값 조립
    """

    def __init__(self, analyzer: DeformityAnalyzer):
        """
        Args:
            analyzer: 언어가 설정된 변형 분석기
        """
        self.analyzer = analyzer

    @property
    def language(self) -> str:
        return self.analyzer.language

    async def analyze(self, request: AnalyzeDeformityApiRequest) -> AnalyzeDeformityApiResponse:
        """
        Process:
        1. 입력 파싱 (빈 값/숫자 아님 → InvalidInput)
        2. 분석 (검증 실패 시 예외 그대로 전파)
        3. 표시 값 포맷

        Returns:
            AnalyzeDeformityApiResponse
        """
        started = time.perf_counter()
        analysis_id = self._generate_analysis_id()

        # ========== Step 1: 입력 파싱 ==========
        mpta, ldfa, jlca = parse_angles(request.mpta, request.ldfa, request.jlca)

        # ========== Step 2: 분석 ==========
        analysis = self.analyzer.analyze(mpta, ldfa, jlca)

        # ========== Step 3: 응답 DTO ==========
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(f"📊 {analysis_id}: {analysis.decision.value} ({elapsed_ms}ms)")

        return AnalyzeDeformityApiResponse(
            analysis_id=analysis_id,
            inputs={"mpta": mpta, "ldfa": ldfa, "jlca": jlca},
            language=self.language,
            analysis=analysis,
            display=build_display(analysis, self.language),
            processing_time_ms=elapsed_ms,
        )

    async def demo(self) -> AnalyzeDeformityApiResponse:
        """데모 프리셋 (84.0 / 90.0 / 4.0) 분석"""
        request = AnalyzeDeformityApiRequest(**DEMO_PRESET, language=self.language)
        return await self.analyze(request)

    def demo_form(self) -> DeformityFormState:
        """데모 프리셋을 폼 문자열로"""
        preset = {k: f"{v:.1f}" for k, v in DEMO_PRESET.items()}
        return DeformityFormState(**preset, display=empty_display(self.language))

    def reset_form(self) -> DeformityFormState:
        """초기화: 입력 비움 + 표시 값 "—" """
        return DeformityFormState(display=empty_display(self.language))

    def _generate_analysis_id(self) -> str:
        """분석 ID 생성 (UUID + timestamp)"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        unique_id = str(uuid.uuid4())[:8]
        return f"analysis_{timestamp}_{unique_id}"
