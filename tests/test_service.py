"""
Service Layer Tests

DeformityPlanningService 비즈니스 로직 테스트
"""
import pytest
from unittest.mock import Mock

from deformity_planner.domain.deformity import DeformityAnalyzer, InvalidInput, NegativeJLCA
from deformity_planner.schemas.analyze_request import AnalyzeDeformityApiRequest
from deformity_planner.schemas.deformity_dto import Decision
from deformity_planner.services.deformity_service import DeformityPlanningService
from deformity_planner.services.service_factory import create_deformity_planning_service


class TestDeformityPlanningService:
    """DeformityPlanningService 테스트"""

    @pytest.fixture
    def service(self):
        return DeformityPlanningService(analyzer=DeformityAnalyzer(language="en"))

    @pytest.mark.asyncio
    async def test_analyze_from_form_strings(self, service):
        """폼 문자열 입력 → 파싱 → 분석"""
        request = AnalyzeDeformityApiRequest(mpta="84.0", ldfa="90,0", jlca=" 4 ")
        result = await service.analyze(request)

        assert result.analysis_id.startswith("analysis_")
        assert result.inputs == {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0}
        assert result.analysis.decision == Decision.GRAY_ZONE
        assert result.display.iad_pct == "40 %"
        assert result.processing_time_ms >= 0

    @pytest.mark.asyncio
    async def test_empty_field_raises_invalid_input(self, service):
        with pytest.raises(InvalidInput):
            await service.analyze(AnalyzeDeformityApiRequest(mpta="", ldfa=90, jlca=4))

    @pytest.mark.asyncio
    async def test_negative_jlca_propagates(self, service):
        with pytest.raises(NegativeJLCA):
            await service.analyze(AnalyzeDeformityApiRequest(mpta=84, ldfa=90, jlca=-2))

    @pytest.mark.asyncio
    async def test_analyzer_called_once_with_parsed_values(self, demo_angles):
        real = DeformityAnalyzer()
        analyzer = Mock(wraps=real)
        analyzer.language = real.language
        service = DeformityPlanningService(analyzer=analyzer)

        await service.analyze(AnalyzeDeformityApiRequest(**demo_angles))

        analyzer.analyze.assert_called_once_with(84.0, 90.0, 4.0)

    @pytest.mark.asyncio
    async def test_demo_preset(self, service):
        result = await service.demo()
        assert result.inputs == {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0}
        assert result.analysis.decision == Decision.GRAY_ZONE

    def test_demo_form(self, service):
        form = service.demo_form()
        assert (form.mpta, form.ldfa, form.jlca) == ("84.0", "90.0", "4.0")

    def test_reset_form(self, service):
        form = service.reset_form()
        assert (form.mpta, form.ldfa, form.jlca) == ("", "", "")
        assert form.display.iad == "—"
        assert form.display.why == 'Enter the values then "Compute".'


class TestServiceFactory:

    def test_language_from_request(self):
        assert create_deformity_planning_service("fr").language == "fr"

    def test_unsupported_language_uses_default(self):
        assert create_deformity_planning_service("de").language == "en"
        assert create_deformity_planning_service(None).language == "en"
