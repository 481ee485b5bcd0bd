"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from fastapi.testclient import TestClient

from deformity_planner.config.settings import settings
from deformity_planner.domain.deformity import DeformityAnalyzer


# ========================================
# Application Fixtures
# ========================================

@pytest.fixture(scope="session")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from deformity_planner.main import app as fastapi_app
    return fastapi_app


@pytest.fixture(scope="session")
def client(app):
    """FastAPI TestClient (API 테스트용)"""
    return TestClient(app)


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """기본은 인증 비활성 (.env 값과 무관하게)"""
    monkeypatch.setattr(settings, "INTERNAL_API_KEY", None)


@pytest.fixture
def api_key(monkeypatch):
    """인증 활성화 + 헤더 반환"""
    monkeypatch.setattr(settings, "INTERNAL_API_KEY", "test-api-key")
    return {"X-Internal-Api-Key": "test-api-key"}


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def analyzer() -> DeformityAnalyzer:
    """영문 분석기"""
    return DeformityAnalyzer(language="en")


@pytest.fixture
def fr_analyzer() -> DeformityAnalyzer:
    """불문 분석기"""
    return DeformityAnalyzer(language="fr")


# ========================================
# Sample Data Fixtures
# ========================================

@pytest.fixture
def demo_angles():
    """데모 프리셋 (gray zone)"""
    return {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0}


@pytest.fixture
def dlo_angles():
    """관절외 변형 우세 + 대퇴/경골 분할 (DLO)"""
    return {"mpta": 80.0, "ldfa": 95.0, "jlca": 0.0}


@pytest.fixture
def inconsistent_angles():
    """GD < 0 인데 결정은 나오는 케이스"""
    return {"mpta": 90.0, "ldfa": 85.0, "jlca": 2.0}
