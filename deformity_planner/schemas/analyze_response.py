from typing import Optional

from pydantic import BaseModel, Field

from deformity_planner.schemas.deformity_dto import DeformityAnalysis


class DeformityDisplayDto(BaseModel):
    """화면 표시용 포맷 값 (각도 소수 1자리, 퍼센트 0자리, 미정의는 "—")"""
    iad: str
    ead: str
    gd: str
    iad_pct: str
    ead_pct: str
    bony: str = Field(..., description="FD% / TD% 분할 또는 계산 불가 문구")
    decision: str
    why: str = Field(..., description="근거 bullet 텍스트 (• 줄바꿈)")
    warning: Optional[str] = None


class AnalyzeDeformityApiResponse(BaseModel):
    """변형 분석 API 응답 DTO"""

    analysis_id: str = Field(..., description="분석 고유 ID")
    inputs: dict[str, float] = Field(..., description="파싱된 입력 (mpta, ldfa, jlca)")
    language: str
    analysis: DeformityAnalysis
    display: DeformityDisplayDto

    api_version: str = Field(default="1.0.0")
    processing_time_ms: int = Field(..., description="처리 시간 (밀리초)")

    class Config:
        json_schema_extra = {
            "example": {
                "analysis_id": "analysis_20250101_120000_a1b2c3d4",
                "inputs": {"mpta": 84.0, "ldfa": 90.0, "jlca": 4.0},
                "language": "en",
                "analysis": {
                    "decision": "gray_zone",
                    "decision_label": "Gray zone: PUC vs Osteotomy (discussion)",
                    "rationale": [
                        "IAD% ≤ 60% and EAD% ≤ 60%: shared decision based on age, activity, meniscus/cartilage, laxity and expectations."
                    ],
                    "metrics": {
                        "IAD": 4.0, "EAD": 6.0, "GD": 10.0,
                        "IADpct": 40.0, "EADpct": 60.0,
                        "FDpct": 50.0, "TDpct": 50.0
                    },
                    "warnings": []
                },
                "display": {
                    "iad": "4.0", "ead": "6.0", "gd": "10.0",
                    "iad_pct": "40 %", "ead_pct": "60 %",
                    "bony": "FD% 50 % / TD% 50 %",
                    "decision": "Gray zone: PUC vs Osteotomy (discussion)",
                    "why": "• IAD% ≤ 60% and EAD% ≤ 60%: ...",
                    "warning": None
                },
                "api_version": "1.0.0",
                "processing_time_ms": 1
            }
        }


class DeformityFormState(BaseModel):
    """폼 상태 (데모 프리셋 / 초기화)"""
    mpta: str = ""
    ldfa: str = ""
    jlca: str = ""
    display: DeformityDisplayDto
