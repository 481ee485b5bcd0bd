"""
변형 분석 관련 DTO
DeformityAnalyzer 입출력용
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Decision(str, Enum):
    """수술 전략 결정 (고정 열거)"""
    UKA_PROBABLE = "uka_probable"
    GRAY_ZONE = "gray_zone"
    UKA_PREFERRED = "uka_preferred"
    OSTEOTOMY_UNSPECIFIED = "osteotomy_unspecified"
    HTO = "hto"
    DFO = "dfo"
    DLO = "dlo"
    INCONCLUSIVE = "inconclusive"


class WarningCode(str, Enum):
    INCONSISTENT_MEASUREMENT = "inconsistent_measurement"


class DeformityMetrics(BaseModel):
    """
    파생 값
    - 분모가 0이면 퍼센트는 None (NaN 대신 명시적 부재)
    """
    IAD: float = Field(..., description="Intra-articular deformity (deg) = JLCA")
    EAD: float = Field(..., description="Extra-articular deformity (deg) = LDFA - MPTA")
    GD: float = Field(..., description="Global deformity (deg) = IAD + EAD")
    IADpct: Optional[float] = Field(None, description="IAD / GD * 100, None when GD == 0")
    EADpct: Optional[float] = Field(None, description="EAD / GD * 100, None when GD == 0")
    FDpct: Optional[float] = Field(None, description="Femoral share of EAD, None when EAD == 0")
    TDpct: Optional[float] = Field(None, description="Tibial share of EAD, None when EAD == 0")

    @property
    def bony_split_defined(self) -> bool:
        return self.FDpct is not None and self.TDpct is not None


class AnalysisWarning(BaseModel):
    """비치명적 경고 (결정과 함께 반환)"""
    code: WarningCode
    message: str


class DeformityAnalysis(BaseModel):
    """전체 분석 결과"""
    decision: Decision
    decision_label: str
    rationale: list[str] = Field(default_factory=list)
    metrics: DeformityMetrics
    warnings: list[AnalysisWarning] = Field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
