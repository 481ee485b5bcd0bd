from typing import Optional, Union

from pydantic import BaseModel, Field

RawAngleField = Optional[Union[float, str]]


class AnalyzeDeformityApiRequest(BaseModel):
    """변형 분석 API Request (폼 값 그대로: 숫자/문자열/빈 값 허용)"""

    # 폼에서 문자열로 넘어올 수 있으므로 파싱은 서비스에서
    mpta: RawAngleField = Field(default=None, description="MPTA (deg)")
    ldfa: RawAngleField = Field(default=None, description="LDFA (deg)")
    jlca: RawAngleField = Field(default=None, description="JLCA (deg), >= 0")

    language: Optional[str] = Field(
        default=None,
        description="결과 문구 언어 (en, fr). 없으면 서버 기본값"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "mpta": 84.0,
                "ldfa": 90.0,
                "jlca": 4.0,
                "language": "en"
            }
        }
