from __future__ import annotations
import math
import re
from typing import Optional, Union

from deformity_planner.domain.deformity.errors import InvalidInput

RawAngle = Union[str, int, float, None]

# 부호, ASCII 숫자, 소수점(. 또는 ,), 지수만 허용 ("8_4", 전각/비ASCII 숫자 거부)
_ANGLE_PATTERN = re.compile(r"[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_angle(raw: RawAngle) -> Optional[float]:
    """
    폼 입력값 → float. 파싱 불가/빈 값은 None.

    - 앞뒤 공백 제거
    - 소수점 쉼표 허용 ("84,5" → 84.5)
    - NaN / inf / float 범위 초과는 None
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        text = str(raw).strip()
        if not _ANGLE_PATTERN.fullmatch(text):
            return None
        value = float(text.replace(",", "."))
    return value if math.isfinite(value) else None


def parse_angles(mpta: RawAngle, ldfa: RawAngle, jlca: RawAngle) -> tuple[float, float, float]:
    """
    세 입력을 한 번에 파싱. 하나라도 실패하면 InvalidInput.
    """
    parsed = {"mpta": parse_angle(mpta), "ldfa": parse_angle(ldfa), "jlca": parse_angle(jlca)}
    missing = tuple(name for name, v in parsed.items() if v is None)
    if missing:
        raise InvalidInput(
            f"MPTA, LDFA and JLCA must be numeric values (invalid: {', '.join(missing)}).",
            fields=missing,
        )
    return parsed["mpta"], parsed["ldfa"], parsed["jlca"]
