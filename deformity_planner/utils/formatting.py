from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

# 미정의 값 표시 마커
UNDEFINED_MARK = "—"


def fmt(value: Optional[float], digits: int = 1) -> str:
    """
    고정 소수점 표시. None / NaN / inf 는 숫자처럼 보이는 값 대신 "—" 로 표시.
    정확히 절반인 값은 0 에서 먼 쪽으로 올림 (12.5 → "13", 0.25 → "0.3").

    >>> fmt(53.333, 0)
    '53'
    >>> fmt(None)
    '—'
    """
    if value is None or not math.isfinite(value):
        return UNDEFINED_MARK
    # Decimal(float) 은 이진 값 그대로: 1.005 는 1.00499... 이므로 "1.00"
    with localcontext() as ctx:
        # float 최대 자릿수(309) + 소수 자릿수까지 정밀도 확보
        ctx.prec = 330 + digits
        rounded = Decimal(float(value)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    # -0.0 → "0.0" (음수 0 표시 방지)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:f}"


def fmt_pct(value: Optional[float]) -> str:
    """퍼센트는 소수 0자리 + " %" 접미사"""
    return f"{fmt(value, 0)} %"
