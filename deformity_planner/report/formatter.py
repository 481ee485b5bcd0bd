"""
결과 표시 포맷터
도메인 결과(숫자) → 화면/텍스트 표시 문자열
"""
from __future__ import annotations
from typing import List, Optional

from deformity_planner.domain.deformity import messages
from deformity_planner.schemas.analyze_response import DeformityDisplayDto
from deformity_planner.schemas.deformity_dto import DeformityAnalysis, DeformityMetrics
from deformity_planner.utils.formatting import UNDEFINED_MARK, fmt, fmt_pct

BULLET = "•"


def format_bony_split(metrics: DeformityMetrics, language: Optional[str] = None) -> str:
    if metrics.bony_split_defined:
        return f"FD% {fmt(metrics.FDpct, 0)} % / TD% {fmt(metrics.TDpct, 0)} %"
    return messages.display_text("bony_not_computable", language)


def format_bullets(lines: List[str]) -> str:
    return "\n".join(f"{BULLET} {line}" for line in lines)


def build_display(analysis: DeformityAnalysis, language: Optional[str] = None) -> DeformityDisplayDto:
    m = analysis.metrics
    warning = " ".join(w.message for w in analysis.warnings) or None
    return DeformityDisplayDto(
        iad=fmt(m.IAD, 1),
        ead=fmt(m.EAD, 1),
        gd=fmt(m.GD, 1),
        iad_pct=fmt_pct(m.IADpct),
        ead_pct=fmt_pct(m.EADpct),
        bony=format_bony_split(m, language),
        decision=analysis.decision_label,
        why=format_bullets(analysis.rationale),
        warning=warning,
    )


def empty_display(language: Optional[str] = None) -> DeformityDisplayDto:
    """초기화 상태: 모든 표시 값 "—" """
    return DeformityDisplayDto(
        iad=UNDEFINED_MARK,
        ead=UNDEFINED_MARK,
        gd=UNDEFINED_MARK,
        iad_pct=UNDEFINED_MARK,
        ead_pct=UNDEFINED_MARK,
        bony=UNDEFINED_MARK,
        decision=UNDEFINED_MARK,
        why=messages.display_text("prompt", language),
        warning=None,
    )


def build_text_report(
    *,
    inputs: dict,
    analysis: DeformityAnalysis,
    language: Optional[str] = None,
) -> str:
    """CLI / 로그용 평문 보고서"""
    d = build_display(analysis, language)
    lines = [
        f"MPTA {fmt(inputs['mpta'], 1)}° | LDFA {fmt(inputs['ldfa'], 1)}° | JLCA {fmt(inputs['jlca'], 1)}°",
        f"IAD {d.iad}° | EAD {d.ead}° | GD {d.gd}°",
        f"IAD% {d.iad_pct} | EAD% {d.ead_pct}",
        f"FD/TD: {d.bony}",
    ]
    if d.warning:
        lines.append(f"! {d.warning}")
    lines.append("")
    lines.append(f"=> {d.decision}")
    lines.append(d.why)
    return "\n".join(lines)
