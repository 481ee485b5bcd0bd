# tests/unit/test_formatter.py
import pytest

from deformity_planner.report.formatter import (
    build_display,
    build_text_report,
    empty_display,
    format_bony_split,
)
from deformity_planner.schemas.deformity_dto import DeformityMetrics
from deformity_planner.utils.formatting import UNDEFINED_MARK, fmt, fmt_pct


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (4.0, 1, "4.0"),
        (53.333, 0, "53"),
        (46.667, 0, "47"),
        (-0.04, 1, "0.0"),
        (12.5, 0, "13"),
        (0.25, 1, "0.3"),
        (-12.5, 0, "-13"),
        (1.005, 2, "1.00"),
        (1e20, 1, "100000000000000000000.0"),
        (None, 1, UNDEFINED_MARK),
        (float("nan"), 0, UNDEFINED_MARK),
        (float("inf"), 1, UNDEFINED_MARK),
    ],
)
def test_fmt(value, digits, expected):
    assert fmt(value, digits) == expected


def test_fmt_pct():
    assert fmt_pct(40.0) == "40 %"
    assert fmt_pct(None) == "— %"


def test_bony_split_not_computable():
    m = DeformityMetrics(IAD=5.0, EAD=0.0, GD=5.0, IADpct=100.0, EADpct=0.0)
    assert format_bony_split(m) == "Not computable (EAD = 0)"
    assert format_bony_split(m, "fr") == "Non calculable (EAD = 0)"


def test_display_for_dlo(analyzer, dlo_angles):
    display = build_display(analyzer.analyze(**dlo_angles))
    assert display.iad == "0.0"
    assert display.ead == "15.0"
    assert display.gd == "15.0"
    assert display.iad_pct == "0 %"
    assert display.ead_pct == "100 %"
    assert display.bony == "FD% 53 % / TD% 47 %"
    assert display.decision == "Double-level osteotomy (DLO) – tibia + femur"
    assert display.why.splitlines()[0] == "• EAD% > 60% (100%): deformity is mainly extra-articular."
    assert display.warning is None


def test_display_undefined_percentages(analyzer):
    display = build_display(analyzer.analyze(90.0, 87.0, 3.0))
    assert display.iad_pct == "— %"
    assert display.ead_pct == "— %"
    assert display.warning.startswith("Warning: GD ≤ 0")


def test_empty_display():
    display = empty_display("fr")
    assert display.decision == UNDEFINED_MARK
    assert display.bony == UNDEFINED_MARK
    assert display.why == "Renseigne les valeurs puis “Calculer”."


def test_text_report(analyzer, demo_angles):
    text = build_text_report(inputs=demo_angles, analysis=analyzer.analyze(**demo_angles))
    assert "IAD 4.0° | EAD 6.0° | GD 10.0°" in text
    assert "IAD% 40 % | EAD% 60 %" in text
    assert "=> Gray zone: PUC vs Osteotomy (discussion)" in text


def test_display_rounds_halves_away_from_zero(analyzer):
    """IAD% 12.5 → "13 %", EAD 0.25 → "0.3" (근거 문구의 퍼센트도 동일 규칙)"""
    result = analyzer.analyze(80.0, 87.0, 1.0)
    assert result.metrics.IADpct == 12.5
    assert build_display(result).iad_pct == "13 %"
    assert result.rationale[0] == "EAD% > 60% (88%): deformity is mainly extra-articular."

    assert build_display(analyzer.analyze(87.0, 87.25, 4.0)).ead == "0.3"
