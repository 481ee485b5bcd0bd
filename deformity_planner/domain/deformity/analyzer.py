"""
무릎 변형 분석 Domain Logic
MPTA / LDFA / JLCA → 파생 변형량 → 우선순위 룰 → 수술 전략 결정
"""
from __future__ import annotations
import logging
from typing import Callable, NamedTuple, Optional

import numpy as np

from deformity_planner.domain.deformity import messages
from deformity_planner.domain.deformity.constants import (
    NEUTRAL_ANGLE,
    NEGLIGIBLE_EAD,
    SHARE_LIMIT_PCT,
    SINGLE_SITE_PCT,
)
from deformity_planner.domain.deformity.errors import InvalidInput, NegativeJLCA
from deformity_planner.schemas.deformity_dto import (
    AnalysisWarning,
    Decision,
    DeformityAnalysis,
    DeformityMetrics,
    WarningCode,
)
from deformity_planner.utils.formatting import fmt

logger = logging.getLogger(__name__)

_NUMERIC_TYPES = (int, float, np.integer, np.floating)


class Rule(NamedTuple):
    """(조건, 결과 빌더) 한 쌍. 리스트 순서가 곧 우선순위"""
    name: str
    predicate: Callable[[DeformityMetrics], bool]
    decision: Decision
    rationale: Callable[[DeformityMetrics, str], list[str]]


def _to_finite(value) -> Optional[float]:
    """숫자 → float. bool, 숫자 아님, float 범위 초과 정수, NaN/inf 는 None"""
    if isinstance(value, bool) or not isinstance(value, _NUMERIC_TYPES):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if np.isfinite(value) else None


def _share(numerator: float, denominator: float) -> Optional[float]:
    """분모 0 → None (NaN 센티넬 사용 안 함)"""
    if denominator == 0:
        return None
    return numerator / denominator * 100


# ── 룰 조건 ─────────────────────────────────────────────
# None 값은 각 조건에서 먼저 걸러낸다 (None 과 숫자 비교 금지)

def _ead_negligible(m: DeformityMetrics) -> bool:
    return abs(m.EAD) < NEGLIGIBLE_EAD and m.IAD > 0


def _gray_zone(m: DeformityMetrics) -> bool:
    return (
        m.IADpct is not None
        and m.EADpct is not None
        and m.IADpct <= SHARE_LIMIT_PCT
        and m.EADpct <= SHARE_LIMIT_PCT
    )


def _iad_majority(m: DeformityMetrics) -> bool:
    return m.IADpct is not None and m.IADpct > SHARE_LIMIT_PCT


def _ead_majority(m: DeformityMetrics) -> bool:
    return m.EADpct is not None and m.EADpct > SHARE_LIMIT_PCT


def _split_unknown(m: DeformityMetrics) -> bool:
    return _ead_majority(m) and not m.bony_split_defined


def _tibial_single_site(m: DeformityMetrics) -> bool:
    return _ead_majority(m) and m.bony_split_defined and m.TDpct >= SINGLE_SITE_PCT


def _femoral_single_site(m: DeformityMetrics) -> bool:
    return _ead_majority(m) and m.bony_split_defined and m.FDpct >= SINGLE_SITE_PCT


def _double_level(m: DeformityMetrics) -> bool:
    return _ead_majority(m) and m.bony_split_defined


def _always(m: DeformityMetrics) -> bool:
    return True


# ── 근거 문구 ───────────────────────────────────────────

def _ead_prefix(m: DeformityMetrics, lang: str) -> list[str]:
    return [messages.rationale("ead_majority", lang, ead_pct=fmt(m.EADpct, 0))]


DECISION_RULES: list[Rule] = [
    Rule(
        "ead_negligible",
        _ead_negligible,
        Decision.UKA_PROBABLE,
        lambda m, lang: [
            messages.rationale("ead_negligible", lang),
            messages.rationale("correlate_soft_tissue", lang),
        ],
    ),
    Rule(
        "gray_zone",
        _gray_zone,
        Decision.GRAY_ZONE,
        lambda m, lang: [messages.rationale("gray_zone", lang)],
    ),
    Rule(
        "iad_majority",
        _iad_majority,
        Decision.UKA_PREFERRED,
        lambda m, lang: [
            messages.rationale("iad_majority", lang, iad_pct=fmt(m.IADpct, 0)),
            messages.rationale("uka_goal", lang),
        ],
    ),
    Rule(
        "ead_majority_split_unknown",
        _split_unknown,
        Decision.OSTEOTOMY_UNSPECIFIED,
        lambda m, lang: _ead_prefix(m, lang) + [messages.rationale("split_not_computable", lang)],
    ),
    Rule(
        "ead_majority_tibial",
        _tibial_single_site,
        Decision.HTO,
        lambda m, lang: _ead_prefix(m, lang)
        + [messages.rationale("tibial_dominant", lang, td_pct=fmt(m.TDpct, 0))],
    ),
    Rule(
        "ead_majority_femoral",
        _femoral_single_site,
        Decision.DFO,
        lambda m, lang: _ead_prefix(m, lang)
        + [messages.rationale("femoral_dominant", lang, fd_pct=fmt(m.FDpct, 0))],
    ),
    Rule(
        "ead_majority_double_level",
        _double_level,
        Decision.DLO,
        lambda m, lang: _ead_prefix(m, lang)
        + [
            messages.rationale("shared_split", lang, fd_pct=fmt(m.FDpct, 0), td_pct=fmt(m.TDpct, 0)),
            messages.rationale("split_principle", lang),
        ],
    ),
    # 위 룰 어느 것에도 해당하지 않을 때의 방어적 fallback
    Rule(
        "fallback",
        _always,
        Decision.INCONCLUSIVE,
        lambda m, lang: [messages.rationale("inconclusive", lang)],
    ),
]


class DeformityAnalyzer:
    """무릎 변형 교정 전략 계산기 (상태 없음)"""

    def __init__(self, language: str = messages.DEFAULT_LANGUAGE):
        """
        Args:
            language: 결정 라벨/근거 문구 언어 (en, fr)
        """
        self.language = messages.resolve_language(language)

    def validate(self, mpta, ldfa, jlca) -> tuple[float, float, float]:
        """
        입력 검증

        Raises:
            InvalidInput: 값이 없거나 유한한 숫자가 아님
            NegativeJLCA: jlca < 0

        Returns:
            float 로 정규화된 (mpta, ldfa, jlca)
        """
        values = {"mpta": _to_finite(mpta), "ldfa": _to_finite(ldfa), "jlca": _to_finite(jlca)}
        bad = tuple(name for name, v in values.items() if v is None)
        if bad:
            raise InvalidInput(
                f"MPTA, LDFA and JLCA must be finite numbers (invalid: {', '.join(bad)}).",
                fields=bad,
            )

        if values["jlca"] < 0:
            raise NegativeJLCA(values["jlca"])

        return values["mpta"], values["ldfa"], values["jlca"]

    def compute_metrics(self, mpta: float, ldfa: float, jlca: float) -> DeformityMetrics:
        """IAD/EAD/GD 와 퍼센트 분할 (검증된 입력 전제)"""
        iad = jlca
        ead = ldfa - mpta
        gd = iad + ead

        return DeformityMetrics(
            IAD=iad,
            EAD=ead,
            GD=gd,
            IADpct=_share(iad, gd),
            EADpct=_share(ead, gd),
            FDpct=_share(ldfa - NEUTRAL_ANGLE, ead),
            TDpct=_share(NEUTRAL_ANGLE - mpta, ead),
        )

    def decide(self, metrics: DeformityMetrics) -> tuple[Decision, list[str]]:
        """우선순위 순서대로 첫 번째로 매칭되는 룰의 결정 반환"""
        for rule in DECISION_RULES:
            if rule.predicate(metrics):
                logger.debug(f"rule matched: {rule.name}")
                return rule.decision, rule.rationale(metrics, self.language)
        # fallback 룰이 항상 매칭되므로 도달하지 않음
        raise RuntimeError("no decision rule matched")

    def analyze(self, mpta, ldfa, jlca) -> DeformityAnalysis:
        """
        전체 분석: 검증 → 파생 값 → 경고 → 결정

        Returns:
            DeformityAnalysis (decision, rationale, metrics, warnings)
        """
        mpta, ldfa, jlca = self.validate(mpta, ldfa, jlca)
        metrics = self.compute_metrics(mpta, ldfa, jlca)

        warnings = []
        if metrics.GD <= 0:
            logger.warning(
                f"⚠️ GD <= 0 (GD={metrics.GD:.1f}): mpta={mpta}, ldfa={ldfa}, jlca={jlca}"
            )
            warnings.append(
                AnalysisWarning(
                    code=WarningCode.INCONSISTENT_MEASUREMENT,
                    message=messages.warning_message(
                        WarningCode.INCONSISTENT_MEASUREMENT, self.language
                    ),
                )
            )

        decision, rationale = self.decide(metrics)
        logger.info(f"✅ decision={decision.value} (IAD={metrics.IAD:.1f}, EAD={metrics.EAD:.1f}, GD={metrics.GD:.1f})")

        return DeformityAnalysis(
            decision=decision,
            decision_label=messages.decision_label(decision, self.language),
            rationale=rationale,
            metrics=metrics,
            warnings=warnings,
        )


def analyze(mpta, ldfa, jlca, language: str = messages.DEFAULT_LANGUAGE) -> DeformityAnalysis:
    """DeformityAnalyzer 단축 함수"""
    return DeformityAnalyzer(language=language).analyze(mpta, ldfa, jlca)
