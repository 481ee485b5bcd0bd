"""
결정 라벨 / 근거 문구 카탈로그 (en, fr)
fr 문구는 임상 보고서 표현, en 은 그 번역.
"""
from __future__ import annotations
from typing import Dict, Optional

from deformity_planner.schemas.deformity_dto import Decision, WarningCode

DEFAULT_LANGUAGE = "en"

DECISION_LABELS: Dict[str, Dict[Decision, str]] = {
    "en": {
        Decision.UKA_PROBABLE: "PUC (UKA) probable",
        Decision.GRAY_ZONE: "Gray zone: PUC vs Osteotomy (discussion)",
        Decision.UKA_PREFERRED: "PUC (UKA) preferred",
        Decision.OSTEOTOMY_UNSPECIFIED: "Osteotomy (type unspecified)",
        Decision.HTO: "Tibial osteotomy (HTO) – single-site",
        Decision.DFO: "Femoral osteotomy (DFO) – single-site",
        Decision.DLO: "Double-level osteotomy (DLO) – tibia + femur",
        Decision.INCONCLUSIVE: "Inconclusive result (check inputs)",
    },
    "fr": {
        Decision.UKA_PROBABLE: "PUC (UKA) probable",
        Decision.GRAY_ZONE: "Zone grise : PUC vs Ostéotomie (discussion)",
        Decision.UKA_PREFERRED: "PUC (UKA) plutôt indiquée",
        Decision.OSTEOTOMY_UNSPECIFIED: "Ostéotomie (type à préciser)",
        Decision.HTO: "Ostéotomie tibiale (HTO) – simple",
        Decision.DFO: "Ostéotomie fémorale (DFO) – simple",
        Decision.DLO: "Double-level osteotomy (DLO) – tibia + fémur",
        Decision.INCONCLUSIVE: "Résultat non concluant (vérifier les entrées)",
    },
}

RATIONALE: Dict[str, Dict[str, str]] = {
    "en": {
        "ead_negligible": "EAD ~ 0: negligible extra-articular component, deformity is mainly intra-articular (JLCA).",
        "correlate_soft_tissue": "Correlate with ligament status and cartilage topography.",
        "gray_zone": "IAD% ≤ 60% and EAD% ≤ 60%: shared decision based on age, activity, meniscus/cartilage, laxity and expectations.",
        "iad_majority": "IAD% > 60% ({iad_pct}%): deformity is mainly intra-articular (JLCA).",
        "uka_goal": "Goal: correct toward neutral without compromising the PUC.",
        "ead_majority": "EAD% > 60% ({ead_pct}%): deformity is mainly extra-articular.",
        "split_not_computable": "Femur/tibia split not computable.",
        "tibial_dominant": "TD% ≥ 80% ({td_pct}%): tibial component predominates.",
        "femoral_dominant": "FD% ≥ 80% ({fd_pct}%): femoral component predominates.",
        "shared_split": "Shared split (FD% {fd_pct}% / TD% {td_pct}%).",
        "split_principle": "Principle: split the correction to avoid extreme single-site angles.",
        "inconclusive": "The percentages do not support a robust decision.",
    },
    "fr": {
        "ead_negligible": "EAD ~ 0 : composante extra-articulaire négligeable, déformation plutôt intra-articulaire (JLCA).",
        "correlate_soft_tissue": "À confronter au statut ligamentaire et à la topographie cartilagineuse.",
        "gray_zone": "IAD% ≤ 60% et EAD% ≤ 60% : décision partagée selon âge, sport, ménisque/cartilage, laxité, attentes.",
        "iad_majority": "IAD% > 60% ({iad_pct}%) : déformation majoritairement intra-articulaire (JLCA).",
        "uka_goal": "Objectif : correction vers le neutre sans compromettre la PUC.",
        "ead_majority": "EAD% > 60% ({ead_pct}%) : déformation majoritairement extra-articulaire.",
        "split_not_computable": "Répartition fémur/tibia non calculable.",
        "tibial_dominant": "TD% ≥ 80% ({td_pct}%) : composante tibiale prédominante.",
        "femoral_dominant": "FD% ≥ 80% ({fd_pct}%) : composante fémorale prédominante.",
        "shared_split": "Répartition partagée (FD% {fd_pct}% / TD% {td_pct}%).",
        "split_principle": "Principe : répartir la correction pour éviter des angles extrêmes en mono-site.",
        "inconclusive": "Les pourcentages ne permettent pas une décision robuste.",
    },
}

WARNINGS: Dict[str, Dict[WarningCode, str]] = {
    "en": {
        WarningCode.INCONSISTENT_MEASUREMENT: "Warning: GD ≤ 0 (IAD + EAD). Check the consistency of the measurements.",
    },
    "fr": {
        WarningCode.INCONSISTENT_MEASUREMENT: "Attention : GD ≤ 0 (IAD + EAD). Vérifiez la cohérence des mesures.",
    },
}

ERRORS: Dict[str, Dict[str, str]] = {
    "en": {
        "invalid_input": "Please enter MPTA, LDFA and JLCA (numeric values).",
        "negative_jlca": "JLCA cannot be negative in this calculation.",
    },
    "fr": {
        "invalid_input": "Veuillez saisir MPTA, LDFA et JLCA (valeurs numériques).",
        "negative_jlca": "JLCA ne peut pas être négatif dans ce calcul.",
    },
}

# 화면 표시용 고정 문구
DISPLAY: Dict[str, Dict[str, str]] = {
    "en": {
        "bony_not_computable": "Not computable (EAD = 0)",
        "prompt": "Enter the values then \"Compute\".",
    },
    "fr": {
        "bony_not_computable": "Non calculable (EAD = 0)",
        "prompt": "Renseigne les valeurs puis “Calculer”.",
    },
}


def resolve_language(language: Optional[str]) -> str:
    """지원하지 않는 언어는 기본값(en)으로"""
    if language and language.lower() in DECISION_LABELS:
        return language.lower()
    return DEFAULT_LANGUAGE


def decision_label(decision: Decision, language: Optional[str] = None) -> str:
    return DECISION_LABELS[resolve_language(language)][decision]


def rationale(key: str, language: Optional[str] = None, **values) -> str:
    return RATIONALE[resolve_language(language)][key].format(**values)


def warning_message(code: WarningCode, language: Optional[str] = None) -> str:
    return WARNINGS[resolve_language(language)][code]


def error_message(code: str, language: Optional[str] = None) -> str:
    table = ERRORS[resolve_language(language)]
    return table.get(code, table["invalid_input"])


def display_text(key: str, language: Optional[str] = None) -> str:
    return DISPLAY[resolve_language(language)][key]
