"""
무릎 변형 분석 CLI

예)
  deformity-planner --mpta 84 --ldfa 90 --jlca 4
  deformity-planner --demo --lang fr --json
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from deformity_planner.config.settings import settings
from deformity_planner.domain.deformity import DeformityAnalyzer, DeformityInputError, DEMO_PRESET
from deformity_planner.domain.deformity import messages
from deformity_planner.report.formatter import build_text_report
from deformity_planner.utils.angle_parser import parse_angles

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="deformity-planner",
        description="Knee deformity correction planning (MPTA / LDFA / JLCA)",
    )
    # 문자열 그대로 받아서 angle_parser 로 파싱 (빈 값/쉼표 소수점 처리)
    p.add_argument("--mpta", help="Medial Proximal Tibial Angle (deg)")
    p.add_argument("--ldfa", help="Lateral Distal Femoral Angle (deg)")
    p.add_argument("--jlca", help="Joint Line Convergence Angle (deg), >= 0")
    p.add_argument("--demo", action="store_true", help="use the demo preset (84.0 / 90.0 / 4.0)")
    p.add_argument("--lang", default=None, help="output language (en, fr)")
    p.add_argument("--json", action="store_true", help="print the full result as JSON")
    p.add_argument("--save", action="store_true", help="write the JSON result under REPORTS_DIR")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def save_report(payload: dict, out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"deformity_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    language = settings.language_or_default(args.lang)

    raw = DEMO_PRESET if args.demo else {"mpta": args.mpta, "ldfa": args.ldfa, "jlca": args.jlca}

    try:
        mpta, ldfa, jlca = parse_angles(raw["mpta"], raw["ldfa"], raw["jlca"])
        analysis = DeformityAnalyzer(language=language).analyze(mpta, ldfa, jlca)
    except DeformityInputError as e:
        print(messages.error_message(e.code, language), file=sys.stderr)
        logger.debug(e.message)
        return EXIT_INVALID_INPUT

    inputs = {"mpta": mpta, "ldfa": ldfa, "jlca": jlca}
    payload = {"inputs": inputs, "language": language, **analysis.model_dump(mode="json")}

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(build_text_report(inputs=inputs, analysis=analysis, language=language))

    if args.save:
        path = save_report(payload, settings.ensure_reports_dir())
        print(f"saved: {path}", file=sys.stderr)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
