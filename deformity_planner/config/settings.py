from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# helpers
from deformity_planner.config.env_utils import env_bool, env_choice, env_list, env_path, env_secret
from deformity_planner.domain.deformity.messages import DECISION_LABELS


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml / requirements.txt 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수, 그것도 없으면 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any(
            (parent / m).exists()
            for m in (".git", "pyproject.toml", "requirements.txt")
        ):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    # site-packages 설치 시에는 마커가 없을 수 있음
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "dev")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


# ─────────────────────────────────────────────────────────
# 결과 문구 언어
#   - 메시지 카탈로그에 있는 언어만 허용, 나머지는 버림
# ─────────────────────────────────────────────────────────
def load_supported_languages() -> list[str]:
    langs = [lang for lang in env_list("SUPPORTED_LANGUAGES", DECISION_LABELS) if lang in DECISION_LABELS]
    return list(dict.fromkeys(langs)) or list(DECISION_LABELS)


def load_default_language(supported: list[str]) -> str:
    fallback = "en" if "en" in supported else supported[0]
    return env_choice("DEFAULT_LANGUAGE", supported, fallback)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = int(os.getenv("FASTAPI_PORT", 8000))
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = env_choice("LOG_LEVEL", ("DEBUG", "INFO", "WARNING", "ERROR"), "INFO")

    # ── 인증 (비어 있으면 비활성) ────────────────────────
    INTERNAL_API_KEY: Optional[str] = env_secret("INTERNAL_API_KEY")

    # ── 결과 문구 언어 ───────────────────────────────────
    SUPPORTED_LANGUAGES: list[str] = load_supported_languages()
    DEFAULT_LANGUAGE: str = load_default_language(SUPPORTED_LANGUAGES)

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    DATA_DIR: Path = env_path("DATA_DIR", ROOT / "data")
    REPORTS_DIR: Path = env_path("REPORTS_DIR", DATA_DIR / "reports")

    def ensure_reports_dir(self) -> Path:
        """CLI --save 시에만 생성 (import 시 디렉토리 생성 안 함)"""
        Path(self.REPORTS_DIR).mkdir(parents=True, exist_ok=True)
        return Path(self.REPORTS_DIR)

    def language_or_default(self, language: Optional[str]) -> str:
        if language and language.lower() in self.SUPPORTED_LANGUAGES:
            return language.lower()
        return self.DEFAULT_LANGUAGE


# 전역 싱글톤처럼 사용
settings = Settings()
