import os
from pathlib import Path
from typing import Iterable, Optional

_TRUTHY = ("1", "true", "yes", "y", "on")


def env_bool(name: str, default: bool = False) -> bool:
    """"1/true/yes/y/on" 이면 True, 미설정이면 default"""
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in _TRUTHY


def env_list(name: str, default_list: Iterable[str]) -> list[str]:
    """콤마/개행 구분 → 소문자 리스트 (언어 코드 등)"""
    v = os.getenv(name) or ""
    parts = [p.strip().lower() for p in v.replace("\n", ",").split(",") if p.strip()]
    return parts or [d.lower() for d in default_list]


def env_path(name: str, default: Path) -> Path:
    v = os.getenv(name)
    return Path(v).expanduser() if v else default


def env_secret(name: str) -> Optional[str]:
    """빈 문자열은 미설정으로 취급"""
    v = os.getenv(name, "").strip()
    return v or None


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """허용 목록 밖의 값이면 default (대소문자 무시)"""
    v = (os.getenv(name) or "").strip()
    allowed = {c.upper(): c for c in choices}
    return allowed.get(v.upper(), default)
