from fastapi import Header, HTTPException, Query
from typing import Optional
from deformity_planner.config.settings import settings
import logging

logger = logging.getLogger(__name__)


# API Key 인증 (INTERNAL_API_KEY 미설정 시 통과)
async def verify_api_key(
        x_internal_api_key: Optional[str] = Header(None, alias="X-Internal-Api-Key")
):
    if not settings.INTERNAL_API_KEY:
        return True

    if x_internal_api_key is None:
        logger.warning("⚠️ Missing X-Internal-Api-Key header")
        raise HTTPException(
            status_code=401,
            detail="Missing X-Internal-Api-Key header"
        )

    if x_internal_api_key != settings.INTERNAL_API_KEY:
        logger.warning(f"❌ Invalid API Key: {x_internal_api_key[:10]}...")
        raise HTTPException(
            status_code=401,
            detail="Invalid Internal API Key"
        )

    return True


# 쿼리 언어 → 지원 언어로 정규화
async def resolve_language(
        lang: Optional[str] = Query(
            default=None,
            description="결과 문구 언어 (en, fr)"
        ),
) -> str:
    return settings.language_or_default(lang)
