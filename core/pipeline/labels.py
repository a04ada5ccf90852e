"""
core/pipeline/labels.py - 라벨 조회 (best-effort)

라벨은 프롬프트와 출력 메시지에만 쓰이는 표시용 이름입니다.
조회 실패는 절대 명령을 실패시키지 않고 원본 ID로 대체됩니다.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


def resolve_or_default(lookup: Callable[[], str | None], default: str, role: str = "") -> str:
    """라벨을 조회하고 실패하면 기본값 반환

    Args:
        lookup: 이름을 반환하는 함수 (예외 또는 빈 값 가능)
        default: 대체 값 (보통 원본 ID)
        role: 로그용 역할 이름

    Returns:
        조회된 이름 또는 default
    """
    try:
        value = lookup()
    except Exception as e:
        logger.debug("라벨 조회 실패 [%s=%s]: %s", role, default, e)
        return default

    if value is None or value == "":
        return default
    return str(value)
