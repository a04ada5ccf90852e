"""
core/pipeline/validation.py - 입력 값 검증

위치 인자와 플래그 값 검증 함수들입니다.
검증 함수는 실패 시 ValueError를 발생시키고, 파이프라인이 이를
ArgValidationError / FlagValidationError로 변환합니다.
"""

from __future__ import annotations

import uuid
from typing import Any

from cli.i18n import t
from core.exceptions import FlagValidationError

LIMIT_FLAG = "limit"


def validate_uuid(value: str) -> None:
    """UUID 형식 검증

    Raises:
        ValueError: UUID가 아닌 경우
    """
    try:
        uuid.UUID(str(value))
    except ValueError as e:
        raise ValueError(t("common.invalid_uuid", value=value)) from e


def parse_limit(value: Any) -> int | None:
    """--limit 값 검증

    Args:
        value: 플래그 값 (None이면 제한 없음)

    Returns:
        1 이상의 정수 또는 None

    Raises:
        FlagValidationError: 정수가 아니거나 1 미만인 경우
    """
    if value is None:
        return None

    try:
        limit = int(value)
    except (TypeError, ValueError) as e:
        raise FlagValidationError(LIMIT_FLAG, str(e), cause=e) from e

    if limit < 1:
        raise FlagValidationError(LIMIT_FLAG, t("common.must_be_positive"))

    return limit
