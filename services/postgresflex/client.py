"""
services/postgresflex/client.py - PostgreSQL Flex API 클라이언트
"""

from __future__ import annotations

from typing import Any

from services.flex import FlexClient


class PostgresFlexClient(FlexClient):
    """STACKIT PostgreSQL Flex API 클라이언트"""

    service = "postgresflex"

    def reset_user_password(self, project_id: str, instance_id: str, user_id: str) -> dict[str, Any]:
        """비밀번호 재설정

        응답의 {"item": {...}}을 풀어서 반환합니다.
        """
        data = super().reset_user_password(project_id, instance_id, user_id)
        return data.get("item") or {}
