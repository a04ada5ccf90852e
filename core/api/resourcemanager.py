"""
core/api/resourcemanager.py - Resource Manager 클라이언트

프로젝트 이름 조회용. 빈 목록 메시지 등에서 프로젝트 ID 대신 이름을 보여줄 때 사용합니다.
"""

from __future__ import annotations

from typing import Any

from core.api.client import ApiClient, configure_client


class ResourceManagerClient(ApiClient):
    """STACKIT Resource Manager API 클라이언트"""

    service = "resourcemanager"

    def get_project(self, project_id: str) -> dict[str, Any]:
        """프로젝트 상세 조회"""
        return self.get(f"/v2/projects/{project_id}") or {}

    def get_project_name(self, project_id: str) -> str | None:
        """프로젝트 이름 조회"""
        return self.get_project(project_id).get("name")


def lookup_project_name(_client: Any, inp: Any) -> str | None:
    """프로젝트 라벨 조회

    서비스 클라이언트와 무관하게 Resource Manager 클라이언트를 별도로 생성합니다.
    LabelSpec.lookup 시그니처 (client, input)를 따릅니다.
    """
    client = configure_client(ResourceManagerClient, inp.flags)
    return client.get_project_name(inp.project_id)
