"""
services/opensearch/client.py - OpenSearch API 클라이언트
"""

from __future__ import annotations

from typing import Any

from core.api import ApiClient


class OpenSearchClient(ApiClient):
    """STACKIT OpenSearch API 클라이언트

    응답 형태:
        오퍼링 목록   {"offerings": [{"name", "version", "plans": [...]}]}
        인스턴스 목록 {"instances": [...]}
        인스턴스 상세 인스턴스 객체
    """

    service = "opensearch"

    def list_offerings(self, project_id: str) -> list[dict[str, Any]]:
        """서비스 오퍼링과 플랜 목록"""
        data = self.get(f"/v1/projects/{project_id}/offerings") or {}
        return data.get("offerings") or []

    def list_instances(self, project_id: str) -> list[dict[str, Any]]:
        """인스턴스 목록"""
        data = self.get(f"/v1/projects/{project_id}/instances") or {}
        return data.get("instances") or []

    def get_instance(self, project_id: str, instance_id: str) -> dict[str, Any]:
        """인스턴스 상세"""
        return self.get(f"/v1/projects/{project_id}/instances/{instance_id}") or {}

    def delete_instance(self, project_id: str, instance_id: str) -> None:
        """인스턴스 삭제 (비동기, 삭제 요청만 접수)"""
        self.delete(f"/v1/projects/{project_id}/instances/{instance_id}")
