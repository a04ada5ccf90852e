"""
core/api/client.py - REST API 클라이언트 베이스

서비스별 클라이언트(MongoDB Flex, PostgreSQL Flex, OpenSearch, Resource Manager)가
공유하는 requests 기반 HTTP 클라이언트입니다.

- Bearer 토큰 인증
- 설정 기반 타임아웃
- HTTP 오류 / 네트워크 오류를 ApiError로 변환
- 재시도 없음 (호출 1회 = 요청 1회)

Usage:
    from core.api import configure_client
    from services.postgresflex.client import PostgresFlexClient

    client = configure_client(PostgresFlexClient, flags)
    users = client.list_users(project_id, instance_id)
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import requests

from core.config import (
    ENV_SERVICE_ACCOUNT_TOKEN,
    get_api_timeout,
    get_config_value,
    get_endpoint,
    get_version,
    load_cli_config,
    settings,
)
from core.exceptions import ApiError, AuthError

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound="ApiClient")


class ApiClient:
    """REST API 클라이언트

    Attributes:
        service: 서비스 이름 (엔드포인트 설정 키로 사용)
        base_url: API 기본 URL
        timeout: 요청 타임아웃 (초)
    """

    service: str = ""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": f"{settings.USER_AGENT}/{get_version()}",
            }
        )

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """HTTP 요청 실행

        Args:
            method: HTTP 메서드
            path: base_url 뒤에 붙는 경로
            params: 쿼리 파라미터
            json: JSON 요청 본문

        Returns:
            파싱된 JSON 응답 (본문이 없으면 None)

        Raises:
            ApiError: 네트워크 오류 또는 2xx가 아닌 응답
        """
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        try:
            response = self._session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(str(e) or e.__class__.__name__, method=method, url=url, cause=e) from e

        if not response.ok:
            logger.debug("%s %s -> %s", method, url, response.status_code)
            raise ApiError.from_response(response)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                "invalid JSON in response",
                status_code=response.status_code,
                method=method,
                url=url,
                cause=e,
            ) from e

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


def configure_client(client_cls: type[ClientT], flags: Any = None) -> ClientT:
    """설정과 환경 변수로 서비스 클라이언트 생성

    Args:
        client_cls: ApiClient 서브클래스
        flags: GlobalFlags (명령 실행 시 client factory 시그니처와 동일)

    Raises:
        AuthError: 서비스 계정 토큰이 없는 경우
        ConfigError: 설정 파일 파싱 실패
    """
    config = load_cli_config()
    token = get_config_value("service_account_token", config, env=ENV_SERVICE_ACCOUNT_TOKEN)
    if not token:
        raise AuthError()

    endpoint = get_endpoint(client_cls.service, config)
    logger.debug("%s 클라이언트 생성: %s", client_cls.service, endpoint)
    return client_cls(endpoint, token, timeout=get_api_timeout())
