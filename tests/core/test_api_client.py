"""
tests/core/test_api_client.py - core/api 테스트

HTTP는 requests.Session 모킹으로 대체합니다.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests
from conftest import PROJECT_ID, create_mock_response

from core.api.client import ApiClient, configure_client
from core.api.resourcemanager import ResourceManagerClient, lookup_project_name
from core.exceptions import ApiError, AuthError
from core.globalflags import GlobalFlags
from core.pipeline.types import CommandInput


class DummyClient(ApiClient):
    service = "opensearch"


class TestApiClient:
    """요청 / 응답 처리"""

    def test_headers(self, mock_session):
        DummyClient("https://api.example/", "tok", session=mock_session)

        assert mock_session.headers["Authorization"] == "Bearer tok"
        assert mock_session.headers["Accept"] == "application/json"
        assert mock_session.headers["User-Agent"].startswith("stackit-cli-python/")

    def test_get_json(self, mock_session):
        mock_session.request.return_value = create_mock_response(json_data={"items": [1]})
        client = DummyClient("https://api.example/", "tok", timeout=7, session=mock_session)

        assert client.get("/v1/things", params={"a": 1}) == {"items": [1]}
        mock_session.request.assert_called_once_with(
            "GET", "https://api.example/v1/things", params={"a": 1}, json=None, timeout=7
        )

    def test_no_content(self, mock_session):
        mock_session.request.return_value = create_mock_response(status_code=204)
        client = DummyClient("https://api.example", "tok", session=mock_session)

        assert client.delete("/v1/things/1") is None

    def test_http_error(self, mock_session):
        mock_session.request.return_value = create_mock_response(
            status_code=404, json_data={"message": "user not found"}, reason="Not Found"
        )
        client = DummyClient("https://api.example", "tok", session=mock_session)

        with pytest.raises(ApiError) as exc_info:
            client.get("/v1/users/x")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "user not found"

    def test_network_error(self, mock_session):
        mock_session.request.side_effect = requests.ConnectionError("refused")
        client = DummyClient("https://api.example", "tok", session=mock_session)

        with pytest.raises(ApiError) as exc_info:
            client.post("/v1/reset")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_invalid_json(self, mock_session):
        response = create_mock_response(content=b"<html>")
        mock_session.request.return_value = response
        client = DummyClient("https://api.example", "tok", session=mock_session)

        with pytest.raises(ApiError, match="invalid JSON"):
            client.get("/v1/things")

    def test_single_request_no_retry(self, mock_session):
        """실패해도 재시도 없음"""
        mock_session.request.return_value = create_mock_response(status_code=503, reason="Unavailable")
        client = DummyClient("https://api.example", "tok", session=mock_session)

        with pytest.raises(ApiError):
            client.get("/v1/things")

        assert mock_session.request.call_count == 1


class TestConfigureClient:
    """설정 기반 클라이언트 생성"""

    def test_missing_token(self):
        with pytest.raises(AuthError):
            configure_client(DummyClient)

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("STACKIT_SERVICE_ACCOUNT_TOKEN", "env-token")
        monkeypatch.setenv("STACKIT_REGION", "eu02")

        with patch("core.api.client.requests.Session") as session_cls:
            session_cls.return_value.headers = {}
            client = configure_client(DummyClient)

        assert client.base_url == "https://opensearch.api.eu02.stackit.cloud"
        assert session_cls.return_value.headers["Authorization"] == "Bearer env-token"

    def test_token_and_endpoint_from_file(self):
        from core.config import save_cli_config

        save_cli_config(
            {
                "service_account_token": "file-token",
                "opensearch_custom_endpoint": "http://localhost:9000",
            }
        )

        client = configure_client(DummyClient, GlobalFlags())

        assert client.base_url == "http://localhost:9000"
        assert client.timeout == 30


class TestResourceManager:
    """프로젝트 이름 조회"""

    def test_get_project_name(self, mock_session):
        mock_session.request.return_value = create_mock_response(json_data={"name": "My Project"})
        client = ResourceManagerClient("https://rm.example", "tok", session=mock_session)

        assert client.get_project_name(PROJECT_ID) == "My Project"
        assert mock_session.request.call_args[0][1] == f"https://rm.example/v2/projects/{PROJECT_ID}"

    def test_lookup_project_name(self):
        rm_client = MagicMock()
        rm_client.get_project_name.return_value = "My Project"
        inp = CommandInput(project_id=PROJECT_ID)

        with patch("core.api.resourcemanager.configure_client", return_value=rm_client) as factory:
            assert lookup_project_name(object(), inp) == "My Project"

        factory.assert_called_once_with(ResourceManagerClient, inp.flags)
        rm_client.get_project_name.assert_called_once_with(PROJECT_ID)
