"""
tests/conftest.py - pytest 공통 픽스처

설정/환경 변수 격리, 출력 캡처용 printer, 가짜 서비스 클라이언트를 제공합니다.

Usage:
    def test_something(printer, make_executor):
        executor = make_executor(spec, client=fake_client)
        assert executor.run(("xxx",), {"instance-id": INSTANCE_ID}) == 0
        assert "Deleted" in printer.output
"""

import io
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


PROJECT_ID = "11111111-1111-1111-1111-111111111111"
INSTANCE_ID = "22222222-2222-2222-2222-222222222222"
USER_ID = "33333333-3333-3333-3333-333333333333"

ENV_VARS = (
    "STACKIT_PROJECT_ID",
    "STACKIT_SERVICE_ACCOUNT_TOKEN",
    "STACKIT_REGION",
    "STACKIT_API_TIMEOUT",
)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(tmp_path, monkeypatch):
    """테스트 환경 설정

    - 설정 디렉토리를 임시 경로로 격리
    - STACKIT_* 환경 변수 제거
    - 언어 / 로그 레벨 초기화
    """
    from cli.i18n import DEFAULT_LANG, set_lang

    config_dir = tmp_path / "stackit-config"
    monkeypatch.setenv("STACKIT_CONFIG_DIR", str(config_dir))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    set_lang(DEFAULT_LANG)

    yield config_dir

    set_lang(DEFAULT_LANG)
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def config_dir(setup_test_environment) -> Path:
    """격리된 설정 디렉토리"""
    return setup_test_environment


# =============================================================================
# 출력 캡처
# =============================================================================


class CapturePrinter:
    """StringIO 기반 ConsolePrinter

    output: stdout (결과), errors: stderr (진단 메시지)
    """

    def __init__(self):
        from cli.ui.console import ConsolePrinter

        self._out = io.StringIO()
        self._err = io.StringIO()
        self._printer = ConsolePrinter(
            out=Console(file=self._out, width=200, color_system=None, soft_wrap=True),
            err=Console(file=self._err, width=200, color_system=None, soft_wrap=True),
        )

    def echo(self, text: str = "") -> None:
        self._printer.echo(text)

    def print_table(self, table) -> None:
        self._printer.print_table(table)

    def info(self, message: str) -> None:
        self._printer.info(message)

    def error(self, message: str) -> None:
        self._printer.error(message)

    @property
    def output(self) -> str:
        return self._out.getvalue()

    @property
    def errors(self) -> str:
        return self._err.getvalue()

    @property
    def lines(self) -> List[str]:
        return [line for line in self.output.splitlines() if line.strip()]


@pytest.fixture
def printer() -> CapturePrinter:
    """출력 캡처용 printer"""
    return CapturePrinter()


# =============================================================================
# 파이프라인 픽스처
# =============================================================================


@pytest.fixture
def flags():
    """기본 전역 플래그 (프로젝트 ID 설정됨)"""
    from core.globalflags import GlobalFlags

    return GlobalFlags(project_id=PROJECT_ID)


@pytest.fixture
def fake_client() -> MagicMock:
    """서비스 클라이언트 모킹

    기본적으로 라벨 조회는 이름을 반환합니다.
    """
    client = MagicMock()
    client.get_instance.return_value = {"id": INSTANCE_ID, "name": "my-instance"}
    client.get_user.return_value = {"id": USER_ID, "username": "alice"}
    return client


class FakePrompt:
    """확인 프롬프트 모킹 (응답 고정, 호출 기록)"""

    def __init__(self, answer: bool = True, error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.messages: List[str] = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def make_executor(flags, fake_client, printer) -> Callable[..., Any]:
    """CommandExecutor 생성 헬퍼"""
    from core.pipeline.executor import CommandExecutor

    def _make(
        spec,
        flags=flags,
        client: Any = fake_client,
        prompt: Optional[Callable[[str], bool]] = None,
        client_factory: Optional[Callable[..., Any]] = None,
    ):
        return CommandExecutor(
            spec,
            flags,
            client_factory=client_factory or (lambda _flags: client),
            prompt=prompt or FakePrompt(),
            printer=printer,
        )

    return _make


# =============================================================================
# HTTP 모킹
# =============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Any = None,
    reason: str = "OK",
    content: Optional[bytes] = None,
) -> MagicMock:
    """requests.Response 모킹 헬퍼"""
    import json

    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = reason
    if content is None:
        content = b"" if json_data is None else json.dumps(json_data).encode()
    response.content = content
    if json_data is None:
        response.json.side_effect = ValueError("no JSON")
    else:
        response.json.return_value = json_data
    response.request.method = "GET"
    response.request.url = "https://example.invalid/path"
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    """requests.Session 모킹 (headers는 실제 dict)"""
    session = MagicMock()
    session.headers = {}
    return session


def session_returning(session: MagicMock, responses: Dict[str, Any]) -> MagicMock:
    """경로 접미사 → JSON 응답 매핑으로 session.request 구성"""

    def _request(method, url, **kwargs):
        for suffix, data in responses.items():
            if url.endswith(suffix):
                return create_mock_response(json_data=data)
        return create_mock_response(status_code=404, json_data={"message": "not found"}, reason="Not Found")

    session.request.side_effect = _request
    return session
