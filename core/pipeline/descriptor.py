"""
core/pipeline/descriptor.py - 명령 디스크립터

각 명령은 실행 로직을 직접 작성하지 않고, 파이프라인이 실행할
선언적 디스크립터(CommandSpec)로 정의됩니다.

Usage:
    CommandSpec(
        path=("user", "delete"),
        operation="delete PostgreSQL Flex user",
        help_key="postgresflex.user_delete_help",
        arg=ArgSpec("USER_ID", role="user"),
        flags=(INSTANCE_ID_FLAG,),
        labels=(LabelSpec("instance", instance_name), LabelSpec("user", user_name)),
        destructive=True,
        confirm_key="postgresflex.confirm_delete_user",
        call=delete_user,
        render=MessageView("postgresflex.user_deleted"),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.pipeline.types import CommandInput

# (client, input) -> 이름
LabelLookup = Callable[[Any, CommandInput], Optional[str]]
# (client, input) -> RemoteResult
RemoteCall = Callable[[Any, CommandInput], Any]
# 검증 실패 시 ValueError
Validator = Callable[[str], None]


@dataclass(frozen=True)
class ArgSpec:
    """위치 인자 (예: USER_ID)"""

    name: str
    role: str
    validator: Optional[Validator] = None


@dataclass(frozen=True)
class FlagSpec:
    """리소스 ID 플래그 (예: --instance-id)"""

    name: str
    role: str
    help_key: str
    required: bool = False
    validator: Optional[Validator] = None


@dataclass(frozen=True)
class LabelSpec:
    """라벨 조회 정의

    Attributes:
        role: 라벨 역할 ("project", "instance", "user" 등)
        lookup: 이름 조회 함수
        lazy: True면 출력 단계에서 필요할 때만 조회 (빈 목록 메시지의 범위 라벨 등)
    """

    role: str
    lookup: LabelLookup
    lazy: bool = False


@dataclass(frozen=True)
class Example:
    """도움말 예시"""

    description_key: str
    command: str


@dataclass(frozen=True)
class CommandSpec:
    """명령 디스크립터

    Attributes:
        path: 서비스 아래 명령 경로 (예: ("user", "reset-password"))
        operation: 원격 호출 실패 시 에러 접두어 (예: "reset MongoDB Flex user password")
        help_key: 도움말 메시지 키
        call: 원격 호출 (정확히 1회 실행)
        render: 출력 전략 (core.pipeline.output)
        arg: 위치 인자
        flags: 리소스 ID 플래그
        labels: 라벨 조회 정의
        destructive: 확인 프롬프트 필요 여부
        confirm_key: 확인 메시지 키 (라벨 역할을 placeholder로 사용)
        supports_limit: --limit 지원 여부
        examples: 도움말 예시
    """

    path: tuple[str, ...]
    operation: str
    help_key: str
    call: RemoteCall
    render: Callable[..., None]
    arg: Optional[ArgSpec] = None
    flags: tuple[FlagSpec, ...] = ()
    labels: tuple[LabelSpec, ...] = ()
    destructive: bool = False
    confirm_key: Optional[str] = None
    supports_limit: bool = False
    examples: tuple[Example, ...] = ()

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("CommandSpec.path must not be empty")
        if self.destructive and not self.confirm_key:
            raise ValueError(f"destructive command {self.name!r} needs a confirm_key")

    @property
    def name(self) -> str:
        """명령 이름 (경로의 마지막 요소)"""
        return self.path[-1]

    def label_spec(self, role: str) -> Optional[LabelSpec]:
        """역할에 해당하는 라벨 정의"""
        for spec in self.labels:
            if spec.role == role:
                return spec
        return None
