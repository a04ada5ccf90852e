"""
services/flex.py - Flex 데이터베이스 서비스 공통 정의

MongoDB Flex와 PostgreSQL Flex는 같은 리소스 구조(프로젝트 → 인스턴스 → 사용자)를
가지므로 클라이언트 경로와 명령 디스크립터를 공유합니다.

서비스별 차이:
    - 사용자 ID 검증 여부 (MongoDB Flex만 UUID 검증)
    - describe 출력 필드
    - reset-password 응답 형태 (클라이언트에서 정규화)
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from core.api import ApiClient, lookup_project_name
from core.pipeline.descriptor import ArgSpec, CommandSpec, Example, FlagSpec, LabelSpec
from core.pipeline.output import DetailView, MessageView, TableView, fields_row
from core.pipeline.types import CommandInput
from core.pipeline.validation import validate_uuid


class FlexClient(ApiClient):
    """Flex 서비스 공통 REST 클라이언트

    응답 형태:
        목록  {"items": [...]}
        단건  {"item": {...}}
    """

    def _instances_path(self, project_id: str) -> str:
        return f"/v1/projects/{project_id}/instances"

    def _users_path(self, project_id: str, instance_id: str) -> str:
        return f"{self._instances_path(project_id)}/{instance_id}/users"

    def list_instances(self, project_id: str) -> list[dict[str, Any]]:
        """인스턴스 목록"""
        data = self.get(self._instances_path(project_id)) or {}
        return data.get("items") or []

    def get_instance(self, project_id: str, instance_id: str) -> dict[str, Any]:
        """인스턴스 상세"""
        data = self.get(f"{self._instances_path(project_id)}/{instance_id}") or {}
        return data.get("item") or {}

    def list_users(self, project_id: str, instance_id: str) -> list[dict[str, Any]]:
        """사용자 목록"""
        data = self.get(self._users_path(project_id, instance_id)) or {}
        return data.get("items") or []

    def get_user(self, project_id: str, instance_id: str, user_id: str) -> dict[str, Any]:
        """사용자 상세 (비밀번호 미포함)"""
        data = self.get(f"{self._users_path(project_id, instance_id)}/{user_id}") or {}
        return data.get("item") or {}

    def delete_user(self, project_id: str, instance_id: str, user_id: str) -> None:
        """사용자 삭제"""
        self.delete(f"{self._users_path(project_id, instance_id)}/{user_id}")

    def reset_user_password(self, project_id: str, instance_id: str, user_id: str) -> dict[str, Any]:
        """비밀번호 재설정

        Returns:
            username, password, uri를 포함한 사용자 정보
        """
        return self.post(f"{self._users_path(project_id, instance_id)}/{user_id}/reset") or {}


# =============================================================================
# 라벨 조회
# =============================================================================


def instance_name(client: FlexClient, inp: CommandInput) -> Optional[str]:
    return client.get_instance(inp.project_id, inp["instance"]).get("name")


def user_name(client: FlexClient, inp: CommandInput) -> Optional[str]:
    return client.get_user(inp.project_id, inp["instance"], inp["user"]).get("username")


# =============================================================================
# 명령 디스크립터 생성
# =============================================================================


def build_flex_commands(
    service: str,
    display_name: str,
    user_validator: Optional[Callable[[str], None]],
    describe_fields: tuple[tuple[str, str], ...],
) -> list[CommandSpec]:
    """Flex 서비스 명령 디스크립터 목록 생성

    Args:
        service: 서비스 이름 (메시지 네임스페이스, 명령 이름)
        display_name: 에러 접두어에 쓰이는 표시 이름 (예: "PostgreSQL Flex")
        user_validator: USER_ID 검증 함수 (None이면 검증 안 함)
        describe_fields: user describe 출력 필드

    Returns:
        instance list, user list/describe/delete/reset-password 디스크립터
    """
    instance_flag = FlagSpec(
        "instance-id",
        role="instance",
        help_key="cli.flag_instance_id",
        required=True,
        validator=validate_uuid,
    )
    user_arg = ArgSpec("USER_ID", role="user", validator=user_validator)
    prog = f"stackit {service}"

    return [
        CommandSpec(
            path=("instance", "list"),
            operation=f"get {display_name} instances",
            help_key=f"{service}.instance_list_help",
            supports_limit=True,
            labels=(LabelSpec("project", lookup_project_name, lazy=True),),
            call=lambda client, inp: client.list_instances(inp.project_id),
            render=TableView(
                headers=("ID", "NAME", "STATUS"),
                rows=fields_row("id", "name", "status"),
                empty_key=f"{service}.no_instances",
            ),
            examples=(
                Example(f"{service}.example_instance_list", f"$ {prog} instance list"),
            ),
        ),
        CommandSpec(
            path=("user", "list"),
            operation=f"get {display_name} users",
            help_key=f"{service}.user_list_help",
            flags=(instance_flag,),
            supports_limit=True,
            labels=(LabelSpec("instance", instance_name, lazy=True),),
            call=lambda client, inp: client.list_users(inp.project_id, inp["instance"]),
            render=TableView(
                headers=("ID", "USERNAME"),
                rows=fields_row("id", "username"),
                empty_key=f"{service}.no_users",
                scope_role="instance",
            ),
            examples=(
                Example(f"{service}.example_user_list", f"$ {prog} user list --instance-id xxx"),
            ),
        ),
        CommandSpec(
            path=("user", "describe"),
            operation=f"get {display_name} user",
            help_key=f"{service}.user_describe_help",
            arg=user_arg,
            flags=(instance_flag,),
            call=lambda client, inp: client.get_user(inp.project_id, inp["instance"], inp["user"]),
            render=DetailView(describe_fields),
            examples=(
                Example(f"{service}.example_user_describe", f"$ {prog} user describe xxx --instance-id yyy"),
            ),
        ),
        CommandSpec(
            path=("user", "delete"),
            operation=f"delete {display_name} user",
            help_key=f"{service}.user_delete_help",
            arg=user_arg,
            flags=(instance_flag,),
            labels=(LabelSpec("instance", instance_name), LabelSpec("user", user_name)),
            destructive=True,
            confirm_key=f"{service}.confirm_delete_user",
            call=lambda client, inp: client.delete_user(inp.project_id, inp["instance"], inp["user"]),
            render=MessageView(f"{service}.user_deleted"),
            examples=(
                Example(f"{service}.example_user_delete", f"$ {prog} user delete xxx --instance-id yyy"),
            ),
        ),
        CommandSpec(
            path=("user", "reset-password"),
            operation=f"reset {display_name} user password",
            help_key=f"{service}.user_reset_password_help",
            arg=user_arg,
            flags=(instance_flag,),
            labels=(LabelSpec("instance", instance_name), LabelSpec("user", user_name)),
            destructive=True,
            confirm_key=f"{service}.confirm_reset_password",
            call=lambda client, inp: client.reset_user_password(inp.project_id, inp["instance"], inp["user"]),
            render=MessageView(
                f"{service}.password_reset",
                fields=(
                    ("common.username", "username"),
                    ("common.new_password", "password"),
                    ("common.new_uri", "uri"),
                ),
            ),
            examples=(
                Example(
                    f"{service}.example_user_reset_password",
                    f"$ {prog} user reset-password xxx --instance-id yyy",
                ),
            ),
        ),
    ]
