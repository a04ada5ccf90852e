"""
cli/commands.py - 명령 디스크립터 → Click 명령 변환

서비스 메타데이터(core.discovery)를 Click 그룹 트리로 만듭니다.

    stackit <service> <resource> <verb> [ARG] [--instance-id ID] [--limit N]

각 리프 명령은 전역 플래그 일부(-p, -o, -y)를 다시 받아,
명령 뒤에 붙은 전역 플래그도 인식합니다. (리프 값이 우선)
"""

from __future__ import annotations

from functools import partial
from typing import Any

import click
from click import Context

from cli.i18n import t
from cli.ui.confirm import prompt_for_confirmation
from cli.ui.console import ConsolePrinter, print_error
from core.api.client import configure_client
from core.config import OUTPUT_FORMATS
from core.exceptions import ConfigError, FlagValidationError
from core.globalflags import GlobalFlags, parse_global_flags
from core.pipeline.descriptor import CommandSpec
from core.pipeline.executor import CommandExecutor
from core.pipeline.validation import LIMIT_FLAG


def _param_name(flag_name: str) -> str:
    return flag_name.replace("-", "_")


def get_global_flags(ctx: Context) -> GlobalFlags:
    """루트 그룹이 저장한 전역 플래그 (없으면 환경/설정에서 생성)"""
    root = ctx.find_root()
    if isinstance(root.obj, dict) and isinstance(root.obj.get("flags"), GlobalFlags):
        return root.obj["flags"]

    try:
        flags = parse_global_flags()
    except (ConfigError, FlagValidationError) as e:
        print_error(str(e))
        raise SystemExit(1) from e

    root.ensure_object(dict)
    root.obj["flags"] = flags
    return flags


def build_help(spec: CommandSpec) -> str:
    """도움말 텍스트 (설명 + 예시)"""
    lines = [t(spec.help_key)]
    if spec.examples:
        lines += ["", "\b", t("common.examples")]
        for example in spec.examples:
            lines.append(f"  {t(example.description_key)}")
            lines.append(f"    {example.command}")
    return "\n".join(lines)


def build_command(spec: CommandSpec, client_cls: type) -> click.Command:
    """CommandSpec 하나를 Click 명령으로 변환

    Args:
        spec: 명령 디스크립터
        client_cls: 서비스 ApiClient 서브클래스

    Returns:
        실행 시 CommandExecutor를 돌리고 종료 코드로 SystemExit하는 명령
    """
    params: list[click.Parameter] = []

    if spec.arg is not None:
        # 누락은 파이프라인 검증에서 처리 (종료 코드 1)
        params.append(click.Argument(["arg_value"], metavar=spec.arg.name, required=False))

    for flag in spec.flags:
        params.append(click.Option([f"--{flag.name}", _param_name(flag.name)], help=t(flag.help_key)))

    if spec.supports_limit:
        params.append(click.Option([f"--{LIMIT_FLAG}", LIMIT_FLAG], default=None, help=t("cli.flag_limit")))

    params += [
        click.Option(["-p", "--project-id", "project_id"], default=None, help=t("cli.flag_project_id")),
        click.Option(
            ["-o", "--output-format", "output_format"],
            type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
            default=None,
            help=t("cli.flag_output_format"),
        ),
        click.Option(["-y", "--assume-yes", "assume_yes"], is_flag=True, help=t("cli.flag_assume_yes")),
    ]

    @click.pass_context
    def callback(ctx: Context, **kwargs: Any) -> None:
        flags = get_global_flags(ctx).override(
            project_id=kwargs.pop("project_id"),
            output_format=kwargs.pop("output_format"),
            assume_yes=kwargs.pop("assume_yes"),
        )

        raw_args = (kwargs.pop("arg_value", None),) if spec.arg is not None else ()
        raw_flags = {flag.name: kwargs.get(_param_name(flag.name)) for flag in spec.flags}
        if spec.supports_limit:
            raw_flags[LIMIT_FLAG] = kwargs.get(LIMIT_FLAG)

        executor = CommandExecutor(
            spec,
            flags,
            client_factory=partial(configure_client, client_cls),
            prompt=prompt_for_confirmation,
            printer=ConsolePrinter(),
        )
        raise SystemExit(executor.run(raw_args, raw_flags))

    return click.Command(
        name=spec.name,
        callback=callback,
        params=params,
        help=build_help(spec),
        short_help=t(spec.help_key),
    )


def build_service_group(service: dict[str, Any], name: str | None = None, hidden: bool = False) -> click.Group:
    """서비스 하나의 Click 그룹 트리 생성

    명령 경로의 중간 요소(instance, user)는 하위 그룹이 됩니다.

    Args:
        service: discover_services() 항목
        name: 그룹 이름 (별칭 등록 시 사용, 기본: 서비스 이름)
        hidden: 도움말에서 숨김 여부
    """
    display_name = service.get("display_name", service["name"])
    group = click.Group(
        name=name or service["name"],
        help=t(service["description_key"]),
        hidden=hidden,
    )

    for spec in service["commands"]:
        parent = group
        for part in spec.path[:-1]:
            sub = parent.commands.get(part)
            if not isinstance(sub, click.Group):
                sub = click.Group(
                    name=part,
                    help=t("cli.resource_group_help", service=display_name, resource=part),
                )
                parent.add_command(sub)
            parent = sub
        parent.add_command(build_command(spec, service["client"]))

    return group
