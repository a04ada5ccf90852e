"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
서비스 discovery 시스템을 통해 서비스 명령을 자동 등록합니다.

주요 기능:
    - 전역 플래그 (--project-id, --output-format, --assume-yes, --verbosity, --lang)
    - 서비스별 명령어 자동 등록 (discovery 기반)
    - 서비스 별칭(aliases) 지원
    - CLI 설정 관리 (config set / unset / list)

명령어 구조:
    stackit --version
    stackit <service> <resource> <verb> [ARG] [options]
    stackit config set --project-id xxx

    예시:
    stackit mongodbflex user reset-password xxx --instance-id yyy
    stackit postgresflex user delete xxx --instance-id yyy -y
    stackit opensearch plans --limit 10 -o json

아키텍처:
    1. cli(): Click 그룹 - 전역 플래그를 GlobalFlags로 묶어 ctx.obj에 저장
    2. _register_service_commands(): discovery 기반 서비스 자동 등록
       - discover_services()로 services/ 패키지 검색
       - 각 서비스를 Click 그룹 트리로 등록 (cli.commands)
       - 별칭(aliases)은 hidden 그룹으로 등록
    3. run(): 종료 코드 처리 (Ctrl+C → 130)
"""

from __future__ import annotations

import logging
from typing import Any

import click
from click import Command, Context, HelpFormatter

from cli.i18n import DEFAULT_LANG, SUPPORTED_LANGS, set_lang, t
from cli.ui.console import configure_logging, print_error, print_info, print_success
from cli.ui.tables import Table
from core.config import (
    CONFIG_KEYS,
    OUTPUT_FORMATS,
    VERBOSITY_LEVELS,
    get_config_path,
    get_version,
    load_cli_config,
    set_config_value,
    unset_config_value,
)
from core.exceptions import ConfigError, FlagValidationError
from core.pipeline.output import to_json

logger = logging.getLogger(__name__)

VERSION = get_version()

# 유틸리티 명령어 목록 (서비스 명령어와 분리 표시용)
UTILITY_COMMANDS = {"config"}

# config set / unset 플래그 (키 → 옵션 이름)
CONFIG_FLAGS: dict[str, str] = {key: key.replace("_", "-") for key in CONFIG_KEYS}


class GroupedCommandsGroup(click.Group):
    """명령어를 서비스/유틸리티로 분리해서 표시하는 커스텀 Click 그룹"""

    def format_commands(self, ctx: Context, formatter: HelpFormatter) -> None:
        """명령어를 그룹화해서 표시"""
        commands: list[tuple[str, Command]] = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        utility_cmds: list[tuple[str, str]] = []
        service_cmds: list[tuple[str, str]] = []

        for name, cmd in commands:
            help_text: str = cmd.get_short_help_str(limit=formatter.width)
            if name in UTILITY_COMMANDS:
                utility_cmds.append((name, help_text))
            else:
                service_cmds.append((name, help_text))

        if service_cmds:
            with formatter.section(t("cli.section_services")):
                formatter.write_dl(service_cmds)

        if utility_cmds:
            with formatter.section(t("cli.section_utilities")):
                formatter.write_dl(utility_cmds)


@click.group(cls=GroupedCommandsGroup, invoke_without_command=True, help=t("cli.help_intro"))
@click.version_option(VERSION, prog_name="stackit")
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    default=None,
    help=t("cli.flag_lang"),
)
@click.option("-p", "--project-id", "project_id", default=None, help=t("cli.flag_project_id"))
@click.option(
    "-o",
    "--output-format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help=t("cli.flag_output_format"),
)
@click.option("-y", "--assume-yes", "assume_yes", is_flag=True, help=t("cli.flag_assume_yes"))
@click.option(
    "--verbosity",
    type=click.Choice(VERBOSITY_LEVELS, case_sensitive=False),
    default=None,
    help=t("cli.flag_verbosity"),
)
@click.pass_context
def cli(
    ctx: Context,
    lang: str | None,
    project_id: str | None,
    output_format: str | None,
    assume_yes: bool,
    verbosity: str | None,
) -> None:
    """STACKIT CLI"""
    from core.globalflags import parse_global_flags

    set_lang(lang or DEFAULT_LANG)

    try:
        flags = parse_global_flags(
            project_id=project_id,
            output_format=output_format,
            assume_yes=assume_yes,
            verbosity=verbosity,
            lang=lang,
        )
    except (ConfigError, FlagValidationError) as e:
        print_error(str(e))
        raise SystemExit(1) from e

    configure_logging(flags.verbosity)
    logger.debug("전역 플래그: %s", flags)

    ctx.ensure_object(dict)
    ctx.obj["flags"] = flags

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# =============================================================================
# config 명령어
# =============================================================================


def _config_option_help(key: str) -> str:
    if key == "region":
        return t("cli.flag_region")
    if key == "service_account_token":
        return t("cli.flag_token")
    if key.endswith("_custom_endpoint"):
        return t("cli.flag_custom_endpoint", service=key[: -len("_custom_endpoint")])
    return t(f"cli.flag_{key}")


def _mask(key: str, value: Any) -> str:
    """토큰 값 마스킹"""
    text = str(value)
    if key == "service_account_token" and text:
        return "****" + text[-4:] if len(text) > 8 else "****"
    return text


def _validate_config_value(key: str, value: str) -> str:
    if key == "output_format" and value.lower() not in OUTPUT_FORMATS:
        raise FlagValidationError("output-format", t("common.invalid_choice", choices=", ".join(OUTPUT_FORMATS)))
    if key == "verbosity" and value.lower() not in VERBOSITY_LEVELS:
        raise FlagValidationError("verbosity", t("common.invalid_choice", choices=", ".join(VERBOSITY_LEVELS)))
    if key in ("output_format", "verbosity"):
        return value.lower()
    return value


@cli.group("config", help=t("cli.config_help"))
def config_cmd() -> None:
    pass


def config_set(**values: str | None) -> None:
    """설정 값 저장

    \b
    Examples:
        stackit config set --project-id xxx
        stackit config set --region eu01 --output-format json
    """
    changes = {key: value for key, value in values.items() if value}
    if not changes:
        print_error(t("cli.config_nothing_given"))
        raise SystemExit(1)

    try:
        for key, value in changes.items():
            set_config_value(key, _validate_config_value(key, value))
    except (ConfigError, FlagValidationError) as e:
        print_error(str(e))
        raise SystemExit(1) from e

    print_success(t("cli.config_saved", keys=", ".join(sorted(changes))))


def config_unset(**flags: bool) -> None:
    """설정 값 삭제

    \b
    Examples:
        stackit config unset --project-id
    """
    keys = [key for key, selected in flags.items() if selected]
    if not keys:
        print_error(t("cli.config_nothing_given"))
        raise SystemExit(1)

    try:
        removed = [key for key in keys if unset_config_value(key)]
    except ConfigError as e:
        print_error(str(e))
        raise SystemExit(1) from e

    if removed:
        print_success(t("cli.config_removed", keys=", ".join(sorted(removed))))
    else:
        print_info(t("cli.config_removed", keys="-"))


@config_cmd.command("list", help=t("cli.config_list_help"))
@click.pass_context
def config_list(ctx: Context) -> None:
    """현재 설정 목록"""
    from cli.commands import get_global_flags
    from cli.ui.console import ConsolePrinter
    from core.globalflags import OutputFormat

    flags = get_global_flags(ctx)
    printer = ConsolePrinter()

    try:
        data = load_cli_config()
    except ConfigError as e:
        print_error(str(e))
        raise SystemExit(1) from e

    masked = {key: _mask(key, value) for key, value in data.items()}

    if flags.output_format is OutputFormat.JSON:
        printer.echo(to_json(masked))
        return

    if not masked:
        printer.echo(t("cli.config_empty", path=get_config_path()))
        return

    table = Table()
    table.set_header(t("cli.col_key"), t("cli.col_value"))
    for key in sorted(masked):
        table.add_row(key, masked[key])
    table.display(printer)


def _register_config_commands() -> None:
    """config set / unset 명령 등록 (설정 키마다 옵션 1개)"""
    set_params = [
        click.Option([f"--{flag}", key], default=None, help=_config_option_help(key)) for key, flag in CONFIG_FLAGS.items()
    ]
    unset_params = [
        click.Option([f"--{flag}", key], is_flag=True, help=t("cli.flag_unset", key=key)) for key, flag in CONFIG_FLAGS.items()
    ]

    config_cmd.add_command(
        click.Command("set", callback=config_set, params=set_params, help=t("cli.config_set_help"))
    )
    config_cmd.add_command(
        click.Command("unset", callback=config_unset, params=unset_params, help=t("cli.config_unset_help"))
    )


_register_config_commands()


# =============================================================================
# 서비스 명령어
# =============================================================================


def _register_service_commands() -> None:
    """discovery 기반 서비스 명령어 자동 등록 (별칭 포함)"""
    from cli.commands import build_service_group
    from core.discovery import discover_services

    services = discover_services()

    # 등록된 명령어 추적 (중복 방지)
    registered_commands: set[str] = set(cli.commands)

    for service in services:
        name: str = service["name"]
        if name in registered_commands:
            logger.warning("명령어 이름 충돌로 서비스 등록 생략: %s", name)
            continue

        cli.add_command(build_service_group(service))
        registered_commands.add(name)

        for alias in service["aliases"]:
            if alias in registered_commands:
                continue
            cli.add_command(build_service_group(service, name=alias, hidden=True))
            registered_commands.add(alias)


# 서비스 명령어 자동 등록
_register_service_commands()


# =============================================================================
# 실행
# =============================================================================


def run(args: list[str] | None = None) -> int:
    """CLI 실행 후 종료 코드 반환

    Returns:
        0: 성공 / 취소, 1: 오류, 2: 사용법 오류, 130: 중단 (Ctrl+C)
    """
    try:
        rv = cli.main(args=args, prog_name="stackit", standalone_mode=False)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except (click.Abort, KeyboardInterrupt):
        print_info(t("common.interrupted"))
        return 130

    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(run())
