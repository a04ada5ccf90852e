"""
core/globalflags.py - 전역 플래그 모델

모든 명령이 공유하는 전역 플래그(프로젝트 ID, 출력 형식, 확인 생략, 로그 레벨, 언어)를
하나의 불변 구조로 묶어 파이프라인에 명시적으로 전달합니다.

Usage:
    from core.globalflags import GlobalFlags, parse_global_flags

    flags = parse_global_flags(project_id=None, output_format="json")
    flags.output_format  # OutputFormat.JSON
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from cli.i18n import DEFAULT_LANG
from core.config import (
    ENV_PROJECT_ID,
    OUTPUT_FORMATS,
    VERBOSITY_LEVELS,
    get_config_value,
    load_cli_config,
    settings,
)
from core.exceptions import FlagValidationError


class OutputFormat(str, Enum):
    """출력 형식"""

    TABLE = "table"
    JSON = "json"

    @classmethod
    def parse(cls, value: str | None) -> "OutputFormat":
        """문자열에서 OutputFormat 생성

        Raises:
            FlagValidationError: 지원하지 않는 형식
        """
        from cli.i18n import t

        if value is None or value == "":
            return cls(settings.DEFAULT_OUTPUT_FORMAT)
        try:
            return cls(value.lower())
        except ValueError as e:
            raise FlagValidationError(
                "output-format", t("common.invalid_choice", choices=", ".join(OUTPUT_FORMATS)), cause=e
            ) from e


@dataclass(frozen=True)
class GlobalFlags:
    """전역 플래그

    Attributes:
        project_id: 프로젝트 ID (없으면 빈 문자열)
        output_format: 출력 형식
        assume_yes: 확인 프롬프트 생략 여부
        verbosity: 로그 레벨 이름
        lang: UI 언어
    """

    project_id: str = ""
    output_format: OutputFormat = OutputFormat.TABLE
    assume_yes: bool = False
    verbosity: str = settings.LOG.default_level
    lang: str = DEFAULT_LANG

    def override(
        self,
        project_id: str | None = None,
        output_format: str | None = None,
        assume_yes: bool = False,
    ) -> "GlobalFlags":
        """명령 단위로 지정된 플래그를 덮어쓴 복사본 반환

        명령 뒤에 위치한 전역 플래그(`... delete xxx --assume-yes`)를 반영할 때 사용합니다.
        """
        changes: dict[str, Any] = {}
        if project_id:
            changes["project_id"] = project_id
        if output_format:
            changes["output_format"] = OutputFormat.parse(output_format)
        if assume_yes:
            changes["assume_yes"] = True
        return replace(self, **changes) if changes else self


def parse_global_flags(
    project_id: str | None = None,
    output_format: str | None = None,
    assume_yes: bool = False,
    verbosity: str | None = None,
    lang: str | None = None,
    config: dict[str, Any] | None = None,
) -> GlobalFlags:
    """명령줄 값, 환경 변수, 설정 파일을 합쳐 GlobalFlags 생성

    Args:
        project_id: --project-id 값
        output_format: --output-format 값
        assume_yes: --assume-yes 여부
        verbosity: --verbosity 값
        lang: --lang 값
        config: 이미 로드된 설정 (None이면 파일에서 로드)

    Raises:
        ConfigError: 설정 파일 파싱 실패
        FlagValidationError: 잘못된 출력 형식 또는 로그 레벨
    """
    from cli.i18n import t

    if config is None:
        config = load_cli_config()

    resolved_project = project_id or get_config_value("project_id", config, env=ENV_PROJECT_ID, default="")
    resolved_format = output_format or get_config_value("output_format", config)
    resolved_verbosity = (
        verbosity or get_config_value("verbosity", config, default=settings.LOG.default_level)
    ).lower()

    if resolved_verbosity not in VERBOSITY_LEVELS:
        raise FlagValidationError("verbosity", t("common.invalid_choice", choices=", ".join(VERBOSITY_LEVELS)))

    return GlobalFlags(
        project_id=str(resolved_project).strip(),
        output_format=OutputFormat.parse(resolved_format),
        assume_yes=assume_yes,
        verbosity=resolved_verbosity,
        lang=lang or DEFAULT_LANG,
    )
