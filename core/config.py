"""
core/config.py - 중앙 설정 관리

애플리케이션 전역 설정과 사용자 설정 파일(~/.stackit/cli-config.json)을 관리합니다.

우선순위:
    명령줄 플래그 > 환경 변수 > 설정 파일 > 기본값

Usage:
    from core.config import settings, load_cli_config, get_endpoint

    timeout = settings.API_TIMEOUT
    config = load_cli_config()
    url = get_endpoint("mongodbflex", config)
    # "https://mongodb.api.eu01.stackit.cloud"
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# =============================================================================
# 환경 변수 이름
# =============================================================================

ENV_PROJECT_ID = "STACKIT_PROJECT_ID"
ENV_SERVICE_ACCOUNT_TOKEN = "STACKIT_SERVICE_ACCOUNT_TOKEN"
ENV_REGION = "STACKIT_REGION"
ENV_CONFIG_DIR = "STACKIT_CONFIG_DIR"
ENV_API_TIMEOUT = "STACKIT_API_TIMEOUT"

# 서비스별 기본 엔드포인트 ({region} 치환)
ENDPOINT_TEMPLATES: dict[str, str] = {
    "mongodbflex": "https://mongodb.api.{region}.stackit.cloud",
    "postgresflex": "https://postgres-flex-service.api.{region}.stackit.cloud",
    "opensearch": "https://opensearch.api.{region}.stackit.cloud",
    "resourcemanager": "https://resource-manager.api.stackit.cloud",
}

# 설정 파일에 저장 가능한 키
CONFIG_KEYS: tuple[str, ...] = (
    "project_id",
    "region",
    "output_format",
    "verbosity",
    "service_account_token",
    *(f"{service}_custom_endpoint" for service in ENDPOINT_TEMPLATES),
)

OUTPUT_FORMATS = ("table", "json")
VERBOSITY_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True)
class LogConfig:
    """로그 포맷 설정"""

    format: str = "%(message)s"
    datefmt: str = "[%X]"
    default_level: str = "warning"
    # 외부 라이브러리 로그 상한
    quiet_loggers: tuple[str, ...] = ("urllib3", "requests")


@dataclass(frozen=True)
class Settings:
    """애플리케이션 전역 설정 (불변)"""

    DEFAULT_REGION: str = "eu01"
    DEFAULT_OUTPUT_FORMAT: str = "table"
    API_TIMEOUT: int = 30
    CONFIG_DIR_NAME: str = ".stackit"
    CONFIG_FILE_NAME: str = "cli-config.json"
    USER_AGENT: str = "stackit-cli-python"
    LOG: LogConfig = field(default_factory=LogConfig)


settings = Settings()


# =============================================================================
# 프로젝트 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환

    version.txt 파일에서 버전을 읽고, 없으면 설치된 패키지 메타데이터를 사용합니다.
    """
    version_file = get_project_root() / "version.txt"
    if version_file.exists():
        return version_file.read_text(encoding="utf-8").strip()

    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("stackit-cli")
    except PackageNotFoundError:
        return "0.0.0"


# =============================================================================
# 환경 변수 헬퍼
# =============================================================================


def get_env_int(name: str, default: int) -> int:
    """환경 변수를 int로 읽기 (파싱 실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("%s 값이 정수가 아닙니다: %r", name, value)
        return default


def get_api_timeout() -> int:
    """HTTP 요청 타임아웃 (초)"""
    return get_env_int(ENV_API_TIMEOUT, settings.API_TIMEOUT)


# =============================================================================
# 사용자 설정 파일
# =============================================================================


def get_config_dir() -> Path:
    """설정 디렉토리 경로 (STACKIT_CONFIG_DIR로 재정의 가능)"""
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override)
    return Path.home() / settings.CONFIG_DIR_NAME


def get_config_path() -> Path:
    """설정 파일 경로"""
    return get_config_dir() / settings.CONFIG_FILE_NAME


def load_cli_config(path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드

    Args:
        path: 설정 파일 경로 (기본: get_config_path())

    Returns:
        설정 딕셔너리 (파일이 없으면 빈 딕셔너리)

    Raises:
        ConfigError: 파일이 올바른 JSON 객체가 아닌 경우
    """
    from cli.i18n import t

    path = path or get_config_path()
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError("file", t("common.config_invalid_json", path=path), cause=e) from e

    if not isinstance(data, dict):
        raise ConfigError("file", t("common.config_invalid_json", path=path))

    return data


def save_cli_config(data: dict[str, Any], path: Path | None = None) -> Path:
    """설정 파일 저장

    Returns:
        저장된 파일 경로
    """
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    # 토큰이 저장될 수 있으므로 소유자만 읽기
    os.chmod(path, 0o600)
    logger.debug("설정 저장: %s", path)
    return path


def _check_key(key: str) -> None:
    from cli.i18n import t

    if key not in CONFIG_KEYS:
        raise ConfigError(key, t("common.config_unknown_key"))


def set_config_value(key: str, value: Any, path: Path | None = None) -> dict[str, Any]:
    """설정 값 저장

    Raises:
        ConfigError: 알 수 없는 키
    """
    _check_key(key)
    data = load_cli_config(path)
    data[key] = value
    save_cli_config(data, path)
    return data


def unset_config_value(key: str, path: Path | None = None) -> bool:
    """설정 값 삭제

    Returns:
        실제로 삭제되었으면 True
    """
    _check_key(key)
    data = load_cli_config(path)
    if key not in data:
        return False
    del data[key]
    save_cli_config(data, path)
    return True


def get_config_value(
    key: str,
    config: dict[str, Any] | None = None,
    env: str | None = None,
    default: Any = None,
) -> Any:
    """설정 값 조회 (환경 변수 > 설정 파일 > 기본값)

    Args:
        key: 설정 키
        config: 이미 로드된 설정 (None이면 파일에서 로드)
        env: 우선 적용할 환경 변수 이름
        default: 기본값
    """
    if env:
        value = os.environ.get(env)
        if value:
            return value

    if config is None:
        config = load_cli_config()

    value = config.get(key)
    if value in (None, ""):
        return default
    return value


def get_endpoint(service: str, config: dict[str, Any] | None = None) -> str:
    """서비스 API 엔드포인트 반환

    `<service>_custom_endpoint` 설정이 있으면 그 값을, 없으면 리전 기반 기본값을 사용합니다.

    Raises:
        ConfigError: 알 수 없는 서비스
    """
    if config is None:
        config = load_cli_config()

    custom = config.get(f"{service}_custom_endpoint")
    if custom:
        return str(custom).rstrip("/")

    template = ENDPOINT_TEMPLATES.get(service)
    if template is None:
        raise ConfigError(f"{service}_custom_endpoint", "no endpoint known for this service")

    region = get_config_value("region", config, env=ENV_REGION, default=settings.DEFAULT_REGION)
    return template.format(region=region)
