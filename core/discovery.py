"""
core/discovery.py - 서비스 자동 발견

services/ 아래의 서비스 패키지를 탐색하여 메타데이터를 검증하고 반환합니다.

서비스 패키지 규약 (services/<name>/__init__.py):
    SERVICE = {
        "name": "postgresflex",              # 필수, 명령 이름
        "display_name": "PostgreSQL Flex",   # 선택
        "description_key": "postgresflex.description",  # 필수, i18n 키
        "aliases": ["postgresql"],           # 선택, 숨김 명령으로 등록
    }
    CLIENT = PostgresFlexClient              # 필수, ApiClient 서브클래스
    COMMANDS = [CommandSpec, ...]            # 필수, 1개 이상

Usage:
    from core.discovery import discover_services

    for svc in discover_services():
        print(svc["name"], len(svc["commands"]))
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from typing import Any

from core.api.client import ApiClient
from core.exceptions import DiscoveryError, MetadataValidationError, ServiceLoadError
from core.pipeline.descriptor import CommandSpec

logger = logging.getLogger(__name__)

SERVICES_PACKAGE = "services"

REQUIRED_FIELDS = ("name", "description_key")


def validate_service(module_name: str, module: Any) -> dict[str, Any]:
    """서비스 모듈 메타데이터 검증

    Args:
        module_name: 모듈 이름 (에러 메시지용)
        module: 임포트된 서비스 모듈

    Returns:
        정규화된 서비스 정보 (name, display_name, description_key, aliases, client, commands)

    Raises:
        MetadataValidationError: 필수 메타데이터 누락 또는 형식 오류
    """
    errors: list[str] = []

    meta = getattr(module, "SERVICE", None)
    if not isinstance(meta, dict):
        raise MetadataValidationError(module_name, ["SERVICE dict missing"])

    for key in REQUIRED_FIELDS:
        if not meta.get(key):
            errors.append(f"SERVICE.{key} missing")

    client = getattr(module, "CLIENT", None)
    if not (isinstance(client, type) and issubclass(client, ApiClient)):
        errors.append("CLIENT must be an ApiClient subclass")

    commands = getattr(module, "COMMANDS", None)
    if not commands:
        errors.append("COMMANDS empty")
    elif not all(isinstance(cmd, CommandSpec) for cmd in commands):
        errors.append("COMMANDS must contain CommandSpec items")
    else:
        paths = [cmd.path for cmd in commands]
        if len(paths) != len(set(paths)):
            errors.append("duplicate command paths")

    if errors:
        raise MetadataValidationError(module_name, errors)

    return {
        "name": meta["name"],
        "display_name": meta.get("display_name", meta["name"]),
        "description_key": meta["description_key"],
        "aliases": list(meta.get("aliases", [])),
        "client": client,
        "commands": list(commands),
        "module": module_name,
    }


def load_service(module_name: str) -> dict[str, Any]:
    """서비스 모듈 로드 및 검증

    Raises:
        ServiceLoadError: 임포트 실패
        MetadataValidationError: 메타데이터 오류
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ServiceLoadError(module_name, str(e), cause=e) from e

    return validate_service(module_name, module)


def discover_services(package: str = SERVICES_PACKAGE) -> list[dict[str, Any]]:
    """서비스 패키지 탐색

    로드 또는 검증에 실패한 서비스는 경고 로그를 남기고 건너뜁니다.

    Args:
        package: 탐색할 최상위 패키지 이름

    Returns:
        이름순으로 정렬된 서비스 정보 목록
    """
    try:
        root = importlib.import_module(package)
    except ImportError as e:
        logger.warning("서비스 패키지 로드 실패 [%s]: %s", package, e)
        return []

    services: list[dict[str, Any]] = []
    seen: set[str] = set()

    for info in pkgutil.iter_modules(root.__path__):
        if not info.ispkg or info.name.startswith("_"):
            continue

        module_name = f"{package}.{info.name}"
        try:
            service = load_service(module_name)
        except DiscoveryError as e:
            logger.warning("%s", e)
            continue

        if service["name"] in seen:
            logger.warning("중복 서비스 이름 무시: %s (%s)", service["name"], module_name)
            continue

        seen.add(service["name"])
        services.append(service)

    return sorted(services, key=lambda s: s["name"])
