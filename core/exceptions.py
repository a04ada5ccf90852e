"""
core/exceptions.py - 통합 예외 계층 구조

CLI 전체에서 사용되는 예외 클래스들을 정의합니다.
명령 파이프라인은 이 계층을 기준으로 종료 코드와 에러 메시지를 결정합니다.

예외 계층 구조:
    CLIError (베이스)
    ├── ValidationError (입력 검증) - API 호출 전에 발생
    │   ├── ProjectIdError
    │   ├── RequiredFlagError
    │   ├── FlagValidationError
    │   └── ArgValidationError
    ├── AuthError (인증 정보 없음)
    ├── ConfigError (설정 파일 관련)
    ├── DiscoveryError (서비스 발견)
    │   ├── ServiceLoadError
    │   └── MetadataValidationError
    ├── PromptError (확인 프롬프트 입력 실패)
    ├── ApiError (HTTP 레벨 실패)
    └── RemoteError (파이프라인의 원격 호출 실패 래퍼)

Usage:
    from core.exceptions import ApiError, RemoteError

    try:
        user = client.reset_user_password(project_id, instance_id, user_id)
    except ApiError as e:
        raise RemoteError("reset MongoDB Flex user password", cause=e) from e
"""

from typing import Any, Dict, Optional

from cli.i18n import t

# =============================================================================
# 베이스 예외
# =============================================================================


class CLIError(Exception):
    """CLI 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 입력 검증 관련 예외
# =============================================================================


class ValidationError(CLIError):
    """입력 검증 오류

    원격 호출 전에 발생하며, 문제가 된 필드 이름을 `field`에 담습니다.
    """

    def __init__(self, field: str, message: str, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.field = field
        self.details["field"] = field


class ProjectIdError(ValidationError):
    """프로젝트 ID가 설정되지 않은 경우"""

    def __init__(self) -> None:
        super().__init__("project-id", t("common.project_id_missing"))


class RequiredFlagError(ValidationError):
    """필수 플래그 누락"""

    def __init__(self, flag: str):
        super().__init__(flag, t("common.required_flag_missing", flag=flag))
        self.flag = flag


class FlagValidationError(ValidationError):
    """플래그 값 검증 실패"""

    def __init__(self, flag: str, details: str, cause: Optional[Exception] = None):
        super().__init__(flag, t("common.invalid_flag", flag=flag, details=details), cause)
        self.flag = flag
        self.details["reason"] = details


class ArgValidationError(ValidationError):
    """위치 인자 검증 실패"""

    def __init__(self, arg: str, details: str, cause: Optional[Exception] = None):
        super().__init__(arg, t("common.invalid_arg", arg=arg, details=details), cause)
        self.arg = arg
        self.details["reason"] = details


# =============================================================================
# 인증/설정 관련 예외
# =============================================================================


class AuthError(CLIError):
    """인증 정보가 없거나 사용할 수 없는 경우"""

    def __init__(self, message: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message or t("common.not_authenticated"), cause)


class ConfigError(CLIError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = t("common.config_error", key=key, message=message)
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 서비스 발견 관련 예외
# =============================================================================


class DiscoveryError(CLIError):
    """서비스 발견 관련 예외"""

    def __init__(
        self,
        message: str,
        module_path: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.module_path = module_path
        if module_path:
            self.details["module_path"] = module_path


class ServiceLoadError(DiscoveryError):
    """서비스 모듈 로드 실패 예외"""

    def __init__(
        self,
        module_name: str,
        reason: str,
        cause: Optional[Exception] = None,
    ):
        message = f"Failed to load service [{module_name}]: {reason}"
        super().__init__(message, module_path=module_name, cause=cause)
        self.module_name = module_name
        self.reason = reason


class MetadataValidationError(DiscoveryError):
    """서비스 메타데이터 검증 실패 예외"""

    def __init__(
        self,
        module_name: str,
        errors: list[str],
        cause: Optional[Exception] = None,
    ):
        message = f"Invalid service metadata [{module_name}]: {', '.join(errors)}"
        super().__init__(message, module_path=module_name, cause=cause)
        self.module_name = module_name
        self.validation_errors = errors
        self.details["validation_errors"] = errors


# =============================================================================
# 실행 관련 예외
# =============================================================================


class PromptError(CLIError):
    """확인 프롬프트 입력 실패 (입력 스트림 종료 등)"""

    def __init__(self, cause: Optional[Exception] = None):
        super().__init__(t("common.prompt_failed"), cause)


class ApiError(CLIError):
    """REST API 호출 실패

    requests 응답 또는 네트워크 예외를 래핑합니다.

    Attributes:
        status_code: HTTP 상태 코드 (네트워크 오류면 None)
        method: HTTP 메서드
        url: 요청 URL
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.details.update(
            {
                "status_code": status_code,
                "method": method,
                "url": url,
            }
        )

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return super().__str__()

    @classmethod
    def from_response(cls, response: Any) -> "ApiError":
        """requests.Response로부터 생성

        응답 본문이 JSON이고 `message` 필드가 있으면 그 값을 사용합니다.

        Args:
            response: 실패한 requests.Response

        Returns:
            ApiError 인스턴스
        """
        message = response.reason or "request failed"
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = body.get("message") or body.get("error") or message

        request = getattr(response, "request", None)
        return cls(
            message=str(message),
            status_code=response.status_code,
            method=getattr(request, "method", None),
            url=getattr(request, "url", None) or getattr(response, "url", None),
        )


class RemoteError(CLIError):
    """파이프라인의 원격 호출 실패

    `operation`은 사용자에게 보여줄 짧은 작업 설명입니다.
    (예: "delete PostgreSQL Flex user")
    """

    def __init__(self, operation: str, cause: Optional[Exception] = None):
        super().__init__(operation, cause)
        self.operation = operation
        self.details["operation"] = operation

