"""
cli/i18n/messages/common.py - Common Messages

Contains translations shared by every command: validation errors,
confirmation results and result field labels.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    # =========================================================================
    # Validation
    # =========================================================================
    "project_id_missing": {
        "ko": "프로젝트 ID가 설정되지 않았습니다. --project-id 플래그 또는 'stackit config set --project-id'를 사용하세요.",
        "en": "Project ID not set. Use the --project-id flag or run 'stackit config set --project-id <ID>'.",
    },
    "required_flag_missing": {
        "ko": "필수 플래그 누락: --{flag}",
        "en": "Required flag not set: --{flag}",
    },
    "invalid_flag": {
        "ko": "잘못된 플래그 값 --{flag}: {details}",
        "en": "Invalid value for flag --{flag}: {details}",
    },
    "invalid_arg": {
        "ko": "잘못된 인자 {arg}: {details}",
        "en": "Invalid argument {arg}: {details}",
    },
    "arg_required": {
        "ko": "값이 필요합니다",
        "en": "value is required",
    },
    "must_be_positive": {
        "ko": "0보다 커야 합니다",
        "en": "must be greater than 0",
    },
    "invalid_uuid": {
        "ko": "올바른 UUID가 아닙니다: {value}",
        "en": "not a valid UUID: {value}",
    },
    "invalid_choice": {
        "ko": "{choices} 중 하나여야 합니다",
        "en": "must be one of {choices}",
    },
    # =========================================================================
    # Auth / Config
    # =========================================================================
    "not_authenticated": {
        "ko": "인증 정보가 없습니다. STACKIT_SERVICE_ACCOUNT_TOKEN 환경 변수 또는 'stackit config set --service-account-token'을 설정하세요.",
        "en": "Not authenticated. Set STACKIT_SERVICE_ACCOUNT_TOKEN or run 'stackit config set --service-account-token <TOKEN>'.",
    },
    "config_error": {
        "ko": "설정 오류 [{key}]: {message}",
        "en": "Configuration error [{key}]: {message}",
    },
    "config_invalid_json": {
        "ko": "설정 파일을 읽을 수 없습니다 ({path})",
        "en": "cannot parse config file ({path})",
    },
    "config_unknown_key": {
        "ko": "알 수 없는 설정 키",
        "en": "unknown configuration key",
    },
    # =========================================================================
    # Execution
    # =========================================================================
    "prompt_failed": {
        "ko": "확인 입력을 읽을 수 없습니다",
        "en": "Could not read confirmation answer",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Aborted",
    },
    "interrupted": {
        "ko": "중단됨",
        "en": "Interrupted",
    },
    # =========================================================================
    # Result fields
    # =========================================================================
    "username": {
        "ko": "사용자 이름",
        "en": "Username",
    },
    "new_password": {
        "ko": "새 비밀번호",
        "en": "New password",
    },
    "new_uri": {
        "ko": "새 URI",
        "en": "New URI",
    },
    "examples": {
        "ko": "예시:",
        "en": "Examples:",
    },
}
