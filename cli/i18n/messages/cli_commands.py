"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, help text, and flag descriptions.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Help Text Section Names
    # =========================================================================
    "section_utilities": {
        "ko": "유틸리티",
        "en": "Utilities",
    },
    "section_services": {
        "ko": "관리형 서비스",
        "en": "Managed Services",
    },
    "help_intro": {
        "ko": "STACKIT 관리형 서비스(MongoDB Flex, PostgreSQL Flex, OpenSearch)를\n관리하는 CLI 도구입니다.",
        "en": "A CLI tool for managing STACKIT managed services\n(MongoDB Flex, PostgreSQL Flex, OpenSearch).",
    },
    "resource_group_help": {
        "ko": "{service} {resource} 관리",
        "en": "Manage {service} {resource}s",
    },
    # =========================================================================
    # Global Flags
    # =========================================================================
    "flag_lang": {
        "ko": "UI 언어 설정 (ko: 한국어, en: English)",
        "en": "UI language (ko: Korean, en: English)",
    },
    "flag_project_id": {
        "ko": "프로젝트 ID",
        "en": "Project ID",
    },
    "flag_output_format": {
        "ko": "출력 형식 (table, json)",
        "en": "Output format (table, json)",
    },
    "flag_assume_yes": {
        "ko": "확인 프롬프트 없이 실행",
        "en": "Skip confirmation prompts",
    },
    "flag_verbosity": {
        "ko": "로그 레벨 (debug, info, warning, error)",
        "en": "Log verbosity (debug, info, warning, error)",
    },
    "flag_limit": {
        "ko": "최대 출력 항목 수",
        "en": "Maximum number of entries to list",
    },
    "flag_instance_id": {
        "ko": "인스턴스 ID",
        "en": "Instance ID",
    },
    # =========================================================================
    # Config Command
    # =========================================================================
    "config_help": {
        "ko": "CLI 설정 관리",
        "en": "Manage CLI configuration",
    },
    "config_set_help": {
        "ko": "설정 값 저장",
        "en": "Set configuration values",
    },
    "config_unset_help": {
        "ko": "설정 값 삭제",
        "en": "Unset configuration values",
    },
    "config_list_help": {
        "ko": "현재 설정 목록",
        "en": "List the current configuration",
    },
    "config_saved": {
        "ko": "설정 저장됨: {keys}",
        "en": "Configuration saved: {keys}",
    },
    "config_removed": {
        "ko": "설정 삭제됨: {keys}",
        "en": "Configuration removed: {keys}",
    },
    "config_nothing_given": {
        "ko": "변경할 설정이 없습니다. 플래그를 하나 이상 지정하세요.",
        "en": "Nothing to change. Pass at least one flag.",
    },
    "config_empty": {
        "ko": "저장된 설정이 없습니다 ({path})",
        "en": "No configuration set ({path})",
    },
    "flag_region": {
        "ko": "리전 (기본: eu01)",
        "en": "Region (default: eu01)",
    },
    "flag_token": {
        "ko": "서비스 계정 액세스 토큰",
        "en": "Service account access token",
    },
    "flag_custom_endpoint": {
        "ko": "{service} API 엔드포인트 재정의",
        "en": "Override the {service} API endpoint",
    },
    "flag_unset": {
        "ko": "{key} 삭제",
        "en": "Unset {key}",
    },
    "col_key": {
        "ko": "키",
        "en": "KEY",
    },
    "col_value": {
        "ko": "값",
        "en": "VALUE",
    },
}
