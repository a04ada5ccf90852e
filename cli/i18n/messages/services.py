"""
cli/i18n/messages/services.py - Managed Service Messages

Contains translations for service command help text, confirmation prompts,
success messages and empty-result messages.

Placeholders are label roles resolved by the command pipeline:
    {project}, {instance}, {user}  - resolved labels (raw ID on lookup failure)
    {label}                        - scope label of an empty listing
"""

from __future__ import annotations

MONGODBFLEX_MESSAGES = {
    "description": {
        "ko": "MongoDB Flex 인스턴스 및 사용자 관리",
        "en": "Manage MongoDB Flex instances and users",
    },
    # instance list
    "instance_list_help": {
        "ko": "MongoDB Flex 인스턴스 목록",
        "en": "Lists all MongoDB Flex instances",
    },
    "example_instance_list": {
        "ko": "모든 MongoDB Flex 인스턴스 조회",
        "en": "List all MongoDB Flex instances",
    },
    "no_instances": {
        "ko": "프로젝트 {label}에 MongoDB Flex 인스턴스가 없습니다",
        "en": "No instances found for project {label}",
    },
    # user list
    "user_list_help": {
        "ko": "MongoDB Flex 인스턴스의 사용자 목록",
        "en": "Lists all MongoDB Flex users of an instance",
    },
    "example_user_list": {
        "ko": 'ID가 "xxx"인 인스턴스의 사용자 조회',
        "en": 'List all MongoDB Flex users of instance with ID "xxx"',
    },
    "no_users": {
        "ko": "인스턴스 {label}에 사용자가 없습니다",
        "en": "No users found for instance {label}",
    },
    # user describe
    "user_describe_help": {
        "ko": "MongoDB Flex 사용자 상세 정보 (비밀번호 제외)",
        "en": "Shows details of a MongoDB Flex user (the password is not shown)",
    },
    "example_user_describe": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 상세 조회',
        "en": 'Get details of a MongoDB Flex user with ID "xxx" of instance with ID "yyy"',
    },
    # user delete
    "user_delete_help": {
        "ko": "MongoDB Flex 사용자 삭제",
        "en": "Deletes a MongoDB Flex user",
    },
    "example_user_delete": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 삭제',
        "en": 'Delete a MongoDB Flex user with ID "xxx" of instance with ID "yyy"',
    },
    "confirm_delete_user": {
        "ko": "인스턴스 {instance}의 사용자 {user}를 삭제하시겠습니까? (되돌릴 수 없습니다)",
        "en": "Are you sure you want to delete user {user} of instance {instance}? (This cannot be undone)",
    },
    "user_deleted": {
        "ko": "인스턴스 {instance}의 사용자 {user} 삭제됨",
        "en": "Deleted user {user} of instance {instance}",
    },
    # user reset-password
    "user_reset_password_help": {
        "ko": "MongoDB Flex 사용자 비밀번호 재설정 (새 비밀번호는 이후 다시 조회할 수 없습니다)",
        "en": "Resets the password of a MongoDB Flex user. The new password is visible after and cannot be retrieved later",
    },
    "example_user_reset_password": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 비밀번호 재설정',
        "en": 'Reset the password of a MongoDB Flex user with ID "xxx" of instance with ID "yyy"',
    },
    "confirm_reset_password": {
        "ko": "인스턴스 {instance}의 사용자 {user} 비밀번호를 재설정하시겠습니까? (되돌릴 수 없습니다)",
        "en": "Are you sure you want to reset the password of user {user} of instance {instance}? (This cannot be undone)",
    },
    "password_reset": {
        "ko": "인스턴스 {instance}의 사용자 {user} 비밀번호 재설정됨",
        "en": "Reset password for user {user} of instance {instance}",
    },
}

POSTGRESFLEX_MESSAGES = {
    "description": {
        "ko": "PostgreSQL Flex 인스턴스 및 사용자 관리",
        "en": "Manage PostgreSQL Flex instances and users",
    },
    # instance list
    "instance_list_help": {
        "ko": "PostgreSQL Flex 인스턴스 목록",
        "en": "Lists all PostgreSQL Flex instances",
    },
    "example_instance_list": {
        "ko": "모든 PostgreSQL Flex 인스턴스 조회",
        "en": "List all PostgreSQL Flex instances",
    },
    "no_instances": {
        "ko": "프로젝트 {label}에 PostgreSQL Flex 인스턴스가 없습니다",
        "en": "No instances found for project {label}",
    },
    # user list
    "user_list_help": {
        "ko": "PostgreSQL Flex 인스턴스의 사용자 목록",
        "en": "Lists all PostgreSQL Flex users of an instance",
    },
    "example_user_list": {
        "ko": 'ID가 "xxx"인 인스턴스의 사용자 조회',
        "en": 'List all PostgreSQL Flex users of instance with ID "xxx"',
    },
    "no_users": {
        "ko": "인스턴스 {label}에 사용자가 없습니다",
        "en": "No users found for instance {label}",
    },
    # user describe
    "user_describe_help": {
        "ko": "PostgreSQL Flex 사용자 상세 정보 (비밀번호 제외)",
        "en": "Shows details of a PostgreSQL Flex user (the password is not shown)",
    },
    "example_user_describe": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 상세 조회',
        "en": 'Get details of a PostgreSQL Flex user with ID "xxx" of instance with ID "yyy"',
    },
    # user delete
    "user_delete_help": {
        "ko": "PostgreSQL Flex 사용자 삭제",
        "en": "Deletes a PostgreSQL Flex user",
    },
    "example_user_delete": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 삭제',
        "en": 'Delete a PostgreSQL Flex user with ID "xxx" for instance with ID "yyy"',
    },
    "confirm_delete_user": {
        "ko": "인스턴스 {instance}의 사용자 {user}를 삭제하시겠습니까? (되돌릴 수 없습니다)",
        "en": "Are you sure you want to delete user {user} of instance {instance}? (This cannot be undone)",
    },
    "user_deleted": {
        "ko": "인스턴스 {instance}의 사용자 {user} 삭제됨",
        "en": "Deleted user {user} of instance {instance}",
    },
    # user reset-password
    "user_reset_password_help": {
        "ko": "PostgreSQL Flex 사용자 비밀번호 재설정 (새 비밀번호는 이후 다시 조회할 수 없습니다)",
        "en": "Resets the password of a PostgreSQL Flex user. The new password is visible after and cannot be retrieved later",
    },
    "example_user_reset_password": {
        "ko": 'ID가 "yyy"인 인스턴스의 사용자 "xxx" 비밀번호 재설정',
        "en": 'Reset the password of a PostgreSQL Flex user with ID "xxx" of instance with ID "yyy"',
    },
    "confirm_reset_password": {
        "ko": "인스턴스 {instance}의 사용자 {user} 비밀번호를 재설정하시겠습니까? (되돌릴 수 없습니다)",
        "en": "Are you sure you want to reset the password of user {user} of instance {instance}? (This cannot be undone)",
    },
    "password_reset": {
        "ko": "인스턴스 {instance}의 사용자 {user} 비밀번호 재설정됨",
        "en": "Reset password for user {user} of instance {instance}",
    },
}

OPENSEARCH_MESSAGES = {
    "description": {
        "ko": "OpenSearch 인스턴스 및 서비스 플랜 관리",
        "en": "Manage OpenSearch instances and service plans",
    },
    # plans
    "plans_help": {
        "ko": "OpenSearch 서비스 플랜 목록",
        "en": "Lists all OpenSearch service plans",
    },
    "example_plans": {
        "ko": "모든 OpenSearch 서비스 플랜 조회",
        "en": "List all OpenSearch service plans",
    },
    "example_plans_json": {
        "ko": "모든 OpenSearch 서비스 플랜을 JSON 형식으로 조회",
        "en": "List all OpenSearch service plans in JSON format",
    },
    "example_plans_limit": {
        "ko": "OpenSearch 서비스 플랜 최대 10개 조회",
        "en": "List up to 10 OpenSearch service plans",
    },
    "no_plans": {
        "ko": "프로젝트 {label}에 플랜이 없습니다",
        "en": "No plans found for project {label}",
    },
    # instance list
    "instance_list_help": {
        "ko": "OpenSearch 인스턴스 목록",
        "en": "Lists all OpenSearch instances",
    },
    "example_instance_list": {
        "ko": "모든 OpenSearch 인스턴스 조회",
        "en": "List all OpenSearch instances",
    },
    "no_instances": {
        "ko": "프로젝트 {label}에 OpenSearch 인스턴스가 없습니다",
        "en": "No instances found for project {label}",
    },
    # instance delete
    "instance_delete_help": {
        "ko": "OpenSearch 인스턴스 삭제",
        "en": "Deletes an OpenSearch instance",
    },
    "example_instance_delete": {
        "ko": 'ID가 "xxx"인 OpenSearch 인스턴스 삭제',
        "en": 'Delete an OpenSearch instance with ID "xxx"',
    },
    "confirm_delete_instance": {
        "ko": "인스턴스 {instance}를 삭제하시겠습니까? (되돌릴 수 없습니다)",
        "en": "Are you sure you want to delete instance {instance}? (This cannot be undone)",
    },
    "instance_deleted": {
        "ko": "인스턴스 {instance} 삭제 요청됨",
        "en": "Triggered deletion of instance {instance}",
    },
}
