"""
services/postgresflex - PostgreSQL Flex

Manage PostgreSQL Flex instances and users
"""

from services.flex import build_flex_commands
from services.postgresflex.client import PostgresFlexClient

SERVICE = {
    "name": "postgresflex",
    "display_name": "PostgreSQL Flex",
    "description_key": "postgresflex.description",
    "aliases": ["postgresql"],
}

CLIENT = PostgresFlexClient

# USER_ID는 형식 검증 없이 API에 전달
COMMANDS = build_flex_commands(
    "postgresflex",
    "PostgreSQL Flex",
    user_validator=None,
    describe_fields=(
        ("ID", "id"),
        ("USERNAME", "username"),
        ("ROLES", "roles"),
        ("HOST", "host"),
        ("PORT", "port"),
    ),
)
