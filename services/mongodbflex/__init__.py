"""
services/mongodbflex - MongoDB Flex

Manage MongoDB Flex instances and users
"""

from core.pipeline.validation import validate_uuid
from services.flex import build_flex_commands
from services.mongodbflex.client import MongoDBFlexClient

SERVICE = {
    "name": "mongodbflex",
    "display_name": "MongoDB Flex",
    "description_key": "mongodbflex.description",
    "aliases": ["mongodb"],
}

CLIENT = MongoDBFlexClient

COMMANDS = build_flex_commands(
    "mongodbflex",
    "MongoDB Flex",
    user_validator=validate_uuid,
    describe_fields=(
        ("ID", "id"),
        ("USERNAME", "username"),
        ("ROLES", "roles"),
        ("DATABASE", "database"),
    ),
)
