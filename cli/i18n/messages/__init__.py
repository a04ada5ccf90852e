"""
cli/i18n/messages/__init__.py - Message Registry

Aggregates all message dictionaries from sub-modules.
Messages are organized by namespace (common, cli, mongodbflex, ...)

Structure:
    MESSAGES = {
        "common.cancelled": {"ko": "...", "en": "..."},
        "mongodbflex.user_deleted": {"ko": "...", "en": "..."},
        ...
    }
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """Message dictionary type."""

    ko: str
    en: str


# Master message registry
MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Register messages for a namespace.

    Args:
        namespace: Namespace prefix (e.g., "common", "opensearch")
        messages: Dictionary of message key -> translations
    """
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


# Import and register all message modules
# These imports must come after register_messages is defined
from cli.i18n.messages.cli_commands import CLI_MESSAGES  # noqa: E402
from cli.i18n.messages.common import COMMON_MESSAGES  # noqa: E402
from cli.i18n.messages.services import (  # noqa: E402
    MONGODBFLEX_MESSAGES,
    OPENSEARCH_MESSAGES,
    POSTGRESFLEX_MESSAGES,
)

register_messages("common", COMMON_MESSAGES)
register_messages("cli", CLI_MESSAGES)
register_messages("mongodbflex", MONGODBFLEX_MESSAGES)
register_messages("postgresflex", POSTGRESFLEX_MESSAGES)
register_messages("opensearch", OPENSEARCH_MESSAGES)
