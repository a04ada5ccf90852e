"""
services/opensearch - OpenSearch

Manage OpenSearch service plans and instances
"""

from services.opensearch.client import OpenSearchClient
from services.opensearch.commands import COMMANDS

SERVICE = {
    "name": "opensearch",
    "display_name": "OpenSearch",
    "description_key": "opensearch.description",
    "aliases": [],
}

CLIENT = OpenSearchClient

__all__ = ["SERVICE", "CLIENT", "COMMANDS"]
