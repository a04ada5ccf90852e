"""
core/api - REST API 클라이언트

서비스별 클라이언트의 공통 베이스와 Resource Manager 클라이언트를 제공합니다.
"""

from core.api.client import ApiClient, configure_client
from core.api.resourcemanager import ResourceManagerClient, lookup_project_name

__all__: list[str] = [
    "ApiClient",
    "configure_client",
    "ResourceManagerClient",
    "lookup_project_name",
]
