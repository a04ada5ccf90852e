"""
services/opensearch/commands.py - OpenSearch 명령 디스크립터
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from core.api import lookup_project_name
from core.pipeline.descriptor import ArgSpec, CommandSpec, Example, LabelSpec
from core.pipeline.output import MessageView, TableView, fields_row
from core.pipeline.types import CommandInput
from core.pipeline.validation import validate_uuid
from services.opensearch.client import OpenSearchClient

PROG = "stackit opensearch"


def instance_name(client: OpenSearchClient, inp: CommandInput) -> Optional[str]:
    return client.get_instance(inp.project_id, inp["instance"]).get("name")


def plan_rows(offering: dict[str, Any]) -> Iterable[tuple[Any, ...]]:
    """오퍼링 하나 → 플랜별 행"""
    for plan in offering.get("plans") or []:
        yield (offering.get("name"), plan.get("id"), plan.get("name"), plan.get("description"))


PLANS = CommandSpec(
    path=("plans",),
    operation="get OpenSearch service plans",
    help_key="opensearch.plans_help",
    supports_limit=True,
    labels=(LabelSpec("project", lookup_project_name, lazy=True),),
    call=lambda client, inp: client.list_offerings(inp.project_id),
    render=TableView(
        headers=("OFFERING NAME", "ID", "NAME", "DESCRIPTION"),
        rows=plan_rows,
        empty_key="opensearch.no_plans",
        group_separators=True,
        merge_columns=(1,),
    ),
    examples=(
        Example("opensearch.example_plans", f"$ {PROG} plans"),
        Example("opensearch.example_plans_json", f"$ {PROG} plans --output-format json"),
        Example("opensearch.example_plans_limit", f"$ {PROG} plans --limit 10"),
    ),
)

INSTANCE_LIST = CommandSpec(
    path=("instance", "list"),
    operation="get OpenSearch instances",
    help_key="opensearch.instance_list_help",
    supports_limit=True,
    labels=(LabelSpec("project", lookup_project_name, lazy=True),),
    call=lambda client, inp: client.list_instances(inp.project_id),
    render=TableView(
        headers=("ID", "NAME", "LAST OPERATION TYPE", "LAST OPERATION STATE"),
        rows=fields_row("instanceId", "name", "lastOperation.type", "lastOperation.state"),
        empty_key="opensearch.no_instances",
    ),
    examples=(Example("opensearch.example_instance_list", f"$ {PROG} instance list"),),
)

INSTANCE_DELETE = CommandSpec(
    path=("instance", "delete"),
    operation="delete OpenSearch instance",
    help_key="opensearch.instance_delete_help",
    arg=ArgSpec("INSTANCE_ID", role="instance", validator=validate_uuid),
    labels=(LabelSpec("instance", instance_name),),
    destructive=True,
    confirm_key="opensearch.confirm_delete_instance",
    call=lambda client, inp: client.delete_instance(inp.project_id, inp["instance"]),
    render=MessageView("opensearch.instance_deleted"),
    examples=(Example("opensearch.example_instance_delete", f"$ {PROG} instance delete xxx"),),
)

COMMANDS = [PLANS, INSTANCE_LIST, INSTANCE_DELETE]
