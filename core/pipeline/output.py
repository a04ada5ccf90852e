"""
core/pipeline/output.py - 결과 출력 전략

원격 호출 결과(RemoteResult)를 출력 형식(table/json)에 맞게 렌더링합니다.

출력 전략:
    TableView   - 목록 결과 (빈 목록 메시지, 그룹 구분선, 인접 셀 병합)
    DetailView  - 단일 리소스 상세 (속성/값 테이블)
    MessageView - 변경 작업 결과 (성공 메시지 + 선택 필드)

Usage:
    TableView(
        headers=("OFFERING NAME", "ID", "NAME", "DESCRIPTION"),
        rows=offering_rows,
        empty_key="opensearch.no_plans",
        group_separators=True,
        merge_columns=(1,),
    )
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence

from cli.i18n import t
from cli.ui.tables import Table
from core.globalflags import OutputFormat
from core.pipeline.types import CommandInput

RowsFn = Callable[[dict], Iterable[Sequence[Any]]]


# =============================================================================
# 헬퍼
# =============================================================================


def truncate(items: list, limit: Optional[int]) -> list:
    """limit이 설정되어 있고 항목 수보다 작으면 앞에서부터 limit개만 남김"""
    if limit is not None and len(items) > limit:
        return items[:limit]
    return items


def to_json(data: Any) -> str:
    """JSON 문자열 (들여쓰기 2, 필드 순서는 응답 순서 유지)"""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def pick(item: Any, path: str) -> Any:
    """점 표기 경로로 중첩 값 조회 (예: "lastOperation.state")"""
    value = item
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def format_value(value: Any) -> str:
    """테이블 셀 문자열"""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def fields_row(*paths: str) -> RowsFn:
    """항목 하나를 한 행으로 변환하는 rows 함수 생성"""

    def rows(item: dict) -> list[tuple[Any, ...]]:
        return [tuple(pick(item, path) for path in paths)]

    return rows


# =============================================================================
# 렌더링 컨텍스트
# =============================================================================


@dataclass
class RenderContext:
    """출력 단계에 전달되는 컨텍스트

    Attributes:
        input: 검증된 명령 입력
        labels: 이미 조회된 라벨 (역할 → 이름)
        printer: 출력 대상 (cli.ui.console.ConsolePrinter 호환)
        label_resolver: 아직 조회되지 않은 라벨을 필요할 때 조회하는 함수
    """

    input: CommandInput
    labels: dict[str, str]
    printer: Any
    label_resolver: Optional[Callable[[str], str]] = field(default=None, repr=False)

    @property
    def output_format(self) -> OutputFormat:
        return self.input.flags.output_format

    def label(self, role: str) -> str:
        """라벨 조회 (지연 조회 결과는 캐시)"""
        if role in self.labels:
            return self.labels[role]

        if self.label_resolver is not None:
            value = self.label_resolver(role)
        else:
            value = self.input.id_for(role)
        self.labels[role] = value
        return value


# =============================================================================
# 출력 전략
# =============================================================================


@dataclass(frozen=True)
class TableView:
    """목록 결과 출력

    테이블 모드에서는 항목마다 rows()가 반환한 행(리프 항목당 1행)을 추가하고,
    group_separators가 True면 항목(부모) 사이에 구분선을 넣습니다.
    빈 목록이면 테이블 대신 "no items found" 메시지 한 줄만 출력합니다.

    Attributes:
        headers: 컬럼 헤더
        rows: 항목 → 행 목록
        empty_key: 빈 목록 메시지 키 ({label} = 범위 라벨)
        scope_role: 빈 목록 메시지의 범위 라벨 역할
        group_separators: 항목 사이 구분선
        merge_columns: 인접 동일 셀 병합 컬럼 (1부터 시작)
    """

    headers: tuple[str, ...]
    rows: RowsFn
    empty_key: str
    scope_role: str = "project"
    group_separators: bool = False
    merge_columns: tuple[int, ...] = ()

    def __call__(self, result: Any, ctx: RenderContext) -> None:
        items = list(result or [])

        if ctx.output_format is OutputFormat.JSON:
            ctx.printer.echo(to_json(items))
            return

        if not items:
            ctx.printer.echo(t(self.empty_key, label=ctx.label(self.scope_role)))
            return

        table = Table()
        table.set_header(*self.headers)
        for item in items:
            for row in self.rows(item):
                table.add_row(*(format_value(cell) for cell in row))
            if self.group_separators:
                table.add_separator()
        if self.merge_columns:
            table.enable_auto_merge_on_columns(*self.merge_columns)
        table.display(ctx.printer)


@dataclass(frozen=True)
class DetailView:
    """단일 리소스 상세 출력

    Attributes:
        fields: (표시 이름, 점 표기 경로) 목록
    """

    fields: tuple[tuple[str, str], ...]

    def __call__(self, result: Any, ctx: RenderContext) -> None:
        if ctx.output_format is OutputFormat.JSON:
            ctx.printer.echo(to_json(result))
            return

        table = Table()
        for label, path in self.fields:
            table.add_row(label, format_value(pick(result, path)))
            table.add_separator()
        table.display(ctx.printer)


@dataclass(frozen=True)
class MessageView:
    """변경 작업 결과 출력

    성공 메시지는 해석된 라벨로 포맷됩니다.
    fields가 있으면 빈 줄 뒤에 "<이름>: <값>" 줄을 출력합니다.
    출력 형식과 관계없이 같은 텍스트를 출력합니다.

    Attributes:
        message_key: 성공 메시지 키
        fields: (이름 메시지 키, 점 표기 경로) 목록
    """

    message_key: str
    fields: tuple[tuple[str, str], ...] = ()

    def __call__(self, result: Any, ctx: RenderContext) -> None:
        ctx.printer.echo(t(self.message_key, **ctx.labels))
        if not self.fields:
            return

        ctx.printer.echo("")
        for label_key, path in self.fields:
            ctx.printer.echo(f"{t(label_key)}: {format_value(pick(result, path))}")
