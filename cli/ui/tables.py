"""
cli/ui/tables.py - 테이블 출력

Rich Table 위에 얇은 래퍼를 제공합니다.

- 컬럼 헤더 / 행 추가
- 그룹 구분선 (add_separator)
- 인접한 동일 셀 병합 (enable_auto_merge_on_columns)
- 출력 대상(printer)으로 표시 (display)

Usage:
    table = Table()
    table.set_header("OFFERING NAME", "ID", "NAME")
    table.add_row("opensearch", "p-1", "small")
    table.add_row("opensearch", "p-2", "large")
    table.add_separator()
    table.enable_auto_merge_on_columns(1)
    table.display(printer)
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table as RichTable
from rich.text import Text


class Table:
    """그룹 구분선과 셀 병합을 지원하는 테이블"""

    def __init__(self) -> None:
        self._headers: list[str] = []
        self._rows: list[list[str]] = []
        self._section_ends: set[int] = set()
        self._merge_columns: tuple[int, ...] = ()

    def set_header(self, *headers: str) -> None:
        self._headers = [str(h) for h in headers]

    def add_row(self, *cells: Any) -> None:
        self._rows.append(["" if cell is None else str(cell) for cell in cells])

    def add_separator(self) -> None:
        """마지막 행 뒤에 그룹 구분선 추가 (행이 없으면 무시)"""
        if self._rows:
            self._section_ends.add(len(self._rows) - 1)

    def enable_auto_merge_on_columns(self, *columns: int) -> None:
        """인접 행의 동일한 셀을 병합할 컬럼 지정

        Args:
            *columns: 1부터 시작하는 컬럼 번호
        """
        for column in columns:
            if column < 1:
                raise ValueError(f"column numbers start at 1, got {column}")
        self._merge_columns = tuple(columns)

    def render_rows(self) -> list[list[str]]:
        """병합이 적용된 셀 값

        병합 컬럼에서 바로 위 행과 값이 같으면 빈 셀로 표시합니다.
        구분선을 넘어서는 병합하지 않습니다.
        """
        rendered: list[list[str]] = []
        previous: list[str] | None = None

        for index, row in enumerate(self._rows):
            cells = list(row)
            if previous is not None:
                for column in self._merge_columns:
                    i = column - 1
                    if i < len(row) and i < len(previous) and row[i] == previous[i]:
                        cells[i] = ""
            rendered.append(cells)
            previous = None if index in self._section_ends else row

        return rendered

    def build(self) -> RichTable:
        """Rich Table 생성"""
        table = RichTable(
            show_header=bool(self._headers),
            header_style="bold",
            box=box.SIMPLE_HEAD if self._headers else box.SIMPLE,
        )

        width = max([len(self._headers), *(len(row) for row in self._rows)], default=0)
        for i in range(width):
            table.add_column(self._headers[i] if i < len(self._headers) else "")

        last = len(self._rows) - 1
        for index, cells in enumerate(self.render_rows()):
            # 마지막 행의 구분선은 테이블 하단선과 겹치므로 생략
            end_section = index in self._section_ends and index != last
            table.add_row(*(Text(cell) for cell in cells), end_section=end_section)

        return table

    def display(self, printer: Any) -> None:
        """출력 대상에 테이블 표시"""
        printer.print_table(self.build())
