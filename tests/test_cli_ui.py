# tests/test_cli_ui.py
"""
cli/ui 모듈 단위 테스트

콘솔 유틸리티, 로깅 설정, 테이블, 확인 프롬프트 테스트.
"""

import io
import logging
from unittest.mock import MagicMock, patch

import click
import pytest
from rich.console import Console
from rich.logging import RichHandler

from core.exceptions import PromptError

# =============================================================================
# Console 유틸리티 테스트
# =============================================================================


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None, soft_wrap=True), buffer


class TestConsoleUtilities:
    """콘솔 유틸리티 테스트"""

    def test_get_console_returns_console(self):
        """get_console이 Console 인스턴스 반환"""
        from cli.ui.console import get_console

        assert isinstance(get_console(), Console)

    def test_console_singletons(self):
        """전역 console / err_console 인스턴스 확인"""
        from cli.ui.console import console, err_console

        assert isinstance(console, Console)
        assert err_console.stderr is True
        assert console.stderr is False

    def test_print_helpers_escape_markup(self):
        """메시지 안의 대괄호는 마크업으로 해석되지 않음"""
        from cli.ui.console import SYMBOL_ERROR, SYMBOL_SUCCESS, print_error, print_success

        target, buffer = make_console()
        print_success("saved [region]", target=target)
        print_error("bad [red]value", target=target)

        output = buffer.getvalue()
        assert f"{SYMBOL_SUCCESS} saved [region]" in output
        assert f"{SYMBOL_ERROR} bad [red]value" in output

    def test_print_info(self):
        from cli.ui.console import print_info

        target, buffer = make_console()
        print_info("cancelled [x]", target=target)

        assert buffer.getvalue() == "cancelled [x]\n"


class TestConsolePrinter:
    """파이프라인 출력 대상"""

    def test_echo_is_literal(self):
        """echo는 마크업 / 이모지 치환 없이 그대로 출력"""
        from cli.ui.console import ConsolePrinter

        out, buffer = make_console()
        printer = ConsolePrinter(out=out, err=make_console()[0])

        printer.echo('{"name": "[bold]x[/bold] :smile:"}')

        assert buffer.getvalue() == '{"name": "[bold]x[/bold] :smile:"}\n'

    def test_streams_split(self):
        """결과는 stdout, 진단 메시지는 stderr"""
        from cli.ui.console import ConsolePrinter

        out, out_buffer = make_console()
        err, err_buffer = make_console()
        printer = ConsolePrinter(out=out, err=err)

        printer.echo("result")
        printer.info("note")
        printer.error("failure")

        assert out_buffer.getvalue() == "result\n"
        assert "note" in err_buffer.getvalue()
        assert "failure" in err_buffer.getvalue()


class TestLogging:
    """로깅 설정"""

    def test_configure_logging_level(self):
        from cli.ui.console import configure_logging

        configure_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_configure_logging_twice_keeps_one_handler(self):
        from cli.ui.console import configure_logging

        configure_logging("info")
        configure_logging("error")

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        from cli.ui.console import configure_logging

        configure_logging("loud")

        assert logging.getLogger().level == logging.WARNING


# =============================================================================
# Table 테스트
# =============================================================================


class TestTable:
    """cli/ui/tables.Table"""

    def make_table(self):
        from cli.ui.tables import Table

        table = Table()
        table.set_header("OFFERING NAME", "ID", "NAME")
        return table

    def test_none_cells_blank(self):
        table = self.make_table()
        table.add_row("os", "p-1", None)

        assert table.render_rows() == [["os", "p-1", ""]]

    def test_merge_adjacent_cells(self):
        table = self.make_table()
        table.add_row("os", "p-1", "small")
        table.add_row("os", "p-2", "large")
        table.enable_auto_merge_on_columns(1)

        assert table.render_rows() == [["os", "p-1", "small"], ["", "p-2", "large"]]

    def test_separator_resets_merge(self):
        """구분선을 넘어서는 병합하지 않음"""
        table = self.make_table()
        table.add_row("os", "p-1", "small")
        table.add_separator()
        table.add_row("os", "p-2", "large")
        table.enable_auto_merge_on_columns(1)

        assert table.render_rows()[1][0] == "os"

    def test_separator_without_rows_ignored(self):
        table = self.make_table()
        table.add_separator()
        table.add_row("os", "p-1", "small")

        assert table.render_rows() == [["os", "p-1", "small"]]

    def test_invalid_merge_column(self):
        table = self.make_table()

        with pytest.raises(ValueError):
            table.enable_auto_merge_on_columns(0)

    def test_build(self):
        table = self.make_table()
        table.add_row("os", "p-1", "small")
        table.add_separator()
        table.add_row("os2", "p-2", "large")

        rich_table = table.build()

        assert len(rich_table.columns) == 3
        assert rich_table.row_count == 2
        assert rich_table.columns[0].header == "OFFERING NAME"

    def test_display(self):
        from cli.ui.console import ConsolePrinter

        out, buffer = make_console()
        table = self.make_table()
        table.add_row("os", "p-1", "[small]")

        table.display(ConsolePrinter(out=out, err=make_console()[0]))

        output = buffer.getvalue()
        assert "OFFERING NAME" in output
        assert "[small]" in output


# =============================================================================
# 확인 프롬프트 테스트
# =============================================================================


class TestConfirm:
    """cli/ui/confirm.prompt_for_confirmation"""

    def test_non_interactive_uses_click(self, monkeypatch):
        from cli.ui import confirm

        monkeypatch.setattr(confirm, "_is_interactive", lambda: False)
        with patch.object(click, "confirm", return_value=True) as click_confirm:
            assert confirm.prompt_for_confirmation("Delete?") is True

        click_confirm.assert_called_once_with("Delete?", default=False, err=True)

    def test_non_interactive_abort(self, monkeypatch):
        from cli.ui import confirm

        monkeypatch.setattr(confirm, "_is_interactive", lambda: False)
        with patch.object(click, "confirm", side_effect=click.Abort()):
            with pytest.raises(PromptError):
                confirm.prompt_for_confirmation("Delete?")

    def test_interactive_uses_questionary(self, monkeypatch):
        from cli.ui import confirm

        monkeypatch.setattr(confirm, "_is_interactive", lambda: True)
        question = MagicMock()
        question.ask.return_value = False
        with patch.object(confirm.questionary, "confirm", return_value=question) as q_confirm:
            assert confirm.prompt_for_confirmation("Delete?") is False

        q_confirm.assert_called_once_with("Delete?", default=False)

    def test_interactive_interrupted(self, monkeypatch):
        """questionary가 None을 반환하면 (Ctrl+C) PromptError"""
        from cli.ui import confirm

        monkeypatch.setattr(confirm, "_is_interactive", lambda: True)
        question = MagicMock()
        question.ask.return_value = None
        with patch.object(confirm.questionary, "confirm", return_value=question):
            with pytest.raises(PromptError):
                confirm.prompt_for_confirmation("Delete?")
