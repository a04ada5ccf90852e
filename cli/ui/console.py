"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들과 명령 파이프라인의 출력 대상(ConsolePrinter)
"""

from __future__ import annotations

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from core.config import settings


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다.

    출력 파일은 지정하지 않아 호출 시점의 sys.stdout / sys.stderr를 따릅니다.
    """
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스 (결과 출력 / 진단 메시지)
console = get_console()
err_console = get_console(stderr=True)


def _make_handler() -> RichHandler:
    handler = RichHandler(console=err_console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(settings.LOG.format, datefmt=settings.LOG.datefmt))
    return handler


def configure_logging(verbosity: str) -> None:
    """--verbosity 값으로 루트 로그 레벨 설정

    Args:
        verbosity: "debug" | "info" | "warning" | "error"
    """
    level = getattr(logging, verbosity.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(_make_handler())

    # requests/urllib3 연결 로그 제한
    for name in settings.LOG.quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


# =============================================================================
# 표준 출력 스타일
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러


def print_success(message: str, target: Console | None = None) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    (target or console).print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str, target: Console | None = None) -> None:
    """에러 메시지 출력 (빨간색 X, 기본 stderr)"""
    (target or err_console).print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_info(message: str, target: Console | None = None) -> None:
    """정보 메시지 출력 (흐린 글씨, 기본 stderr)"""
    (target or err_console).print(f"[dim]{escape(message)}[/dim]")


# =============================================================================
# 파이프라인 출력 대상
# =============================================================================


class ConsolePrinter:
    """명령 결과 출력 대상

    결과(echo, print_table)는 stdout 콘솔로, 진단 메시지(info, error)는
    stderr 콘솔로 보냅니다. 테스트에서는 StringIO 기반 Console을 주입합니다.
    """

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out = out or console
        self.err = err or err_console

    def echo(self, text: str = "") -> None:
        """한 줄 출력 (마크업 해석 없음)"""
        self.out.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def print_table(self, table) -> None:
        self.out.print(table)

    def info(self, message: str) -> None:
        print_info(message, target=self.err)

    def error(self, message: str) -> None:
        print_error(message, target=self.err)
