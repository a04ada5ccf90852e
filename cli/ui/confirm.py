"""
cli/ui/confirm.py - 확인 프롬프트

파괴적인 작업(삭제, 비밀번호 재설정) 전에 예/아니오를 묻습니다.
TTY에서는 questionary, 그 외(파이프 입력, 테스트)에서는 click.confirm을 사용합니다.
"""

from __future__ import annotations

import sys

import click
import questionary

from core.exceptions import PromptError


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def prompt_for_confirmation(message: str) -> bool:
    """예/아니오 확인 (기본값: 아니오)

    Args:
        message: 확인 메시지

    Returns:
        예를 선택하면 True

    Raises:
        PromptError: 입력 스트림 종료 또는 Ctrl+C
    """
    if _is_interactive():
        answer = questionary.confirm(message, default=False).ask()
        if answer is None:
            raise PromptError()
        return bool(answer)

    try:
        return click.confirm(message, default=False, err=True)
    except click.Abort as e:
        raise PromptError(cause=e) from e
