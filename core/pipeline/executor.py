"""
core/pipeline/executor.py - 명령 실행 파이프라인

모든 명령이 공유하는 실행 흐름을 담당합니다.

    1. 입력 검증 (ValidatingInput)      - 실패 시 Failed, 원격 호출 없음
    2. 라벨 조회 (ResolvingLabels)      - 실패해도 원본 ID로 대체, 절대 중단하지 않음
    3. 확인 프롬프트 (ConfirmPrompt)     - destructive 명령만, 거절 시 Done (종료 코드 0)
    4. 원격 호출 (Calling)              - 정확히 1회, 실패 시 Failed
    5. 출력 (Rendering)                 - table / json

Usage:
    executor = CommandExecutor(
        spec,
        flags,
        client_factory=partial(configure_client, PostgresFlexClient),
        prompt=prompt_for_confirmation,
        printer=ConsolePrinter(),
    )
    exit_code = executor.run(("USER_ID",), {"instance-id": "..."})
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from cli.i18n import t
from core.exceptions import (
    ArgValidationError,
    AuthError,
    CLIError,
    ConfigError,
    FlagValidationError,
    ProjectIdError,
    PromptError,
    RemoteError,
    RequiredFlagError,
    ValidationError,
)
from core.globalflags import GlobalFlags
from core.pipeline.descriptor import CommandSpec, LabelSpec
from core.pipeline.labels import resolve_or_default
from core.pipeline.output import RenderContext, truncate
from core.pipeline.types import CommandInput, PipelineState
from core.pipeline.validation import LIMIT_FLAG, parse_limit

logger = logging.getLogger(__name__)

ClientFactory = Callable[[GlobalFlags], Any]
Prompt = Callable[[str], bool]

EXIT_OK = 0
EXIT_ERROR = 1


class CommandExecutor:
    """명령 디스크립터 실행기

    한 번의 명령 실행마다 새로 생성합니다. 실행 중 거친 상태는 `history`에 기록됩니다.

    Attributes:
        spec: 명령 디스크립터
        flags: 전역 플래그
        state: 현재 상태
        history: 상태 전이 기록
        result: 원격 호출 결과 (출력 전, 절단 전)
    """

    def __init__(
        self,
        spec: CommandSpec,
        flags: GlobalFlags,
        client_factory: ClientFactory,
        prompt: Prompt,
        printer: Any,
    ) -> None:
        self.spec = spec
        self.flags = flags
        self._client_factory = client_factory
        self._prompt = prompt
        self.printer = printer
        self._client: Any = None
        self.state = PipelineState.VALIDATING_INPUT
        self.history: list[PipelineState] = [self.state]
        self.result: Any = None

    # =========================================================================
    # 전체 흐름
    # =========================================================================

    def run(self, raw_args: Sequence[str | None] = (), raw_flags: Mapping[str, Any] | None = None) -> int:
        """명령 실행

        Args:
            raw_args: 위치 인자 값
            raw_flags: 플래그 이름("instance-id", "limit") → 값

        Returns:
            0: 성공 또는 사용자 취소
            1: 검증 / 인증 / 프롬프트 / 원격 호출 실패
        """
        try:
            inp = self.validate(raw_args, raw_flags or {})
            self._client = self._client_factory(self.flags)
        except (ValidationError, AuthError, ConfigError) as e:
            return self._fail(e)

        self._transition(PipelineState.RESOLVING_LABELS)
        labels = self.resolve_labels(inp)

        if self.spec.destructive:
            self._transition(PipelineState.CONFIRM_PROMPT)
            try:
                proceed = self.confirm_if_destructive(inp, labels, self.flags.assume_yes)
            except PromptError as e:
                return self._fail(e)
            if not proceed:
                self.printer.info(t("common.cancelled"))
                self._transition(PipelineState.DONE)
                return EXIT_OK

        self._transition(PipelineState.CALLING)
        try:
            self.result = self.execute(inp)
        except RemoteError as e:
            return self._fail(e)

        self._transition(PipelineState.RENDERING)
        self.render(inp, labels, self.result)
        self._transition(PipelineState.DONE)
        return EXIT_OK

    # =========================================================================
    # 단계
    # =========================================================================

    def validate(self, raw_args: Sequence[str | None], raw_flags: Mapping[str, Any]) -> CommandInput:
        """입력 검증

        순서: 위치 인자 → 리소스 플래그 → 프로젝트 ID → --limit

        Raises:
            ArgValidationError: 위치 인자 누락 또는 형식 오류
            RequiredFlagError: 필수 플래그 누락
            FlagValidationError: 플래그 형식 오류 / limit < 1
            ProjectIdError: 프로젝트 ID 없음
        """
        ids: dict[str, str] = {}

        arg = self.spec.arg
        if arg is not None:
            value = raw_args[0] if raw_args else None
            if not value:
                raise ArgValidationError(arg.name, t("common.arg_required"))
            if arg.validator is not None:
                try:
                    arg.validator(value)
                except ValueError as e:
                    raise ArgValidationError(arg.name, str(e), cause=e) from e
            ids[arg.role] = value

        for flag in self.spec.flags:
            value = raw_flags.get(flag.name)
            if value is None or value == "":
                if flag.required:
                    raise RequiredFlagError(flag.name)
                continue
            if flag.validator is not None:
                try:
                    flag.validator(value)
                except ValueError as e:
                    raise FlagValidationError(flag.name, str(e), cause=e) from e
            ids[flag.role] = value

        if not self.flags.project_id:
            raise ProjectIdError()

        limit = parse_limit(raw_flags.get(LIMIT_FLAG)) if self.spec.supports_limit else None

        return CommandInput(project_id=self.flags.project_id, ids=ids, limit=limit, flags=self.flags)

    def resolve_labels(self, inp: CommandInput) -> dict[str, str]:
        """라벨 조회 (지연 라벨 제외)

        모든 ID 역할은 최소한 원본 ID를 라벨로 가집니다.
        """
        labels: dict[str, str] = {}
        for label_spec in self.spec.labels:
            if label_spec.lazy:
                continue
            labels[label_spec.role] = self._resolve(label_spec, inp)

        for role, value in inp.ids.items():
            labels.setdefault(role, value)

        return labels

    def confirm_if_destructive(self, inp: CommandInput, labels: Mapping[str, str], assume_yes: bool) -> bool:
        """destructive 명령 확인

        Returns:
            계속 진행하면 True

        Raises:
            PromptError: 확인 입력 실패
        """
        if not self.spec.destructive or assume_yes:
            return True

        message = t(self.spec.confirm_key or "", **labels)
        return self._prompt(message)

    def execute(self, inp: CommandInput) -> Any:
        """원격 호출 1회

        Raises:
            RemoteError: 호출 실패 (operation 접두어 포함)
        """
        client = self._get_client()
        logger.debug("원격 호출: %s", self.spec.operation)
        try:
            return self.spec.call(client, inp)
        except Exception as e:
            raise RemoteError(self.spec.operation, cause=e) from e

    def render(self, inp: CommandInput, labels: dict[str, str], result: Any) -> None:
        """결과 출력 (limit 절단 후)"""
        if isinstance(result, list):
            result = truncate(result, inp.limit)

        ctx = RenderContext(
            input=inp,
            labels=dict(labels),
            printer=self.printer,
            label_resolver=lambda role: self._resolve_lazy(role, inp),
        )
        self.spec.render(result, ctx)

    # =========================================================================
    # 내부 헬퍼
    # =========================================================================

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(self.flags)
        return self._client

    def _resolve(self, label_spec: LabelSpec, inp: CommandInput) -> str:
        return resolve_or_default(
            lambda: label_spec.lookup(self._get_client(), inp),
            inp.id_for(label_spec.role),
            role=label_spec.role,
        )

    def _resolve_lazy(self, role: str, inp: CommandInput) -> str:
        label_spec = self.spec.label_spec(role)
        if label_spec is None:
            return inp.id_for(role)
        return self._resolve(label_spec, inp)

    def _transition(self, state: PipelineState) -> None:
        logger.debug("%s: %s -> %s", "/".join(self.spec.path), self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _fail(self, error: CLIError) -> int:
        self._transition(PipelineState.FAILED)
        logger.debug("명령 실패: %s", error.to_dict(), exc_info=error)
        self.printer.error(str(error))
        return EXIT_ERROR
