"""
core/pipeline/types.py - 명령 파이프라인 데이터 타입

CommandInput: 검증이 끝난 한 번의 명령 실행 입력
PipelineState: 실행 상태 (상태 전이 기록용)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from core.globalflags import GlobalFlags


class PipelineState(str, Enum):
    """명령 실행 상태

    ValidatingInput → ResolvingLabels → (ConfirmPrompt →) Calling → Rendering → Done
    취소 시 ConfirmPrompt에서 Done으로, 복구 불가 오류 시 Failed로 종료합니다.
    """

    VALIDATING_INPUT = "validating_input"
    RESOLVING_LABELS = "resolving_labels"
    CONFIRM_PROMPT = "confirm_prompt"
    CALLING = "calling"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class CommandInput:
    """검증된 명령 입력

    Attributes:
        project_id: 프로젝트 ID (항상 비어있지 않음)
        ids: 역할별 리소스 ID (예: {"instance": "...", "user": "..."})
        limit: 최대 출력 항목 수 (None이면 제한 없음, 설정 시 1 이상)
        flags: 전역 플래그
    """

    project_id: str
    ids: dict[str, str] = field(default_factory=dict)
    limit: int | None = None
    flags: GlobalFlags = field(default_factory=GlobalFlags)

    def id_for(self, role: str) -> str:
        """역할에 해당하는 원본 ID ("project"는 project_id)"""
        if role == "project":
            return self.project_id
        return self.ids.get(role, "")

    def __getitem__(self, role: str) -> str:
        return self.id_for(role)
