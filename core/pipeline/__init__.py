"""
core/pipeline - 명령 실행 파이프라인

Validate → ResolveLabels → ConfirmIfDestructive → Execute → Render

    descriptor.py  명령 디스크립터 (CommandSpec, ArgSpec, FlagSpec, LabelSpec)
    executor.py    CommandExecutor (단계 실행, 상태 기록, 종료 코드)
    labels.py      best-effort 라벨 조회
    output.py      출력 전략 (TableView, DetailView, MessageView)
    types.py       CommandInput, PipelineState
    validation.py  UUID / --limit 검증
"""
