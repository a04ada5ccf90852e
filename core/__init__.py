"""
core - STACKIT CLI 인프라

명령 파이프라인, API 클라이언트, 설정, 예외 계층을 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── api/            # requests 기반 REST 클라이언트
    ├── pipeline/       # 명령 실행 파이프라인 (검증 → 라벨 → 확인 → 호출 → 출력)
    ├── config.py       # 중앙 설정 관리 (~/.stackit/cli-config.json)
    ├── discovery.py    # 서비스 발견
    ├── exceptions.py   # 통합 예외 계층
    └── globalflags.py  # 전역 플래그 모델

Usage:
    from core.pipeline import CommandExecutor
    from core.exceptions import RemoteError
"""
