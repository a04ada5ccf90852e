"""
services - 관리형 서비스 명령 패키지

각 하위 패키지는 다음 메타데이터를 정의합니다.

    SERVICE  = {"name": ..., "display_name": ..., "description_key": ..., "aliases": [...]}
    CLIENT   = ApiClient 서브클래스
    COMMANDS = [CommandSpec, ...]

core.discovery.discover_services()가 이 패키지를 탐색합니다.
"""
