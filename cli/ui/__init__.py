# cli/ui - TUI 컴포넌트 (rich, questionary)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들

    console.py  콘솔 출력, 로깅 설정, ConsolePrinter
    tables.py   그룹 구분선 / 셀 병합 테이블
    confirm.py  파괴적 작업 확인 프롬프트
"""
