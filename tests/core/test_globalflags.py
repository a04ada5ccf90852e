"""
tests/core/test_globalflags.py - core/globalflags.py 테스트
"""

import pytest

from core.exceptions import FlagValidationError
from core.globalflags import GlobalFlags, OutputFormat, parse_global_flags


class TestOutputFormat:
    """출력 형식 파싱"""

    @pytest.mark.parametrize("value,expected", [("json", OutputFormat.JSON), ("TABLE", OutputFormat.TABLE)])
    def test_parse(self, value, expected):
        assert OutputFormat.parse(value) is expected

    def test_default(self):
        assert OutputFormat.parse(None) is OutputFormat.TABLE

    def test_invalid(self):
        with pytest.raises(FlagValidationError) as exc_info:
            OutputFormat.parse("yaml")

        assert exc_info.value.flag == "output-format"


class TestParseGlobalFlags:
    """플래그 > 환경 변수 > 설정 파일"""

    def test_defaults(self):
        flags = parse_global_flags(config={})

        assert flags == GlobalFlags()
        assert flags.project_id == ""
        assert flags.output_format is OutputFormat.TABLE
        assert flags.verbosity == "warning"

    def test_flag_wins(self, monkeypatch):
        monkeypatch.setenv("STACKIT_PROJECT_ID", "from-env")

        flags = parse_global_flags(project_id="from-flag", config={"project_id": "from-file"})

        assert flags.project_id == "from-flag"

    def test_env_over_file(self, monkeypatch):
        monkeypatch.setenv("STACKIT_PROJECT_ID", "from-env")

        assert parse_global_flags(config={"project_id": "from-file"}).project_id == "from-env"

    def test_file_values(self):
        flags = parse_global_flags(config={"project_id": "p", "output_format": "json", "verbosity": "DEBUG"})

        assert flags.project_id == "p"
        assert flags.output_format is OutputFormat.JSON
        assert flags.verbosity == "debug"

    def test_loads_config_file(self):
        from core.config import save_cli_config

        save_cli_config({"project_id": "saved"})

        assert parse_global_flags().project_id == "saved"

    def test_invalid_verbosity(self):
        with pytest.raises(FlagValidationError):
            parse_global_flags(verbosity="loud", config={})


class TestOverride:
    """명령 단위 플래그 덮어쓰기"""

    def test_override(self):
        base = GlobalFlags(project_id="root")

        flags = base.override(project_id="leaf", output_format="json", assume_yes=True)

        assert flags.project_id == "leaf"
        assert flags.output_format is OutputFormat.JSON
        assert flags.assume_yes is True
        assert base.project_id == "root"

    def test_no_changes_returns_same(self):
        base = GlobalFlags(project_id="root", assume_yes=True)

        assert base.override() is base
