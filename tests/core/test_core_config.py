"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import json
import os
import stat
from pathlib import Path

import pytest

from core.config import (
    CONFIG_KEYS,
    ENDPOINT_TEMPLATES,
    LogConfig,
    Settings,
    get_api_timeout,
    get_config_path,
    get_config_value,
    get_endpoint,
    get_env_int,
    get_project_root,
    get_version,
    load_cli_config,
    save_cli_config,
    set_config_value,
    settings,
    unset_config_value,
)
from core.exceptions import ConfigError


class TestSettings:
    """Settings 데이터클래스 테스트"""

    def test_settings_is_frozen(self):
        """설정이 불변인지 확인"""
        with pytest.raises(Exception):  # FrozenInstanceError
            settings.DEFAULT_REGION = "eu02"

    def test_default_values(self):
        """기본값 확인"""
        assert settings.DEFAULT_REGION == "eu01"
        assert settings.API_TIMEOUT == 30
        assert settings.DEFAULT_OUTPUT_FORMAT == "table"
        assert settings.CONFIG_FILE_NAME == "cli-config.json"

    def test_log_config(self):
        """로그 설정 기본값"""
        log = LogConfig()
        assert log.default_level == "warning"
        assert "urllib3" in log.quiet_loggers
        assert isinstance(Settings().LOG, LogConfig)


class TestProjectPaths:
    """프로젝트 경로 / 버전"""

    def test_get_project_root(self):
        """프로젝트 루트 경로"""
        root = get_project_root()
        assert isinstance(root, Path)
        assert (root / "core").exists()
        assert (root / "services").exists()

    def test_get_version(self):
        """version.txt 기반 버전"""
        version = get_version()
        parts = version.split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts[:2])


class TestEnvHelpers:
    """환경 변수 헬퍼"""

    def test_get_env_int(self, monkeypatch):
        monkeypatch.setenv("STACKIT_TEST_INT", "42")
        assert get_env_int("STACKIT_TEST_INT", 1) == 42

    def test_get_env_int_invalid(self, monkeypatch):
        """정수가 아니면 기본값"""
        monkeypatch.setenv("STACKIT_TEST_INT", "forty")
        assert get_env_int("STACKIT_TEST_INT", 7) == 7

    def test_api_timeout_from_env(self, monkeypatch):
        assert get_api_timeout() == settings.API_TIMEOUT
        monkeypatch.setenv("STACKIT_API_TIMEOUT", "5")
        assert get_api_timeout() == 5


class TestConfigFile:
    """사용자 설정 파일"""

    def test_config_path_override(self, config_dir):
        """STACKIT_CONFIG_DIR로 경로 재정의"""
        assert get_config_path() == config_dir / "cli-config.json"

    def test_missing_file_is_empty(self):
        assert load_cli_config() == {}

    def test_save_and_load(self, config_dir):
        path = save_cli_config({"project_id": "p-1"})

        assert path.exists()
        assert load_cli_config() == {"project_id": "p-1"}

    @pytest.mark.skipif(os.name == "nt", reason="POSIX 권한")
    def test_saved_file_owner_only(self):
        path = save_cli_config({"service_account_token": "secret"})

        mode = stat.S_IMODE(path.stat().st_mode)
        assert mode == 0o600

    def test_invalid_json(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "cli-config.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_cli_config()

    def test_non_object_json(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "cli-config.json").write_text(json.dumps(["a"]), encoding="utf-8")

        with pytest.raises(ConfigError):
            load_cli_config()

    def test_set_and_unset(self):
        set_config_value("region", "eu02")
        assert load_cli_config()["region"] == "eu02"

        assert unset_config_value("region") is True
        assert unset_config_value("region") is False
        assert "region" not in load_cli_config()

    def test_unknown_key(self):
        with pytest.raises(ConfigError):
            set_config_value("colour", "blue")

    def test_custom_endpoint_keys(self):
        for service in ENDPOINT_TEMPLATES:
            assert f"{service}_custom_endpoint" in CONFIG_KEYS


class TestConfigValue:
    """우선순위: 환경 변수 > 설정 파일 > 기본값"""

    def test_default(self):
        assert get_config_value("project_id", {}, default="none") == "none"

    def test_file_value(self):
        assert get_config_value("project_id", {"project_id": "file"}) == "file"

    def test_env_wins(self, monkeypatch):
        monkeypatch.setenv("STACKIT_PROJECT_ID", "env")

        assert get_config_value("project_id", {"project_id": "file"}, env="STACKIT_PROJECT_ID") == "env"

    def test_empty_file_value_uses_default(self):
        assert get_config_value("region", {"region": ""}, default="eu01") == "eu01"


class TestEndpoint:
    """서비스 엔드포인트"""

    def test_default_region(self):
        assert get_endpoint("mongodbflex", {}) == "https://mongodb.api.eu01.stackit.cloud"

    def test_region_from_config(self):
        url = get_endpoint("postgresflex", {"region": "eu02"})
        assert url == "https://postgres-flex-service.api.eu02.stackit.cloud"

    def test_region_from_env(self, monkeypatch):
        monkeypatch.setenv("STACKIT_REGION", "eu03")
        assert get_endpoint("opensearch", {"region": "eu02"}) == "https://opensearch.api.eu03.stackit.cloud"

    def test_custom_endpoint(self):
        config = {"opensearch_custom_endpoint": "http://localhost:8080/"}
        assert get_endpoint("opensearch", config) == "http://localhost:8080"

    def test_resource_manager_is_global(self):
        assert get_endpoint("resourcemanager", {"region": "eu02"}) == "https://resource-manager.api.stackit.cloud"

    def test_unknown_service(self):
        with pytest.raises(ConfigError):
            get_endpoint("dns", {})
