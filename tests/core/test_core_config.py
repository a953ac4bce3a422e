"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import dataclasses

import pytest

from core.config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_PROFILE,
    RunSettings,
    get_version,
)
from core.exceptions import ConfigError


class TestRunSettings:
    """RunSettings 테스트"""

    def test_defaults(self):
        settings = RunSettings()

        assert settings.profile == DEFAULT_PROFILE
        assert settings.max_workers == DEFAULT_MAX_WORKERS
        assert settings.all_regions is False
        assert settings.output is None
        assert settings.show_progress is True

    def test_frozen(self):
        """실행 중 변경 불가"""
        settings = RunSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.max_workers = 1  # type: ignore[misc]

    @pytest.mark.parametrize("workers", [0, -1])
    def test_invalid_workers(self, workers):
        with pytest.raises(ConfigError) as exc_info:
            RunSettings(max_workers=workers)
        assert exc_info.value.config_key == "max_workers"

    def test_single_worker_allowed(self):
        assert RunSettings(max_workers=1).max_workers == 1

    def test_invalid_lookup_timeout(self):
        with pytest.raises(ConfigError) as exc_info:
            RunSettings(lookup_timeout=0)
        assert exc_info.value.config_key == "lookup_timeout"

    def test_invalid_connect_timeout(self):
        with pytest.raises(ConfigError):
            RunSettings(connect_timeout=-1)

    def test_empty_profile(self):
        with pytest.raises(ConfigError):
            RunSettings(profile="")


class TestGetVersion:
    """get_version 테스트"""

    def test_reads_version_file(self):
        version = get_version()
        assert version
        assert version.count(".") >= 1
