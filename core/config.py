"""
core/config.py - 중앙 설정 관리

실행 설정(RunSettings)과 애플리케이션 전역 상수를 정의합니다.
RunSettings는 frozen dataclass로, 워커 스레드가 시작된 후에는 변경되지 않습니다.

Usage:
    from core.config import RunSettings, DEFAULT_MAX_WORKERS

    settings = RunSettings(profile="prod", all_regions=True, max_workers=20)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# =============================================================================
# 상수
# =============================================================================

DEFAULT_PROFILE = "default"
DEFAULT_MAX_WORKERS = 50

# 조회 타임아웃 (초)
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_LOOKUP_TIMEOUT = 30

# Lambda 로그 그룹 이름 접두사
LAMBDA_LOG_GROUP_PREFIX = "/aws/lambda/"

# 사용 가능한 리전으로 간주하는 opt-in 상태
USABLE_OPT_IN_STATUSES = ("opt-in-not-required", "opted-in")

# 환경 변수
ENV_PROFILE = "LLISTER_PROFILE"
ENV_MAX_WORKERS = "LLISTER_MAX_WORKERS"

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def get_version() -> str:
    """version.txt에서 버전 문자열 반환"""
    version_file = _PROJECT_ROOT / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug(f"버전 파일 읽기 실패: {e}")
        return "0.0.0"


@dataclass(frozen=True)
class RunSettings:
    """실행 설정

    Attributes:
        debug: 디버그 로그 출력 여부
        profile: AWS 프로파일 이름
        all_regions: 계정에서 사용 가능한 모든 리전 조회 여부
        output: 출력 CSV 파일 경로 (None이면 타임스탬프 기반 자동 생성)
        max_workers: 마지막 호출 시각 조회 최대 동시 워커 수
        lookup_timeout: 조회 1건당 읽기 타임아웃 (초)
        connect_timeout: 연결 타임아웃 (초)
        show_progress: 진행 표시줄 출력 여부
    """

    debug: bool = False
    profile: str = DEFAULT_PROFILE
    all_regions: bool = False
    output: str | None = None
    max_workers: int = DEFAULT_MAX_WORKERS
    lookup_timeout: float = DEFAULT_LOOKUP_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    show_progress: bool = True

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be >= 1, got {self.max_workers}", config_key="max_workers")
        if self.lookup_timeout <= 0:
            raise ConfigError(
                f"lookup_timeout must be > 0, got {self.lookup_timeout}",
                config_key="lookup_timeout",
            )
        if self.connect_timeout <= 0:
            raise ConfigError(
                f"connect_timeout must be > 0, got {self.connect_timeout}",
                config_key="connect_timeout",
            )
        if not self.profile:
            raise ConfigError("profile must not be empty", config_key="profile")
