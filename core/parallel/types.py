"""
core/parallel/types.py - 병렬 보강 작업 타입 정의

주요 구성 요소:
- ErrorCategory: 조회 실패 분류
- EnrichmentJob: 워커 1회 처리 단위 (함수 이름, 리전, 레코드 인덱스)
- EnrichmentResult: 보강 실행 결과 집계
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import CollectedError


class ErrorCategory(Enum):
    """조회 실패 분류"""

    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    TIMEOUT = "timeout"
    EXPIRED_TOKEN = "expired_token"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EnrichmentJob:
    """마지막 호출 시각 조회 작업

    Attributes:
        function_name: 대상 Lambda 함수 이름
        region: 대상 리전 (로그 조회도 이 리전에서 수행)
        index: 공유 레코드 리스트에서의 위치
    """

    function_name: str
    region: str
    index: int


@dataclass
class EnrichmentResult:
    """보강 실행 결과

    Attributes:
        total: 전체 작업 수
        found: 호출 시각을 찾은 함수 수
        no_data: 호출 이력이 없는 함수 수 (sentinel 기록)
        failed: 조회 실패로 비어있는 함수 수
        workers: 실제 실행된 워커 수
        duration_ms: 전체 소요 시간 (밀리초)
        errors: 수집된 조회 실패 목록
    """

    total: int = 0
    found: int = 0
    no_data: int = 0
    failed: int = 0
    workers: int = 0
    duration_ms: float = 0.0
    errors: list[CollectedError] = field(default_factory=list)

    @property
    def completed(self) -> int:
        """처리 완료된 작업 수"""
        return self.found + self.no_data + self.failed

    @property
    def success_count(self) -> int:
        """값이 기록된 작업 수 (timestamp 또는 sentinel)"""
        return self.found + self.no_data

    def __str__(self) -> str:
        return (
            f"total={self.total}, found={self.found}, no_data={self.no_data}, "
            f"failed={self.failed}, workers={self.workers}, {self.duration_ms:.0f}ms"
        )
