"""
core/shared/aws/lambda_/last_invocation.py - Lambda 마지막 호출 시각 조회

CloudWatch Logs의 /aws/lambda/<함수명> 로그 그룹에서
마지막 이벤트 시각이 가장 최근인 로그 스트림 1개를 조회합니다.

조회 결과:
- FOUND: 로그 스트림의 lastEventTimestamp
- NO_LOG_GROUP: 로그 그룹 없음 (한 번도 실행되지 않았거나 로그 삭제됨)
- NO_LOG_STREAM: 로그 그룹은 있지만 스트림 없음
- FAILED: 그 외 에러 (쓰로틀링, 타임아웃, 권한 등)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from core.config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_LOOKUP_TIMEOUT,
    DEFAULT_MAX_WORKERS,
    LAMBDA_LOG_GROUP_PREFIX,
)
from core.exceptions import is_log_group_missing

if TYPE_CHECKING:
    from core.auth.session import SessionFactory

logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    """마지막 호출 시각 조회 결과 상태"""

    FOUND = "found"
    NO_LOG_GROUP = "no_log_group"
    NO_LOG_STREAM = "no_log_stream"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupOutcome:
    """마지막 호출 시각 조회 결과

    Attributes:
        status: 조회 결과 상태
        timestamp: 마지막 이벤트 시각 (FOUND일 때만)
        error: 조회 실패 원인 (FAILED일 때만)
    """

    status: LookupStatus
    timestamp: datetime | None = None
    error: BaseException | None = None

    @property
    def has_no_history(self) -> bool:
        """호출 이력 없음이 확인된 결과인지"""
        return self.status in (LookupStatus.NO_LOG_GROUP, LookupStatus.NO_LOG_STREAM)

    @classmethod
    def found(cls, timestamp: datetime) -> LookupOutcome:
        return cls(LookupStatus.FOUND, timestamp=timestamp)

    @classmethod
    def failed(cls, error: BaseException) -> LookupOutcome:
        return cls(LookupStatus.FAILED, error=error)


def log_group_name(function_name: str) -> str:
    """Lambda 함수의 CloudWatch 로그 그룹 이름"""
    return f"{LAMBDA_LOG_GROUP_PREFIX}{function_name}"


def epoch_ms_to_datetime(epoch_ms: int) -> datetime:
    """epoch 밀리초를 초 단위로 절삭한 UTC datetime으로 변환"""
    return datetime.fromtimestamp(epoch_ms // 1000, tz=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO 8601 (초 단위, 숫자 오프셋) 문자열로 포맷

    Example:
        2024-01-01T09:30:00+00:00
    """
    return value.isoformat(timespec="seconds")


def lookup_last_invocation(logs_client, function_name: str) -> LookupOutcome:
    """Lambda 함수의 마지막 호출 시각 조회

    DescribeLogStreams(orderBy=LastEventTime, descending=True, limit=1)로
    가장 최근 스트림 하나만 조회합니다. 예외를 밖으로 던지지 않고
    모든 실패를 LookupOutcome.FAILED로 변환합니다.

    Args:
        logs_client: 함수 리전의 boto3 logs client
        function_name: Lambda 함수 이름

    Returns:
        LookupOutcome
    """
    group = log_group_name(function_name)

    try:
        response = logs_client.describe_log_streams(
            logGroupName=group,
            orderBy="LastEventTime",
            descending=True,
            limit=1,
        )
    except ClientError as e:
        if is_log_group_missing(e):
            logger.debug(f"CloudWatch 로그 그룹 없음: {function_name}")
            return LookupOutcome(LookupStatus.NO_LOG_GROUP)
        return LookupOutcome.failed(e)
    except BotoCoreError as e:
        # 타임아웃, 연결 실패 등
        return LookupOutcome.failed(e)

    streams = response.get("logStreams", [])
    if not streams:
        logger.debug(f"로그 스트림 없음: {function_name}")
        return LookupOutcome(LookupStatus.NO_LOG_STREAM)

    last_event_ms = streams[0].get("lastEventTimestamp")
    if last_event_ms is None:
        # 이벤트가 아직 기록되지 않은 스트림
        logger.debug(f"lastEventTimestamp 없음: {function_name}")
        return LookupOutcome(LookupStatus.NO_LOG_STREAM)

    timestamp = epoch_ms_to_datetime(last_event_ms)
    logger.debug(
        f"마지막 호출 시각: {function_name} (log_group={group}, "
        f"lastEventTimestamp={last_event_ms}, formatted={format_timestamp(timestamp)})"
    )
    return LookupOutcome.found(timestamp)


class CloudWatchLastInvocationLookup:
    """리전별 CloudWatch Logs 클라이언트로 조회하는 lookup 함수 객체

    작업마다 작업의 리전으로 클라이언트를 얻습니다(워커 스레드/리전별 캐시).
    클라이언트는 재시도 없이(max_attempts=1) 생성되며 read_timeout이 조회 1건의 타임아웃입니다.

    Example:
        lookup = CloudWatchLastInvocationLookup(SessionFactory("prod"), read_timeout=10)
        outcome = lookup("my-function", "ap-northeast-2")
    """

    def __init__(
        self,
        sessions: SessionFactory,
        read_timeout: float = DEFAULT_LOOKUP_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        max_pool_connections: int = DEFAULT_MAX_WORKERS,
    ):
        self.sessions = sessions
        self.read_timeout = read_timeout
        self.connect_timeout = connect_timeout
        self.max_pool_connections = max_pool_connections

    def __call__(self, function_name: str, region: str) -> LookupOutcome:
        try:
            logs_client = self.sessions.cached_client(
                "logs",
                region,
                max_attempts=1,
                read_timeout=self.read_timeout,
                connect_timeout=self.connect_timeout,
                max_pool_connections=self.max_pool_connections,
            )
        except BotoCoreError as e:
            return LookupOutcome.failed(e)

        return lookup_last_invocation(logs_client, function_name)
