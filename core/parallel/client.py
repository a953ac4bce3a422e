"""
core/parallel/client.py - boto3 client 생성 헬퍼

타임아웃, 연결 풀, 재시도 횟수가 설정된 boto3 client를 생성합니다.

마지막 호출 시각 조회는 재시도하지 않으므로 max_attempts=1로 생성하고,
읽기 타임아웃이 곧 조회 1건의 타임아웃이 됩니다.

Example:
    from core.parallel.client import get_client

    # 목록 조회용 (standard retry, 최대 3회)
    lambda_client = get_client(session, "lambda", region_name="ap-northeast-2")

    # 조회 1회, 10초 타임아웃
    logs = get_client(session, "logs", region_name="us-east-1", max_attempts=1, read_timeout=10)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

# 기본 설정
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 50  # 기본 max_workers와 동일


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """타임아웃/재시도가 설정된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (lambda, logs, ec2 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (1이면 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # boto3-stubs는 Literal 서비스명을 요구하므로 Any로 캐스팅
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
