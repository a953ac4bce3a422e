"""
core/parallel/errors.py - 조회 에러 분류 및 수집

병렬 보강 중 발생하는 함수별 조회 실패를 일관되게 분류하고 수집합니다.
조회 실패는 치명적이지 않으며, 수집된 에러는 실행 종료 후 요약 보고에 사용됩니다.

주요 구성 요소:
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기
- categorize_error: 예외를 ErrorCategory로 분류

Example:
    collector = ErrorCollector("logs")

    try:
        logs.describe_log_streams(logGroupName=name, limit=1)
    except ClientError as e:
        collector.collect(e, function_name, region, "describe_log_streams")

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime

from core.exceptions import get_error_code, is_access_denied, is_not_found, is_throttling

from .types import ErrorCategory

logger = logging.getLogger(__name__)


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        function_name: Lambda 함수 이름
        region: AWS 리전
        service: AWS 서비스 이름 (예: "logs")
        operation: API 작업 이름 (예: "describe_log_streams")
        error_code: AWS 에러 코드 또는 예외 클래스명
        error_message: 에러 메시지
        category: 에러 카테고리
    """

    timestamp: datetime
    function_name: str
    region: str
    service: str
    operation: str
    error_code: str
    error_message: str
    category: ErrorCategory

    def __str__(self) -> str:
        loc = f"{self.region}/{self.function_name}"
        return f"{loc} - {self.service}.{self.operation}: {self.error_code}"


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류

    ClientError의 경우 response에서 에러 코드를 추출하고,
    네트워크/타임아웃 에러는 타입으로 분류합니다.

    Args:
        error: 분류할 예외

    Returns:
        에러 카테고리
    """
    if is_throttling(error):
        return ErrorCategory.THROTTLING
    if is_access_denied(error):
        return ErrorCategory.ACCESS_DENIED
    if is_not_found(error):
        return ErrorCategory.NOT_FOUND

    code = get_error_code(error)
    if "Timeout" in code:
        return ErrorCategory.TIMEOUT
    if code in ("ExpiredToken", "ExpiredTokenException"):
        return ErrorCategory.EXPIRED_TOKEN
    if code in ("InvalidParameterException", "ValidationException"):
        return ErrorCategory.INVALID_REQUEST
    if code in ("ServiceUnavailableException", "ServiceUnavailable", "InternalError"):
        return ErrorCategory.SERVICE_ERROR

    # botocore 연결/타임아웃 에러
    from botocore.exceptions import ConnectTimeoutError, EndpointConnectionError, ReadTimeoutError

    if isinstance(error, (ReadTimeoutError, ConnectTimeoutError, TimeoutError)):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (EndpointConnectionError, ConnectionError, OSError)):
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


class ErrorCollector:
    """스레드 세이프 에러 수집기

    여러 워커 스레드에서 발생하는 조회 실패를 안전하게 수집하고
    요약 보고를 제공합니다.
    """

    def __init__(self, service: str):
        """초기화

        Args:
            service: AWS 서비스 이름 (수집된 에러에 공통 적용)
        """
        self.service = service
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: BaseException,
        function_name: str,
        region: str,
        operation: str,
    ) -> CollectedError:
        """예외를 수집하고 DEBUG 레벨로 로깅

        Args:
            error: 발생한 예외 (ClientError, BotoCoreError 등)
            function_name: Lambda 함수 이름
            region: AWS 리전
            operation: API 작업 이름

        Returns:
            수집된 CollectedError
        """
        response = getattr(error, "response", None)
        if isinstance(response, dict):
            error_message = response.get("Error", {}).get("Message", str(error))
        else:
            error_message = str(error)

        collected = CollectedError(
            timestamp=datetime.now(),
            function_name=function_name,
            region=region,
            service=self.service,
            operation=operation,
            error_code=get_error_code(error),
            error_message=error_message,
            category=categorize_error(error),
        )

        with self._lock:
            self._errors.append(collected)

        logger.debug(f"{collected} ({error_message})")

        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        """에러 존재 여부"""
        with self._lock:
            return len(self._errors) > 0

    def get_summary(self) -> str:
        """카테고리별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "에러 3건 (throttling: 1건, timeout: 2건)")
        """
        with self._lock:
            if not self._errors:
                return "에러 없음"

            by_category: dict[str, int] = {}
            for e in self._errors:
                by_category[e.category.value] = by_category.get(e.category.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_category.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"

    def clear(self) -> None:
        """수집된 에러 전체 초기화"""
        with self._lock:
            self._errors.clear()
