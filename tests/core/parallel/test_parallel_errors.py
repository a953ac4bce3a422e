"""
tests/core/parallel/test_parallel_errors.py - core/parallel/errors.py 테스트
"""

import threading
from datetime import datetime

from botocore.exceptions import ClientError, EndpointConnectionError, ReadTimeoutError

from core.parallel.errors import (
    CollectedError,
    ErrorCollector,
    categorize_error,
)
from core.parallel.types import ErrorCategory


def _client_error(code: str, message: str = "error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "DescribeLogStreams")


class TestCollectedError:
    """CollectedError 데이터 클래스 테스트"""

    def _make(self) -> CollectedError:
        return CollectedError(
            timestamp=datetime(2024, 1, 1, 12, 0, 0),
            function_name="orders-api",
            region="us-east-1",
            service="logs",
            operation="describe_log_streams",
            error_code="ThrottlingException",
            error_message="Rate exceeded",
            category=ErrorCategory.THROTTLING,
        )

    def test_str(self):
        """문자열 표현에 위치와 에러 코드 포함"""
        text = str(self._make())
        assert "us-east-1/orders-api" in text
        assert "logs.describe_log_streams" in text
        assert "ThrottlingException" in text


class TestCategorizeError:
    """categorize_error 테스트"""

    def test_throttling(self):
        assert categorize_error(_client_error("ThrottlingException")) == ErrorCategory.THROTTLING
        assert categorize_error(_client_error("TooManyRequestsException")) == ErrorCategory.THROTTLING

    def test_access_denied(self):
        assert categorize_error(_client_error("AccessDeniedException")) == ErrorCategory.ACCESS_DENIED

    def test_not_found(self):
        assert categorize_error(_client_error("ResourceNotFoundException")) == ErrorCategory.NOT_FOUND

    def test_expired_token(self):
        assert categorize_error(_client_error("ExpiredTokenException")) == ErrorCategory.EXPIRED_TOKEN

    def test_invalid_request(self):
        assert categorize_error(_client_error("InvalidParameterException")) == ErrorCategory.INVALID_REQUEST

    def test_service_error(self):
        assert categorize_error(_client_error("ServiceUnavailableException")) == ErrorCategory.SERVICE_ERROR

    def test_read_timeout(self):
        """botocore 읽기 타임아웃은 TIMEOUT"""
        error = ReadTimeoutError(endpoint_url="https://logs.us-east-1.amazonaws.com")
        assert categorize_error(error) == ErrorCategory.TIMEOUT

    def test_endpoint_connection(self):
        """엔드포인트 연결 실패는 NETWORK"""
        error = EndpointConnectionError(endpoint_url="https://logs.us-east-1.amazonaws.com")
        assert categorize_error(error) == ErrorCategory.NETWORK

    def test_unknown(self):
        assert categorize_error(RuntimeError("boom")) == ErrorCategory.UNKNOWN


class TestErrorCollector:
    """ErrorCollector 테스트"""

    def test_empty(self):
        """초기 상태"""
        collector = ErrorCollector("logs")
        assert collector.has_errors is False
        assert collector.errors == []
        assert collector.get_summary() == "에러 없음"

    def test_collect_client_error(self):
        """ClientError 수집 시 코드와 메시지 추출"""
        collector = ErrorCollector("logs")
        collected = collector.collect(
            _client_error("ThrottlingException", "Rate exceeded"),
            "orders-api",
            "us-east-1",
            "describe_log_streams",
        )

        assert collected.error_code == "ThrottlingException"
        assert collected.error_message == "Rate exceeded"
        assert collected.service == "logs"
        assert collected.category == ErrorCategory.THROTTLING
        assert collector.has_errors is True

    def test_collect_plain_exception(self):
        """일반 예외는 클래스명을 코드로 사용"""
        collector = ErrorCollector("logs")
        collected = collector.collect(ValueError("bad"), "fn", "eu-west-1", "describe_log_streams")

        assert collected.error_code == "ValueError"
        assert collected.error_message == "bad"

    def test_summary_by_category(self):
        """카테고리별 요약"""
        collector = ErrorCollector("logs")
        collector.collect(_client_error("ThrottlingException"), "a", "us-east-1", "op")
        collector.collect(_client_error("ThrottlingException"), "b", "us-east-1", "op")
        collector.collect(_client_error("AccessDeniedException"), "c", "eu-west-1", "op")

        assert collector.get_summary() == "에러 3건 (access_denied: 1건, throttling: 2건)"

    def test_collect_logs_at_debug(self, caplog):
        """수집된 에러는 DEBUG 레벨로만 기록"""
        collector = ErrorCollector("logs")

        with caplog.at_level("DEBUG", logger="core.parallel.errors"):
            collector.collect(_client_error("ThrottlingException", "Rate exceeded"), "a", "us-east-1", "op")

        assert [r.levelname for r in caplog.records] == ["DEBUG"]
        assert "us-east-1/a" in caplog.records[0].getMessage()

    def test_errors_returns_copy(self):
        """errors는 복사본 반환"""
        collector = ErrorCollector("logs")
        collector.collect(RuntimeError("x"), "a", "us-east-1", "op")

        snapshot = collector.errors
        snapshot.clear()
        assert len(collector.errors) == 1

    def test_clear(self):
        """초기화"""
        collector = ErrorCollector("logs")
        collector.collect(RuntimeError("x"), "a", "us-east-1", "op")
        collector.clear()
        assert collector.has_errors is False

    def test_thread_safety(self):
        """여러 스레드에서 동시에 수집"""
        collector = ErrorCollector("logs")

        def worker(n: int):
            for i in range(50):
                collector.collect(RuntimeError(f"{n}-{i}"), f"fn-{n}-{i}", "us-east-1", "op")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(collector.errors) == 400
