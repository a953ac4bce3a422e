"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스와 botocore 에러 분류 헬퍼를 정의합니다.

예외 계층 구조:
    LListerError (베이스)
    ├── StageError (파이프라인 단계 실패 - 치명적)
    │   ├── RegionDiscoveryError
    │   ├── ListingError
    │   └── ExportError
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import ListingError

    try:
        page = client.list_functions()
    except ClientError as e:
        raise ListingError("Lambda 함수 목록 조회 실패", region=region, cause=e) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class LListerError(Exception):
    """기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 파이프라인 단계 예외 (치명적)
# =============================================================================


class StageError(LListerError):
    """파이프라인 단계 실패 예외

    발생 시 실행 전체가 중단되고 0이 아닌 종료 코드로 끝납니다.
    """

    stage = "unknown"

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, cause, details)
        self.details.setdefault("stage", self.stage)


class RegionDiscoveryError(StageError):
    """리전 목록 조회 실패"""

    stage = "region"


class ListingError(StageError):
    """Lambda 함수 목록 조회 실패

    한 페이지라도 실패하면 부분 결과 없이 발생합니다.
    """

    stage = "listing"

    def __init__(
        self,
        message: str,
        region: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.region = region
        if region:
            self.details["region"] = region


class ExportError(StageError):
    """출력 파일 생성/쓰기 실패"""

    stage = "export"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.path = path
        if path:
            self.details["path"] = path


class ConfigError(LListerError):
    """설정 관련 예외"""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


# =============================================================================
# 에러 분류 헬퍼
# =============================================================================


def get_error_code(error: BaseException | None) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    ClientError의 경우 response에서 Code를 추출하고,
    그 외에는 예외 클래스명을 반환합니다.

    Args:
        error: 예외 객체

    Returns:
        에러 코드 문자열
    """
    if error is None:
        return "Unknown"
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        code: str = response.get("Error", {}).get("Code", "Unknown")
        return code
    return error.__class__.__name__


def _error_message(error: BaseException) -> str:
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return str(response.get("Error", {}).get("Message", ""))
    return str(error)


def is_access_denied(error: BaseException) -> bool:
    """권한 부족 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        권한 부족 오류이면 True
    """
    access_denied_codes = {
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedOperation",
        "UnrecognizedClientException",
        "AuthorizationError",
    }
    return get_error_code(error) in access_denied_codes


def is_throttling(error: BaseException) -> bool:
    """쓰로틀링 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        쓰로틀링 오류이면 True
    """
    throttling_codes = {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "TooManyRequestsException",
        "RateExceeded",
    }
    return get_error_code(error) in throttling_codes


def is_not_found(error: BaseException) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        리소스 없음 오류이면 True
    """
    not_found_codes = {
        "ResourceNotFoundException",
        "NotFoundException",
        "NoSuchEntity",
    }
    return get_error_code(error) in not_found_codes


# CloudWatch Logs가 로그 그룹 부재 시 반환하는 메시지
LOG_GROUP_DOES_NOT_EXIST_MESSAGE = "The specified log group does not exist"


def is_log_group_missing(error: BaseException) -> bool:
    """CloudWatch Logs 로그 그룹이 존재하지 않는 오류인지 확인

    DescribeLogStreams는 로그 그룹이 없으면 ResourceNotFoundException을 반환합니다.
    메시지가 비어있는 응답도 로그 그룹 부재로 간주합니다.

    Args:
        error: 확인할 예외

    Returns:
        로그 그룹 부재 오류이면 True
    """
    if get_error_code(error) != "ResourceNotFoundException":
        return False
    message = _error_message(error)
    return not message or LOG_GROUP_DOES_NOT_EXIST_MESSAGE.lower() in message.lower()


def format_stage_error(error: StageError) -> str:
    """사용자에게 표시할 단계 에러 메시지 포맷팅

    Args:
        error: 단계 예외

    Returns:
        "[stage] message: cause" 형식 문자열
    """
    return f"[{error.stage}] {error}"
