"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_sessions, page_factory):
        # fake_sessions: 리전별 mock client를 돌려주는 세션 팩토리
        pass
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트용 AWS 환경 변수 (실제 계정 접근 방지)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("LLISTER_PROFILE", raising=False)
    monkeypatch.delenv("LLISTER_MAX_WORKERS", raising=False)
    yield


# =============================================================================
# 테스트 데이터 팩토리
# =============================================================================


def make_function(name: str, region: str = "ap-northeast-2", **overrides: Any) -> Dict[str, Any]:
    """ListFunctions 응답의 함수 항목 생성"""
    fn = {
        "FunctionName": name,
        "FunctionArn": f"arn:aws:lambda:{region}:123456789012:function:{name}",
        "Runtime": "python3.12",
        "Role": "arn:aws:iam::123456789012:role/lambda-role",
        "Handler": "index.handler",
        "Description": f"{name} description",
        "LastModified": "2024-01-01T00:00:00.000+0000",
    }
    fn.update(overrides)
    return fn


def make_page(names: List[str], region: str = "ap-northeast-2", next_marker: Optional[str] = None) -> Dict[str, Any]:
    """ListFunctions 페이지 응답 생성"""
    page: Dict[str, Any] = {"Functions": [make_function(n, region) for n in names]}
    if next_marker:
        page["NextMarker"] = next_marker
    return page


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )


@pytest.fixture
def page_factory():
    """ListFunctions 페이지 생성 헬퍼 픽스처"""
    return make_page


@pytest.fixture
def client_error():
    """ClientError 생성 헬퍼 픽스처"""
    return create_mock_client_error


# =============================================================================
# 세션 팩토리 대역
# =============================================================================


class FakeSessionFactory:
    """SessionFactory 대역

    (서비스, 리전)별로 등록된 mock client를 반환하고 호출을 기록합니다.
    """

    def __init__(self, default_region: Optional[str] = "ap-northeast-2", profile: str = "test"):
        self.profile = profile
        self.default_region = default_region
        self.clients: Dict[Tuple[str, Optional[str]], Any] = {}
        self.calls: List[Tuple[str, Optional[str]]] = []

    def register(self, service_name: str, region_name: Optional[str], client: Any) -> Any:
        self.clients[(service_name, region_name)] = client
        return client

    def client(self, service_name: str, region_name: Optional[str] = None, **kwargs: Any) -> Any:
        self.calls.append((service_name, region_name))
        key = (service_name, region_name)
        if key not in self.clients:
            self.clients[key] = MagicMock(name=f"{service_name}-{region_name}")
        return self.clients[key]


@pytest.fixture
def fake_sessions():
    """기본 리전 ap-northeast-2의 세션 팩토리 대역"""
    return FakeSessionFactory()


@pytest.fixture
def lambda_client_factory():
    """페이지 목록을 순서대로 돌려주는 lambda client mock 생성기"""

    def _factory(*pages: Dict[str, Any]) -> MagicMock:
        client = MagicMock()
        client.list_functions.side_effect = list(pages)
        return client

    return _factory


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials(monkeypatch):
        """moto 사용 시 AWS 자격 증명 설정"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
        monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")

    @pytest.fixture
    def moto_logs(aws_credentials):
        """moto를 사용한 CloudWatch Logs 모킹"""
        with moto.mock_aws():
            import boto3

            yield boto3.client("logs", region_name="ap-northeast-2")

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_logs():
        pytest.skip("moto not installed")
