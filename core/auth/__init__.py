# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

공유 설정 파일(~/.aws/config, ~/.aws/credentials)의 프로파일로
boto3 세션을 만들고, 워커 스레드마다 별도 세션을 제공합니다.

사용 예시:
    from core.auth import SessionFactory

    sessions = SessionFactory(profile="prod")
    lambda_client = sessions.client("lambda", region_name="ap-northeast-2")

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 boto3가 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    "SessionFactory",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    "SessionFactory": (".session", "SessionFactory"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
