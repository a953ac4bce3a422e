# core/tools/io/csv - CSV 파일 출력
"""
CSV 파일 출력 유틸리티

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    "default_output_path",
    "export_csv",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in __all__:
        from . import writer

        return getattr(writer, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
