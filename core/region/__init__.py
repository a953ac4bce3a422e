# core/region - 조회 대상 리전 결정
"""
리전 모듈

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = ["RegionInfo", "list_usable_regions", "resolve_regions"]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in __all__:
        from . import availability

        return getattr(availability, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
