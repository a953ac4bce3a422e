"""
core/parallel - 병렬 처리 모듈

Lambda 함수별 마지막 호출 시각 조회를 고정 크기 워커 풀로 병렬 처리합니다.

주요 구성 요소:
- InvocationTimeEnricher: 크기 제한 큐 + 워커 스레드 + join 기반 보강기
- enrich_last_invoked: 간편한 보강 함수
- ErrorCollector: 스레드 세이프 조회 실패 수집기
- get_client: 타임아웃/재시도가 설정된 boto3 client 생성

Example:
    from core.parallel import enrich_last_invoked

    result = enrich_last_invoked(records, lookup, max_workers=20)
    print(f"조회: {result.found}, 이력 없음: {result.no_data}, 실패: {result.failed}")

    if result.errors:
        for err in result.errors:
            print(err)
"""

from .client import get_client
from .enricher import InvocationTimeEnricher, LookupFunc, build_jobs, enrich_last_invoked
from .errors import CollectedError, ErrorCollector, categorize_error
from .types import EnrichmentJob, EnrichmentResult, ErrorCategory

__all__: list[str] = [
    # Enricher
    "InvocationTimeEnricher",
    "LookupFunc",
    "build_jobs",
    "enrich_last_invoked",
    # Client
    "get_client",
    # Error handling
    "ErrorCollector",
    "CollectedError",
    "categorize_error",
    # Types
    "ErrorCategory",
    "EnrichmentJob",
    "EnrichmentResult",
]
