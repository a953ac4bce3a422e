"""
core/shared/aws/lambda_ - Lambda 인벤토리 공통 모듈

Lambda 함수 레코드, 목록 수집, 마지막 호출 시각 조회 로직
"""

from .collector import collect_functions, list_region_functions
from .last_invocation import (
    LookupOutcome,
    LookupStatus,
    format_timestamp,
    log_group_name,
    lookup_last_invocation,
)
from .models import COLUMNS, NO_DATA, FunctionRecord, get_title_fields

__all__: list[str] = [
    # models
    "FunctionRecord",
    "COLUMNS",
    "NO_DATA",
    "get_title_fields",
    # collector
    "collect_functions",
    "list_region_functions",
    # last_invocation
    "LookupStatus",
    "LookupOutcome",
    "lookup_last_invocation",
    "log_group_name",
    "format_timestamp",
]
