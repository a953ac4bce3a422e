"""
core/shared/aws/lambda_/collector.py - Lambda 함수 인벤토리 수집

리전 순서대로 ListFunctions를 NextMarker가 없을 때까지 페이지네이션하여
FunctionRecord 리스트를 만듭니다. 한 페이지라도 실패하면 ListingError를 발생시키며
부분 결과는 반환하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import ListingError, get_error_code

from .models import FunctionRecord

if TYPE_CHECKING:
    from core.auth.session import SessionFactory

logger = logging.getLogger(__name__)


def list_region_functions(lambda_client, region: str) -> list[FunctionRecord]:
    """단일 리전의 Lambda 함수 전체 목록 조회

    Args:
        lambda_client: 해당 리전의 boto3 lambda client
        region: 리전 코드 (레코드 태그용)

    Returns:
        FunctionRecord 리스트 (페이지 순서 유지)

    Raises:
        ListingError: 페이지 조회 실패 시
    """
    records: list[FunctionRecord] = []
    marker: str | None = None
    page_count = 0

    while True:
        kwargs = {"Marker": marker} if marker else {}
        try:
            page = lambda_client.list_functions(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise ListingError(
                f"Lambda 함수 목록 조회 실패 ({get_error_code(e)})",
                region=region,
                cause=e,
            ) from e

        page_count += 1
        for fn in page.get("Functions", []):
            records.append(FunctionRecord.from_api(fn, region))

        marker = page.get("NextMarker")
        if not marker:
            break

    logger.debug(f"[{region}] Lambda 함수 {len(records)}개 ({page_count} 페이지)")
    return records


def collect_functions(sessions: SessionFactory, regions: list[str]) -> list[FunctionRecord]:
    """모든 리전의 Lambda 함수 인벤토리 수집

    Args:
        sessions: 세션 팩토리
        regions: 조회할 리전 목록 (순서대로 조회)

    Returns:
        전체 FunctionRecord 리스트. 리스트 내 위치가 보강 단계의 인덱스가 됩니다.

    Raises:
        ListingError: 어느 리전이든 조회 실패 시
    """
    logger.info("Lambda 함수 목록 조회 중")

    records: list[FunctionRecord] = []
    for region in regions:
        logger.debug(f"Lambda 함수 조회: region={region}")
        try:
            lambda_client = sessions.client("lambda", region_name=region)
        except BotoCoreError as e:
            raise ListingError("Lambda 클라이언트 생성 실패", region=region, cause=e) from e
        records.extend(list_region_functions(lambda_client, region))

    logger.info(f"Lambda 함수 {len(records)}개 조회 완료 ({len(regions)}개 리전)")
    return records
