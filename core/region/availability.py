"""
core/region/availability.py - 조회 대상 리전 결정

--all-regions이면 EC2.describe_regions()로 계정에서 사용 가능한
(opt-in-not-required 또는 opted-in) 리전 전체를 조회하고,
아니면 프로파일 기본 리전 하나만 사용합니다.

리전 조회가 실패하면 RegionDiscoveryError를 발생시킵니다.
부분 목록이나 하드코딩된 폴백 목록은 사용하지 않습니다.

Usage:
    from core.region.availability import resolve_regions

    regions = resolve_regions(sessions, all_regions=True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from core.config import USABLE_OPT_IN_STATUSES
from core.exceptions import RegionDiscoveryError, get_error_code

if TYPE_CHECKING:
    from core.auth.session import SessionFactory

logger = logging.getLogger(__name__)


@dataclass
class RegionInfo:
    """리전 정보

    Attributes:
        region_name: 리전 코드 (예: "ap-northeast-2")
        endpoint: 리전 엔드포인트
        opt_in_status: 옵트인 상태 ("opt-in-not-required", "opted-in", "not-opted-in")
    """

    region_name: str
    endpoint: str = ""
    opt_in_status: str = "opt-in-not-required"

    @property
    def is_opted_in(self) -> bool:
        """사용 가능한 리전 여부 (옵트인 불필요 또는 옵트인 완료)"""
        return self.opt_in_status in USABLE_OPT_IN_STATUSES


def _dedupe(regions: list[str]) -> list[str]:
    """순서를 유지하며 중복/빈 값 제거"""
    seen: set[str] = set()
    result = []
    for region in regions:
        if region and region not in seen:
            seen.add(region)
            result.append(region)
    return result


def list_usable_regions(ec2_client) -> list[RegionInfo]:
    """계정에서 사용 가능한 리전 정보 조회

    Args:
        ec2_client: boto3 ec2 client

    Returns:
        RegionInfo 리스트 (API 응답 순서)

    Raises:
        RegionDiscoveryError: describe_regions 실패 시
    """
    try:
        response = ec2_client.describe_regions(
            Filters=[{"Name": "opt-in-status", "Values": list(USABLE_OPT_IN_STATUSES)}],
        )
    except (ClientError, BotoCoreError) as e:
        raise RegionDiscoveryError(f"리전 목록 조회 실패 ({get_error_code(e)})", cause=e) from e

    regions = [
        RegionInfo(
            region_name=region.get("RegionName", ""),
            endpoint=region.get("Endpoint", ""),
            opt_in_status=region.get("OptInStatus", "opt-in-not-required"),
        )
        for region in response.get("Regions", [])
    ]
    # 필터가 적용되지 않는 엔드포인트 대비
    return [r for r in regions if r.region_name and r.is_opted_in]


def resolve_regions(sessions: SessionFactory, all_regions: bool = False) -> list[str]:
    """조회 대상 리전 목록 결정

    Args:
        sessions: 세션 팩토리
        all_regions: True이면 사용 가능한 전체 리전, False이면 기본 리전만

    Returns:
        순서가 유지된 중복 없는 리전 코드 리스트

    Raises:
        RegionDiscoveryError: 리전 조회 실패 또는 기본 리전 미설정 시
    """
    try:
        default_region = sessions.default_region
    except BotoCoreError as e:
        raise RegionDiscoveryError("AWS 프로파일 로드 실패", cause=e) from e

    if not all_regions:
        if not default_region:
            raise RegionDiscoveryError(
                f"프로파일 '{sessions.profile}'에 기본 리전이 설정되지 않았습니다 (AWS_DEFAULT_REGION 또는 --all-regions 사용)"
            )
        logger.debug(f"기본 리전 사용: {default_region}")
        return [default_region]

    logger.info("전체 리전 옵션 활성화, 사용 가능한 리전 조회 중")

    try:
        # describe_regions는 어느 리전에서 호출해도 계정 전체 리전을 반환
        ec2 = sessions.client("ec2", region_name=default_region or "us-east-1")
    except BotoCoreError as e:
        raise RegionDiscoveryError("EC2 클라이언트 생성 실패", cause=e) from e

    regions = _dedupe([r.region_name for r in list_usable_regions(ec2)])
    if not regions:
        raise RegionDiscoveryError("사용 가능한 리전이 없습니다")

    logger.debug(f"사용 가능한 리전 {len(regions)}개: {', '.join(regions)}")
    return regions
