"""
core/auth/session.py - 프로파일 기반 boto3 세션 팩토리

boto3.Session은 스레드 간 공유가 안전하지 않으므로,
SessionFactory는 스레드마다 별도의 Session을 생성하여 재사용합니다.
팩토리 자체는 불변(frozen)이며 모든 워커 스레드에 그대로 전달됩니다.

Example:
    factory = SessionFactory(profile="prod")

    # 현재 스레드 전용 세션
    session = factory.get_session()

    # 리전별 클라이언트 (retry/timeout 설정 적용)
    logs = factory.client("logs", region_name="ap-northeast-2", max_attempts=1)
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import boto3

from core.config import DEFAULT_PROFILE
from core.parallel.client import get_client

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionFactory:
    """스레드 로컬 boto3 Session 팩토리

    Attributes:
        profile: AWS 공유 설정 프로파일 이름
    """

    profile: str = DEFAULT_PROFILE
    _local: threading.local = field(default_factory=threading.local, compare=False, repr=False)

    def get_session(self) -> boto3.Session:
        """현재 스레드 전용 boto3 Session 반환

        Returns:
            boto3.Session (스레드당 1개)
        """
        session = getattr(self._local, "session", None)
        if session is None:
            logger.debug(f"boto3 세션 생성: profile={self.profile}, thread={threading.current_thread().name}")
            # default 프로파일은 boto3 기본 자격 증명 체인 (환경 변수 포함)
            profile_name = None if self.profile == DEFAULT_PROFILE else self.profile
            session = boto3.Session(profile_name=profile_name)
            self._local.session = session
        return session

    @property
    def default_region(self) -> str | None:
        """프로파일에 설정된 기본 리전 (없으면 None)"""
        return self.get_session().region_name

    def client(self, service_name: str, region_name: str | None = None, **kwargs: Any) -> Any:
        """현재 스레드 세션으로 boto3 client 생성

        Args:
            service_name: AWS 서비스 이름 (lambda, logs, ec2 등)
            region_name: 리전 (None이면 세션 기본값)
            **kwargs: get_client()에 전달할 추가 인자

        Returns:
            boto3 client
        """
        return get_client(self.get_session(), service_name, region_name=region_name, **kwargs)

    def cached_client(self, service_name: str, region_name: str, **kwargs: Any) -> Any:
        """현재 스레드에서 (서비스, 리전)별로 캐시된 client 반환

        워커 스레드가 같은 리전의 작업을 연속 처리할 때 클라이언트 생성 비용을 줄입니다.
        캐시 키에 리전이 포함되므로 작업마다 자신의 리전 클라이언트를 사용합니다.

        Args:
            service_name: AWS 서비스 이름
            region_name: 리전
            **kwargs: get_client()에 전달할 추가 인자 (최초 생성 시에만 적용)

        Returns:
            boto3 client
        """
        clients: dict[tuple[str, str], Any] | None = getattr(self._local, "clients", None)
        if clients is None:
            clients = {}
            self._local.clients = clients

        key = (service_name, region_name)
        if key not in clients:
            clients[key] = self.client(service_name, region_name=region_name, **kwargs)
        return clients[key]
