"""
core/parallel/enricher.py - Lambda 마지막 호출 시각 병렬 보강

고정 크기 워커 풀로 전체 함수 레코드의 마지막 호출 시각을 조회하고,
각 결과를 작업이 가리키는 레코드 위치에 그대로 기록합니다.

동작:
1. 레코드 N개에 대해 인덱스를 가진 작업 N개 생성 (build_jobs)
2. min(W, N)개 워커 스레드 시작
3. 크기 제한 큐에 작업 투입 (큐가 가득 차면 생산자 대기)
4. 워커 수만큼 종료 표시를 넣어 큐를 닫고, 모든 워커 join

작업 인덱스는 레코드 위치와 1:1 대응하고, 워커는 자신이 꺼낸 작업의 인덱스에만
기록하므로 레코드 단위 잠금이 필요 없습니다. join이 끝난 뒤에만 결과를 읽습니다.

Example:
    from core.parallel import InvocationTimeEnricher

    enricher = InvocationTimeEnricher(lookup, max_workers=20)
    result = enricher.enrich(records)
    print(f"조회: {result.found}, 이력 없음: {result.no_data}, 실패: {result.failed}")
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from core.config import DEFAULT_MAX_WORKERS
from core.shared.aws.lambda_.last_invocation import LookupOutcome, LookupStatus, format_timestamp
from core.shared.aws.lambda_.models import NO_DATA, FunctionRecord

from .errors import ErrorCollector
from .types import EnrichmentJob, EnrichmentResult

if TYPE_CHECKING:
    from core.cli.ui.progress import ParallelTracker

logger = logging.getLogger(__name__)

# (function_name, region) -> LookupOutcome
LookupFunc = Callable[[str, str], LookupOutcome]

# 큐 종료 표시
_CLOSED = object()


def build_jobs(records: Sequence[FunctionRecord]) -> list[EnrichmentJob]:
    """레코드 순서대로 인덱스를 가진 작업 목록 생성

    Args:
        records: 함수 레코드 시퀀스

    Returns:
        작업 리스트 (index는 0..N-1, 중복/누락 없음)
    """
    return [EnrichmentJob(function_name=r.name, region=r.region, index=i) for i, r in enumerate(records)]


class InvocationTimeEnricher:
    """마지막 호출 시각 병렬 보강기

    Attributes:
        lookup: (function_name, region) -> LookupOutcome 조회 함수.
            예외를 던지더라도 해당 레코드만 실패로 처리됩니다.
        max_workers: 최대 동시 워커 수 (>= 1)
        queue_size: 작업 큐 용량 (None이면 max_workers)
    """

    def __init__(
        self,
        lookup: LookupFunc,
        max_workers: int = DEFAULT_MAX_WORKERS,
        queue_size: int | None = None,
        error_collector: ErrorCollector | None = None,
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        if queue_size is not None and queue_size < 1:
            raise ValueError(f"queue_size must be >= 1, got {queue_size}")

        self.lookup = lookup
        self.max_workers = max_workers
        self.queue_size = queue_size or max_workers
        self.errors = error_collector or ErrorCollector("logs")

        self._lock = threading.Lock()
        self._result = EnrichmentResult()

    def enrich(
        self,
        records: Sequence[FunctionRecord],
        progress_tracker: ParallelTracker | None = None,
    ) -> EnrichmentResult:
        """모든 레코드의 last_invoked 보강

        모든 워커가 종료될 때까지 반환하지 않습니다.

        Args:
            records: 보강할 레코드 시퀀스 (길이 고정)
            progress_tracker: 진행 상황 추적기 (선택사항).
                set_total(N) 후 작업마다 on_complete(success) 호출

        Returns:
            EnrichmentResult
        """
        jobs = build_jobs(records)
        self._result = EnrichmentResult(total=len(jobs))
        # 실행마다 새로 집계
        self.errors.clear()

        if progress_tracker:
            progress_tracker.set_total(len(jobs))

        if not jobs:
            logger.info("보강할 Lambda 함수가 없습니다")
            return self._result

        worker_count = min(self.max_workers, len(jobs))
        self._result.workers = worker_count
        logger.info(f"마지막 호출 시각 조회 시작: {len(jobs)}개 함수, workers={worker_count}")

        start_time = time.monotonic()
        work_queue: queue.Queue = queue.Queue(maxsize=self.queue_size)

        workers = [
            threading.Thread(
                target=self._worker,
                args=(work_queue, records, progress_tracker),
                name=f"enricher-{i}",
                daemon=True,
            )
            for i in range(worker_count)
        ]
        for worker in workers:
            worker.start()

        # 큐가 가득 차면 put()에서 대기
        for job in jobs:
            work_queue.put(job)
        for _ in workers:
            work_queue.put(_CLOSED)

        for worker in workers:
            worker.join()

        self._result.duration_ms = (time.monotonic() - start_time) * 1000
        self._result.errors = self.errors.errors

        logger.info(
            f"마지막 호출 시각 조회 완료: 조회 {self._result.found}, 이력 없음 {self._result.no_data}, "
            f"실패 {self._result.failed}, 총 {self._result.duration_ms:.0f}ms"
        )
        return self._result

    def _worker(
        self,
        work_queue: queue.Queue,
        records: Sequence[FunctionRecord],
        progress_tracker: ParallelTracker | None,
    ) -> None:
        """큐가 닫힐 때까지 작업을 꺼내 처리 (워커 스레드)"""
        while True:
            job = work_queue.get()
            if job is _CLOSED:
                return

            # 처리 중 예외가 나도 워커는 큐가 닫힐 때까지 계속 소비
            try:
                self._handle(job, records, progress_tracker)
            except Exception:
                logger.exception(f"작업 처리 실패: {job.region}/{job.function_name}")

    def _handle(
        self,
        job: EnrichmentJob,
        records: Sequence[FunctionRecord],
        progress_tracker: ParallelTracker | None,
    ) -> None:
        """작업 1건 처리 후 집계와 진행 표시 갱신"""
        try:
            error = self._process(job, records)
        except Exception as e:
            error = e

        if error is None:
            success = True
        else:
            # 조회 실패: 기록하지 않음 (빈 값으로 출력)
            success = False
            self._count("failed")
            self.errors.collect(error, job.function_name, job.region, "describe_log_streams")

        if progress_tracker:
            progress_tracker.on_complete(success)

    def _process(self, job: EnrichmentJob, records: Sequence[FunctionRecord]) -> BaseException | None:
        """작업 1건 조회 후 records[job.index]에 기록

        Returns:
            값이 기록되었으면 None, 조회 실패면 원인 예외
        """
        try:
            outcome = self.lookup(job.function_name, job.region)
        except Exception as e:
            outcome = LookupOutcome.failed(e)

        record = records[job.index]

        if outcome.status == LookupStatus.FOUND and outcome.timestamp is not None:
            record.last_invoked = format_timestamp(outcome.timestamp)
            self._count("found")
            return None

        if outcome.has_no_history:
            record.last_invoked = NO_DATA
            self._count("no_data")
            return None

        return outcome.error or RuntimeError(f"unexpected lookup outcome: {outcome.status.value}")

    def _count(self, name: str) -> None:
        with self._lock:
            setattr(self._result, name, getattr(self._result, name) + 1)


def enrich_last_invoked(
    records: Sequence[FunctionRecord],
    lookup: LookupFunc,
    max_workers: int = DEFAULT_MAX_WORKERS,
    progress_tracker: ParallelTracker | None = None,
) -> EnrichmentResult:
    """병렬 보강 편의 함수

    InvocationTimeEnricher를 간단하게 사용할 수 있는 래퍼입니다.

    Args:
        records: 보강할 레코드 시퀀스
        lookup: (function_name, region) -> LookupOutcome
        max_workers: 최대 동시 워커 수
        progress_tracker: 진행 상황 추적기 (선택사항)

    Returns:
        EnrichmentResult
    """
    enricher = InvocationTimeEnricher(lookup, max_workers=max_workers)
    return enricher.enrich(records, progress_tracker=progress_tracker)
