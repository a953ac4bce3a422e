"""
cli/runner.py - 인벤토리 파이프라인 실행기

리전 결정 → 함수 목록 수집 → 마지막 호출 시각 보강 → CSV 출력을 순서대로 실행합니다.
단계 사이는 순차 실행이며, 병렬 처리는 보강 단계 내부에서만 일어납니다.

종료 코드:
    0: 성공 (함수별 조회 실패가 있어도 성공)
    1: 치명적 단계 실패 (리전/목록/출력)
    130: 사용자 중단
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.auth.session import SessionFactory
from core.cli.ui.console import print_error, print_success, print_warning
from core.cli.ui.progress import parallel_progress
from core.config import RunSettings
from core.exceptions import StageError, format_stage_error
from core.parallel import InvocationTimeEnricher, LookupFunc
from core.parallel.types import EnrichmentResult
from core.region.availability import resolve_regions
from core.shared.aws.lambda_.collector import collect_functions
from core.shared.aws.lambda_.last_invocation import CloudWatchLastInvocationLookup
from core.shared.aws.lambda_.models import FunctionRecord
from core.tools.io.csv.writer import default_output_path, export_csv

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STAGE_ERROR = 1
EXIT_INTERRUPTED = 130


@dataclass
class RunReport:
    """실행 결과 요약

    Attributes:
        regions: 조회한 리전 목록
        records: 보강 완료된 레코드
        enrichment: 보강 결과
        output: 출력 파일 경로
    """

    regions: list[str] = field(default_factory=list)
    records: list[FunctionRecord] = field(default_factory=list)
    enrichment: EnrichmentResult | None = None
    output: str = ""


class InventoryRunner:
    """인벤토리 파이프라인 실행기

    lookup을 주입하지 않으면 프로파일 세션으로 CloudWatch Logs를 조회합니다.
    """

    def __init__(
        self,
        settings: RunSettings,
        sessions: SessionFactory | None = None,
        lookup: LookupFunc | None = None,
    ):
        self.settings = settings
        self.sessions = sessions or SessionFactory(profile=settings.profile)
        self.lookup = lookup or CloudWatchLastInvocationLookup(
            self.sessions,
            read_timeout=settings.lookup_timeout,
            connect_timeout=settings.connect_timeout,
            max_pool_connections=settings.max_workers,
        )
        self.report = RunReport()

    def run(self) -> int:
        """파이프라인 실행

        Returns:
            종료 코드
        """
        try:
            self.execute()
        except StageError as e:
            logger.debug(f"단계 실패: {e.to_dict()}")
            print_error(format_stage_error(e))
            return EXIT_STAGE_ERROR
        except KeyboardInterrupt:
            print_warning("사용자에 의해 중단되었습니다")
            return EXIT_INTERRUPTED

        enrichment = self.report.enrichment
        if enrichment and enrichment.failed:
            print_warning(f"마지막 호출 시각 조회 실패 {enrichment.failed}건 (빈 값으로 출력, --debug로 상세 확인)")
        print_success(f"{len(self.report.records)}개 함수 정보를 {self.report.output}에 저장했습니다")
        return EXIT_OK

    def execute(self) -> RunReport:
        """각 단계를 순서대로 실행

        Raises:
            StageError: 치명적 단계 실패 시
        """
        settings = self.settings
        logger.debug(f"AWS 프로파일 '{settings.profile}' 사용")

        # 1. 리전
        self.report.regions = resolve_regions(self.sessions, all_regions=settings.all_regions)

        # 2. 함수 목록
        records = collect_functions(self.sessions, self.report.regions)
        self.report.records = records

        # 3. 마지막 호출 시각 (병렬)
        enricher = InvocationTimeEnricher(self.lookup, max_workers=settings.max_workers)
        show_progress = settings.show_progress and not settings.debug and bool(records)
        with parallel_progress("마지막 호출 시각 조회", enabled=show_progress) as tracker:
            self.report.enrichment = enricher.enrich(records, progress_tracker=tracker)

        if enricher.errors.has_errors:
            logger.info(enricher.errors.get_summary())

        # 4. 출력
        output = settings.output or default_output_path()
        count = export_csv(records, output)
        self.report.output = output

        logger.info(f"모든 함수 정보 출력 완료: file={output}, functions={count}")
        return self.report
