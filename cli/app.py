"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반 CLI 진입점입니다.

Usage:
    $ llister                                  # 기본 프로파일, 기본 리전
    $ llister --all-regions -p prod -o out.csv # 전체 리전
    $ llister --debug -w 10                    # 디버그 로그, 워커 10개

    # 모듈로 실행
    $ python main.py --all-regions
"""

from __future__ import annotations

import logging

import click

from core.cli.ui.console import print_error, setup_logging
from core.config import (
    DEFAULT_LOOKUP_TIMEOUT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PROFILE,
    ENV_MAX_WORKERS,
    ENV_PROFILE,
    RunSettings,
    get_version,
)
from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


@click.command(name="llister", context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--debug", is_flag=True, help="디버그 로그 출력")
@click.option(
    "-p",
    "--profile",
    "--aws-profile",
    "profile",
    default=DEFAULT_PROFILE,
    show_default=True,
    envvar=[ENV_PROFILE, "AWS_PROFILE"],
    help="AWS 프로파일 이름",
)
@click.option("--all-regions", is_flag=True, help="계정에서 사용 가능한 모든 리전 조회")
@click.option(
    "-o",
    "--output",
    "--output-file-name",
    "output",
    default=None,
    help="출력 CSV 파일 경로 (기본: <timestamp>.csv)",
)
@click.option(
    "-w",
    "--max-workers",
    type=int,
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    envvar=ENV_MAX_WORKERS,
    help="마지막 호출 시각 조회 최대 동시 워커 수",
)
@click.option(
    "--lookup-timeout",
    type=float,
    default=DEFAULT_LOOKUP_TIMEOUT,
    show_default=True,
    help="조회 1건당 타임아웃 (초)",
)
@click.option("--no-progress", is_flag=True, help="진행 표시줄 숨김")
@click.version_option(version=get_version(), prog_name="llister")
def cli(
    debug: bool,
    profile: str,
    all_regions: bool,
    output: str | None,
    max_workers: int,
    lookup_timeout: float,
    no_progress: bool,
) -> None:
    """Lambda 함수 목록과 마지막 호출 시각을 CSV로 출력합니다."""
    setup_logging(debug)

    try:
        settings = RunSettings(
            debug=debug,
            profile=profile,
            all_regions=all_regions,
            output=output,
            max_workers=max_workers,
            lookup_timeout=lookup_timeout,
            show_progress=not no_progress,
        )
    except ConfigError as e:
        print_error(f"잘못된 설정: {e}")
        raise SystemExit(EXIT_CONFIG_ERROR) from e

    from cli.runner import InventoryRunner

    exit_code = InventoryRunner(settings).run()
    raise SystemExit(exit_code)


if __name__ == "__main__":
    cli()
