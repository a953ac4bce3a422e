"""
core/cli/ui/console.py - Rich 콘솔 및 로깅 설정

일관된 콘솔 출력과 RichHandler 기반 로깅 설정을 제공합니다.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# botocore/urllib3 노이즈 로그 제한
NOISY_LOGGERS = (
    "botocore",
    "boto3",
    "urllib3",
)

# 상태 심볼
SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"

# 전역 콘솔 인스턴스 (진단 출력은 stderr)
console = Console(stderr=True, highlight=False, soft_wrap=True)


def setup_logging(debug: bool = False, target: Console | None = None) -> logging.Handler:
    """루트 로거에 RichHandler 설정

    INFO 레벨이 기본이며, debug 모드에서는 DEBUG 레벨과 함께
    로그 발생 위치(파일:라인)와 상세 traceback을 표시합니다.
    반복 호출 시 기존 RichHandler를 교체합니다.

    Args:
        debug: 디버그 모드 여부
        target: 출력 Console (기본: 전역 console)

    Returns:
        설치된 핸들러
    """
    level = logging.DEBUG if debug else logging.INFO

    handler = RichHandler(
        console=target or console,
        show_path=debug,
        rich_tracebacks=debug,
        markup=False,
        log_time_format="[%Y-%m-%dT%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if isinstance(existing, RichHandler):
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")
