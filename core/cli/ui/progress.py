"""
core/cli/ui/progress.py - 병렬 보강 진행 표시

워커 스레드에서 안전하게 호출할 수 있는 진행 추적기입니다.
성공(값 기록)과 실패(조회 실패) 건수를 나누어 표시합니다.

Example:
    from core.cli.ui.progress import parallel_progress

    with parallel_progress("마지막 호출 시각 조회") as tracker:
        result = enricher.enrich(records, progress_tracker=tracker)

    success, failed, total = tracker.stats
"""

from __future__ import annotations

import threading
from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import Console

from .console import console as default_console


class SuccessFailColumn(ProgressColumn):
    """성공/실패 건수 컬럼: '40✓ 10✗'"""

    def __init__(self, tracker: ParallelTracker) -> None:
        super().__init__()
        self._tracker = tracker

    def render(self, task: Task) -> Text:
        success, failed, _ = self._tracker.stats
        text = Text()
        text.append(f"{success}", style="green")
        text.append("✓ ", style="green")
        text.append(f"{failed}", style="red")
        text.append("✗", style="red")
        return text


class ParallelTracker:
    """스레드 세이프 병렬 진행 추적기

    모든 public 메서드는 내부 잠금으로 보호되므로
    여러 워커 스레드에서 on_complete()를 호출해도 안전합니다.

    progress가 None이면 화면 표시 없이 건수만 집계합니다.
    """

    def __init__(self, progress: Progress | None = None, task_id: TaskID | None = None) -> None:
        self._progress = progress
        self._task_id = task_id
        self._lock = threading.Lock()
        self._success = 0
        self._failed = 0
        self._total = 0

    def set_total(self, total: int) -> None:
        """전체 작업 수 설정

        Args:
            total: 전체 작업 수
        """
        with self._lock:
            self._total = total
            if self._progress is not None and self._task_id is not None:
                self._progress.update(self._task_id, total=total)

    def on_complete(self, success: bool) -> None:
        """작업 완료 기록

        Args:
            success: 값이 기록되었으면 True, 조회 실패면 False
        """
        with self._lock:
            if success:
                self._success += 1
            else:
                self._failed += 1
            if self._progress is not None and self._task_id is not None:
                self._progress.update(self._task_id, completed=self._success + self._failed)

    @property
    def stats(self) -> tuple[int, int, int]:
        """(성공, 실패, 전체) 건수"""
        with self._lock:
            return (self._success, self._failed, self._total)


@contextmanager
def parallel_progress(
    description: str,
    console: Console | None = None,
    enabled: bool = True,
) -> Generator[ParallelTracker, None, None]:
    """병렬 보강용 진행 표시줄 컨텍스트 매니저

    Args:
        description: 진행 표시줄 설명
        console: 사용할 Rich Console (기본: core.cli.ui.console.console)
        enabled: False이면 화면 표시 없이 집계만 하는 추적기를 반환

    Yields:
        ParallelTracker
    """
    if not enabled:
        yield ParallelTracker()
        return

    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn(""),  # SuccessFailColumn 자리
        TextColumn("/"),
        MofNCompleteColumn(),
        BarColumn(bar_width=40),
        TimeElapsedColumn(),
        console=console or default_console,
        expand=False,
    )

    with progress:
        task_id = progress.add_task(f"[cyan]{description}", total=None)
        tracker = ParallelTracker(progress, task_id)
        columns = list(progress.columns)
        columns[2] = SuccessFailColumn(tracker)
        progress.columns = tuple(columns)
        yield tracker
