"""
core/tools/io/csv/writer.py - 인벤토리 CSV 출력

헤더 행(COLUMNS 제목)과 레코드당 한 행을 씁니다.
쓰기 도중 실패하면 ExportError를 발생시키며, 이미 쓰인 부분 파일은 남을 수 있습니다.
"""

from __future__ import annotations

import csv
import logging
import time
from collections.abc import Iterable
from pathlib import Path

from core.exceptions import ExportError
from core.shared.aws.lambda_.models import FunctionRecord, get_title_fields

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def default_output_path(now: float | None = None) -> str:
    """기본 출력 파일 이름 (<unix timestamp>.csv)

    Args:
        now: 기준 시각 (epoch 초, None이면 현재)

    Returns:
        예: "1744990200.csv"
    """
    timestamp = int(time.time() if now is None else now)
    return f"{timestamp}.csv"


def export_csv(
    records: Iterable[FunctionRecord],
    filepath: str | Path,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """레코드를 CSV 파일로 출력

    Args:
        records: 출력할 레코드 (보강 완료 상태)
        filepath: 출력 파일 경로 (상위 디렉토리는 자동 생성)
        encoding: 파일 인코딩

    Returns:
        출력한 데이터 행 수 (헤더 제외)

    Raises:
        ExportError: 파일 생성 또는 쓰기 실패 시
    """
    path = Path(filepath)
    logger.info(f"출력 파일 작성 중: {path}")

    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        f = open(path, "w", newline="", encoding=encoding)
    except OSError as e:
        raise ExportError("출력 파일 생성 실패", path=str(path), cause=e) from e

    count = 0
    try:
        with f:
            writer = csv.writer(f)
            writer.writerow(get_title_fields())
            for record in records:
                writer.writerow(record.to_row())
                count += 1
    except (OSError, csv.Error) as e:
        raise ExportError(f"출력 파일 쓰기 실패 ({count}행 작성 후)", path=str(path), cause=e) from e

    logger.debug(f"CSV {count}행 작성: {path}")
    return count
