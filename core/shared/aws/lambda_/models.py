"""
core/shared/aws/lambda_/models.py - Lambda 함수 인벤토리 레코드

COLUMNS는 (필드, 컬럼 제목) 순서 목록으로, 레코드 → CSV 행 변환과
CSV 헤더 생성에서 함께 사용됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# 호출 이력 없음 표시 (로그 그룹 없음 또는 로그 스트림 없음)
NO_DATA = "-"

# (필드 이름, CSV 컬럼 제목) - 출력 순서
COLUMNS: tuple[tuple[str, str], ...] = (
    ("name", "Function Name"),
    ("region", "Region"),
    ("arn", "Function ARN"),
    ("description", "Function Description"),
    ("last_modified", "Last Modified"),
    ("iam_role", "IAM Role"),
    ("runtime", "Runtime"),
    ("last_invoked", "Last Invoked"),
)


def get_title_fields() -> list[str]:
    """CSV 헤더용 컬럼 제목 목록 반환"""
    return [title for _, title in COLUMNS]


@dataclass
class FunctionRecord:
    """Lambda 함수 인벤토리 레코드 (CSV 한 행)

    last_invoked를 제외한 필드는 수집 후 변경되지 않습니다.
    last_invoked는 보강 단계에서 정확히 한 워커가 최대 한 번 기록합니다.

    Attributes:
        name: 함수 이름 (리전 내 유일)
        region: 함수를 조회한 리전
        arn: 함수 ARN
        description: 함수 설명
        last_modified: 마지막 수정 시각 (API 응답 문자열 그대로)
        iam_role: 실행 역할 ARN
        runtime: 런타임 식별자 (컨테이너 이미지 함수는 빈 문자열)
        last_invoked: 마지막 호출 시각, NO_DATA, 또는 None(미기록/조회 실패)
    """

    name: str
    region: str
    arn: str = ""
    description: str = ""
    last_modified: str = ""
    iam_role: str = ""
    runtime: str = ""
    last_invoked: str | None = None

    @classmethod
    def from_api(cls, fn: dict[str, Any], region: str) -> FunctionRecord:
        """ListFunctions 응답의 함수 항목으로부터 레코드 생성

        Args:
            fn: FunctionConfiguration 딕셔너리
            region: 조회한 리전

        Returns:
            FunctionRecord
        """
        return cls(
            name=fn.get("FunctionName", ""),
            region=region,
            arn=fn.get("FunctionArn", ""),
            description=fn.get("Description", ""),
            last_modified=fn.get("LastModified", ""),
            iam_role=fn.get("Role", ""),
            runtime=fn.get("Runtime", ""),
        )

    def to_row(self) -> list[str]:
        """COLUMNS 순서의 CSV 행으로 변환 (None은 빈 문자열)"""
        row = []
        for field_name, _ in COLUMNS:
            value = getattr(self, field_name)
            row.append("" if value is None else str(value))
        return row
