# core/__init__.py
"""
core - llister 인프라

Lambda 인벤토리 파이프라인이 사용하는 인증, 병렬 보강, 리전 결정,
출력, 콘솔 UI를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # 프로파일 기반 boto3 세션 팩토리
    ├── parallel/       # 마지막 호출 시각 병렬 보강 (워커 풀, 에러 수집)
    ├── region/         # 조회 대상 리전 결정
    ├── cli/            # Rich 콘솔, 로깅, 진행 표시
    ├── shared/         # AWS 서비스별 공유 로직 (Lambda 인벤토리)
    ├── tools/          # 출력 도구 (CSV)
    ├── config.py       # 실행 설정 및 상수
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import RunSettings
    from core.exceptions import StageError, format_stage_error

    settings = RunSettings(profile="prod", all_regions=True)
"""

from core import auth, cli, config, exceptions, parallel, region, shared, tools

__all__: list[str] = [
    # 서브패키지
    "auth",
    "cli",
    "shared",
    "tools",
    "region",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
