# core/tools/io - 파일 입출력 모듈
"""
파일 입출력 유틸리티

구조:
    core/tools/io/csv/    - CSV 파일 쓰기 (인벤토리 출력)

사용 예시:
    from core.tools.io.csv import export_csv
"""
