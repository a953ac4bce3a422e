"""
core/shared/aws - AWS 서비스별 공유 로직

lambda_/  - Lambda 함수 인벤토리 및 마지막 호출 시각 조회
"""
