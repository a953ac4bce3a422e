"""
core/tools - 출력 도구 모듈
"""
