"""
core/cli - CLI 공통 UI 구성 요소
"""
