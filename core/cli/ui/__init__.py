"""
core/cli/ui - 콘솔 출력 및 진행 표시
"""
