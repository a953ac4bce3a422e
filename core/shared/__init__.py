"""
core/shared - 공유 유틸리티
"""
