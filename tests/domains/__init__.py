# tests/domains/__init__.py

"""
도메인별 API 엔드포인트 테스트 패키지입니다.
"""
