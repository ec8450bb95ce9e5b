# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

주요 구성:
- `conftest.py`: 테스트 전용 데이터베이스 (임시 SQLite 파일), 세션, 클라이언트 픽스처.
- `test_main.py`: 루트 및 헬스 체크 엔드포인트 테스트.
- `test_responses.py`: 공통 응답 봉투 테스트.
- `domains/`: 도메인별 엔드포인트 및 변환 로직 테스트.
"""

__title__ = "Mantenedores API Tests"
__description__ = "Test suite for the mantenedores FastAPI application."
__version__ = "0.1.0"
__all__ = []
