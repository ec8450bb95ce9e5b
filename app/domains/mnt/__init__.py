# app/domains/mnt/__init__.py

"""
FastAPI 애플리케이션의 'mnt' (마스터 데이터, Mantenedores) 도메인 패키지입니다.

'mnt' 도메인은 플랜트, 자재, 공급업체, 보관 위치, 시즌, 이동 유형, 단위 등
다른 업무에서 참조하는 기준 정보를 읽기 전용으로 제공합니다.
테이블은 외부 시스템이 소유하며, 이 패키지는 프론트엔드와의 호환을 위해
필드 이름을 바꾸고 공통 응답 봉투로 감싸서 반환합니다.

주요 서브모듈:
- `models.py`: 외부 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 프론트엔드에 노출되는 응답 형태 (Pydantic/SQLModel 스키마).
- `constants.py`: 플랜트 및 단위의 정적 목록.
- `crud.py`: 테이블별 비동기 조회 로직.
- `services.py`: 코드 생성, 필드 변환, 요약 집계 등 순수 로직.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "Mantenedores Domain"
__description__ = "Read-only master data (plants, materials, suppliers, locations, seasons)."
__version__ = "0.1.0"
__all__ = []
