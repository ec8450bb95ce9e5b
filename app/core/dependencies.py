# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 요청 단위 데이터베이스 세션 (get_db_session).
- 동시 조회를 위한 세션 공장 (get_session_factory).

테스트에서는 main_app.dependency_overrides 로 두 의존성을 교체하여
테스트 전용 데이터베이스를 주입합니다.
"""

from typing import AsyncGenerator, Callable
from sqlmodel.ext.asyncio.session import AsyncSession  # AsyncSession 임포트

# 실제 데이터베이스 세션 제너레이터 및 세션 공장 임포트
from app.core.database import AsyncSessionLocal, get_session as get_main_app_session

# 세션 공장의 타입: 호출하면 새 AsyncSession(비동기 컨텍스트 관리자)을 반환합니다.
SessionFactory = Callable[[], AsyncSession]


# --- 데이터베이스 세션 의존성 주입 ---
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:  # 타입을 AsyncSession으로 명시
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_session_factory() -> SessionFactory:
    """
    세션 공장을 반환합니다.
    하나의 AsyncSession 에서는 여러 쿼리를 동시에 실행할 수 없으므로,
    동시 조회가 필요한 엔드포인트는 쿼리마다 별도의 세션을 엽니다.
    """
    return AsyncSessionLocal
