# tests/conftest.py

import os
import tempfile
from typing import AsyncGenerator, Callable
from datetime import date

# 설정 모듈이 임포트되기 전에 테스트용 데이터베이스 URL을 지정합니다.
# (실제 연결은 아래 test_engine 픽스처가 만들고, 의존성 오버라이드로 주입합니다.)
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'mantenedores_test.db')}",
)

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core import dependencies as deps  # noqa: E402
from app.core.database import create_db_and_tables  # noqa: E402
from app.domains.mnt import models as mnt_models  # noqa: E402


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트마다 임시 SQLite 파일 데이터베이스를 만들고 모든 테이블을 생성합니다.
    NullPool 을 사용하여 세션마다 독립된 연결을 사용합니다 (동시 조회 테스트용).
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test_mantenedores.db'}",
        echo=False,
        future=True,
        poolclass=NullPool,
    )
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(test_engine: AsyncEngine) -> Callable[[], AsyncSession]:
    """테스트용 세션 공장 (AsyncSession)."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: Callable[[], AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """데이터 준비 및 요청 처리에 사용하는 비동기 데이터베이스 세션입니다."""
    async with session_factory() as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    session_factory: Callable[[], AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 DB 세션과 세션 공장을 주입합니다.
    """

    async def override_get_db_session():
        yield db_session

    def override_get_session_factory():
        return session_factory

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[deps.get_db_session] = override_get_db_session
        main_app.dependency_overrides[deps.get_session_factory] = override_get_session_factory

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인별 공통 픽스처 ---
@pytest_asyncio.fixture
async def test_materials(db_session: AsyncSession):
    """활성 자재 3개 (냉장 2개)와 비활성 자재 1개를 생성합니다."""
    materials = [
        mnt_models.Material(id=1, codigo_ranco="MAT-001", nombre_material="Bandeja", unidad_medida="UN", frio="No", activo=True),
        mnt_models.Material(id=2, codigo_ranco="MAT-002", nombre_material="Arandano", unidad_medida="KG", frio="Si", activo=True),
        mnt_models.Material(id=3, codigo_ranco="MAT-003", nombre_material="Cereza", unidad_medida="KG", frio="Sí", activo=True),
        mnt_models.Material(id=4, codigo_ranco="MAT-004", nombre_material="Etiqueta", unidad_medida="UN", frio=None, activo=False),
    ]
    db_session.add_all(materials)
    await db_session.commit()
    return materials


@pytest_asyncio.fixture
async def test_suppliers(db_session: AsyncSession):
    """활성 공급업체 3개와 비활성 공급업체 1개를 생성합니다."""
    suppliers = [
        mnt_models.Supplier(id=7, title="Acme Envases", activo=True),
        mnt_models.Supplier(id=12, title="Frutas del Sur", activo=True),
        mnt_models.Supplier(id=1234, title="Transportes PROV Ltda", activo=True),
        mnt_models.Supplier(id=20, title="Proveedor Antiguo", activo=False),
    ]
    db_session.add_all(suppliers)
    await db_session.commit()
    return suppliers


@pytest_asyncio.fixture
async def test_locations(db_session: AsyncSession):
    """두 플랜트의 보관 위치를 생성합니다."""
    locations = [
        mnt_models.Location(id=1, title="Camara 1", bodega_deposito="Frio", planta="RANCO", activo=True),
        mnt_models.Location(id=2, title="Patio", bodega_deposito="Acopio", planta="RANCO", activo=True),
        mnt_models.Location(id=3, title="Camara 2", bodega_deposito="Frio", planta="CHIMBARONGO", activo=True),
        mnt_models.Location(id=4, title="Bodega Vieja", bodega_deposito="Acopio", planta="RANCO", activo=False),
    ]
    db_session.add_all(locations)
    await db_session.commit()
    return locations


@pytest_asyncio.fixture
async def test_seasons(db_session: AsyncSession):
    """활성 시즌 1개와 비활성 시즌 1개를 생성합니다."""
    seasons = [
        mnt_models.Season(id=1, title="2023-2024", fecha_inicio=date(2023, 10, 1), fecha_fin=date(2024, 4, 30), activo=False),
        mnt_models.Season(id=2, title="2024-2025", fecha_inicio=date(2024, 10, 1), fecha_fin=date(2025, 4, 30), activo=True),
    ]
    db_session.add_all(seasons)
    await db_session.commit()
    return seasons


@pytest_asyncio.fixture
async def test_movement_types(db_session: AsyncSession):
    """이동 유형을 생성합니다."""
    movement_types = [
        mnt_models.MovementType(id=1, title="SALIDA", descripcion="Salida de bodega", activo=True),
        mnt_models.MovementType(id=2, title="ENTRADA", descripcion="Ingreso a bodega", activo=True),
        mnt_models.MovementType(id=3, title="AJUSTE", descripcion=None, activo=False),
    ]
    db_session.add_all(movement_types)
    await db_session.commit()
    return movement_types
