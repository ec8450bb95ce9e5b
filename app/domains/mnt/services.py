# app/domains/mnt/services.py

"""
'mnt' 도메인의 변환 및 집계 로직을 담당하는 모듈입니다.

- 외부 테이블 행을 프론트엔드 응답 형태로 변환하는 순수 함수
- 쿼리 파라미터(activo, 공급업체 코드)의 해석
- 마스터 데이터 요약 집계 (독립적인 조회를 동시에 실행)
"""

import asyncio
import re
from typing import Awaitable, Callable, List, Optional, TypeVar

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.dependencies import SessionFactory
from . import constants, crud, models, schemas

T = TypeVar("T")

SUPPLIER_CODE_PREFIX = "PROV"
LOCATION_CODE_PREFIX = "UB"
LOCATION_TYPE = "bodega"

# 'PROV' 뒤에 숫자만 오는 코드 (예: PROV007)
_SUPPLIER_CODE_PATTERN = re.compile(rf"{SUPPLIER_CODE_PREFIX}([0-9]+)")

# proveedores.id 는 int4 컬럼입니다.
MAX_SUPPLIER_ID = 2_147_483_647

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}
_COLD_CHAIN_VALUES = {"Si", "Sí"}


# =============================================================================
# 1. 파라미터 해석
# =============================================================================
def parse_activo(value: Optional[str]) -> bool:
    """
    activo 쿼리 파라미터를 bool 로 변환합니다.
    값이 없으면 True (활성 레코드만 조회). 알 수 없는 값은 ValueError 를 발생시킵니다.
    """
    if value is None:
        return True
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Parámetro activo inválido: {value}")


def supplier_id_from_code(code: str) -> Optional[int]:
    """'PROV' + 숫자 형식이면 숫자 ID를, 아니면 None 을 반환합니다."""
    match = _SUPPLIER_CODE_PATTERN.fullmatch(code)
    return int(match.group(1)) if match else None


# =============================================================================
# 2. 행 변환
# =============================================================================
def synthetic_code(prefix: str, id: int) -> str:
    """ID를 최소 3자리로 0 채움하여 표시 코드를 만듭니다. (7 -> PROV007, 1234 -> PROV1234)"""
    return f"{prefix}{str(id).zfill(3)}"


def requires_cold_chain(frio: Optional[str]) -> bool:
    return frio in _COLD_CHAIN_VALUES


def to_material(row: models.Material) -> schemas.MaterialRead:
    return schemas.MaterialRead(
        id=row.id,
        codigo=row.codigo_ranco,
        nombre=row.nombre_material,
        unidad_medida=row.unidad_medida,
        requiere_frio=requires_cold_chain(row.frio),
        activo=row.activo,
    )


def to_supplier(row: models.Supplier) -> schemas.SupplierRead:
    return schemas.SupplierRead(
        id=row.id,
        codigo=synthetic_code(SUPPLIER_CODE_PREFIX, row.id),
        nombre=row.title,
        activo=row.activo,
    )


def to_location(row: models.Location) -> schemas.LocationRead:
    return schemas.LocationRead(
        id=row.id,
        codigo=synthetic_code(LOCATION_CODE_PREFIX, row.id),
        nombre=row.title,
        bodega=row.bodega_deposito,
        planta=row.planta,
        tipo=LOCATION_TYPE,
        activo=row.activo,
    )


def to_season(row: models.Season) -> schemas.SeasonRead:
    return schemas.SeasonRead.model_validate(row)


def to_active_season(row: models.Season) -> schemas.ActiveSeasonRead:
    return schemas.ActiveSeasonRead(
        id=row.id,
        codigo=row.title,
        nombre=row.title,
        fecha_inicio=row.fecha_inicio,
        fecha_termino=row.fecha_fin,
        activa=row.activo,
    )


def to_movement_type(row: models.MovementType) -> schemas.MovementTypeRead:
    return schemas.MovementTypeRead(
        id=row.id,
        codigo=row.title,
        nombre=row.title,
        descripcion=row.descripcion,
        activo=row.activo,
    )


# =============================================================================
# 3. 정적 목록
# =============================================================================
def list_plants() -> List[schemas.CatalogEntryRead]:
    return [
        schemas.CatalogEntryRead(codigo=plant.value, nombre=plant.value, descripcion=f"Planta {plant.value}")
        for plant in constants.Plant
    ]


def list_units_of_measure() -> List[schemas.CatalogEntryRead]:
    return [
        schemas.CatalogEntryRead(
            codigo=unit.value,
            nombre=unit.name.lower().replace("_", " "),
            descripcion=unit.value,
        )
        for unit in constants.UnitOfMeasure
    ]


# =============================================================================
# 4. 마스터 데이터 요약
# =============================================================================
async def get_maintainers_summary(session_factory: SessionFactory) -> schemas.MaintainerSummary:
    """
    활성 레코드 수 4개와 활성 시즌을 동시에 조회하여 요약을 만듭니다.
    하나의 AsyncSession 은 동시 쿼리를 지원하지 않으므로 조회마다 세션을 엽니다.
    하나라도 실패하면 예외가 그대로 전파되며 부분 결과는 반환하지 않습니다.
    """
    async def _run(query: Callable[[AsyncSession], Awaitable[T]]) -> T:
        async with session_factory() as session:
            return await query(session)

    active = {"activo": True}
    (
        total_materials,
        total_suppliers,
        total_locations,
        active_season,
        total_movement_types,
    ) = await asyncio.gather(
        _run(lambda db: crud.material.count(db, filters=active)),
        _run(lambda db: crud.supplier.count(db, filters=active)),
        _run(lambda db: crud.location.count(db, filters=active)),
        _run(crud.season.get_active),
        _run(lambda db: crud.movement_type.count(db, filters=active)),
    )

    return schemas.MaintainerSummary(
        materiales=total_materials,
        proveedores=total_suppliers,
        ubicaciones=total_locations,
        tiposMovimiento=total_movement_types,
        plantas=len(constants.Plant),
        unidadesMedida=len(constants.UnitOfMeasure),
        temporadaActiva=active_season.title if active_season else None,
    )
