# app/domains/mnt/routers.py

"""
'mnt' 도메인 (마스터 데이터)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

모든 엔드포인트는 읽기 전용이며, 공통 응답 봉투 {exito, mensaje, datos, ...} 로 응답합니다.
예상하지 못한 오류는 각 핸들러에서 로그를 남긴 뒤 리소스별 오류 코드의 500 응답으로 변환되며,
원본 예외 메시지는 클라이언트에 노출하지 않습니다.
"""

from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core import responses

from . import crud as mnt_crud
from . import services as mnt_services

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Maintainers (마스터 데이터 조회)"],
    default_response_class=JSONResponse,
)


# =============================================================================
# 1. 플랜트 (정적 목록)
# =============================================================================
@router.get("/plants", summary="플랜트 목록 조회")
async def read_plants():
    """정적 플랜트 목록을 반환합니다."""
    try:
        return responses.success(mnt_services.list_plants(), "Plantas obtenidas exitosamente")
    except Exception as e:
        logger.error(f"Error al obtener plantas: {e}", exc_info=True)
        return responses.error("Error al obtener plantas", "ERROR_OBTENER_PLANTAS")


# =============================================================================
# 2. 자재 (materiales)
# =============================================================================
@router.get("/materials", summary="자재 목록 조회")
async def read_materials(
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """자재 목록을 자재 명칭 순으로 조회합니다."""
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        return responses.validation_failed([str(e)])

    try:
        rows = await mnt_crud.material.get_multi(
            db, filters={"activo": solo_activos}, order_by=["nombre_material"]
        )
        return responses.success(
            [mnt_services.to_material(row) for row in rows],
            "Materiales obtenidos exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener materiales: {e}", exc_info=True)
        return responses.error("Error al obtener materiales", "ERROR_OBTENER_MATERIALES")


@router.get("/materials/{codigo}", summary="자재 코드로 조회")
async def read_material(codigo: str, db: AsyncSession = Depends(deps.get_db_session)):
    """활성 자재를 업무 코드(codigo_ranco)로 조회합니다."""
    try:
        row = await mnt_crud.material.get_active_by_code(db, code=codigo)
        if row is None:
            return responses.not_found(f"Material con código {codigo} no encontrado")
        return responses.success(mnt_services.to_material(row), "Material obtenido exitosamente")
    except Exception as e:
        logger.error(f"Error al obtener material por código ({codigo}): {e}", exc_info=True)
        return responses.error("Error al obtener material", "ERROR_OBTENER_MATERIAL")


# =============================================================================
# 3. 공급업체 (proveedores)
# =============================================================================
@router.get("/suppliers", summary="공급업체 목록 조회")
async def read_suppliers(
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """공급업체 목록을 명칭 순으로 조회합니다. 코드는 ID로 생성됩니다 (PROV###)."""
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        return responses.validation_failed([str(e)])

    try:
        rows = await mnt_crud.supplier.get_multi(db, filters={"activo": solo_activos}, order_by=["title"])
        return responses.success(
            [mnt_services.to_supplier(row) for row in rows],
            "Proveedores obtenidos exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener proveedores: {e}", exc_info=True)
        return responses.error("Error al obtener proveedores", "ERROR_OBTENER_PROVEEDORES")


# 코드가 비어 있는 요청도 400 봉투로 응답하도록 경로 파라미터가 없는 경로를 따로 등록합니다.
@router.get("/suppliers/", include_in_schema=False)
async def read_supplier_without_code():
    return responses.validation_failed(["Código de proveedor requerido"], "Datos de entrada inválidos")


@router.get("/suppliers/{codigo}", summary="공급업체 코드로 조회")
async def read_supplier(codigo: str, db: AsyncSession = Depends(deps.get_db_session)):
    """
    활성 공급업체를 조회합니다.
    - 'PROV' + 숫자 (예: PROV007): 숫자 부분을 ID로 조회
    - 그 외: 명칭에 코드가 포함된 공급업체를 대소문자 구분 없이 조회
    """
    if not codigo.strip():
        return responses.validation_failed(["Código de proveedor requerido"], "Datos de entrada inválidos")

    supplier_id = mnt_services.supplier_id_from_code(codigo)
    # ID 컬럼 범위를 넘는 코드는 조회하지 않습니다.
    if supplier_id is not None and supplier_id > mnt_services.MAX_SUPPLIER_ID:
        return responses.not_found(f"Proveedor con código {codigo} no encontrado")

    try:
        if supplier_id is not None:
            row = await mnt_crud.supplier.get_active_by_id(db, id=supplier_id)
        else:
            row = await mnt_crud.supplier.get_active_by_name(db, term=codigo)

        if row is None:
            return responses.not_found(f"Proveedor con código {codigo} no encontrado")
        return responses.success(mnt_services.to_supplier(row), "Proveedor obtenido exitosamente")
    except Exception as e:
        logger.error(f"Error al obtener proveedor por código ({codigo}): {e}", exc_info=True)
        return responses.error("Error al obtener proveedor", "ERROR_OBTENER_PROVEEDOR")


# =============================================================================
# 4. 보관 위치 (ubicacion)
# =============================================================================
@router.get("/locations", summary="보관 위치 목록 조회")
async def read_locations(
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """보관 위치 목록을 플랜트, 창고, 명칭 순으로 조회합니다."""
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        return responses.validation_failed([str(e)])

    try:
        rows = await mnt_crud.location.get_multi(
            db,
            filters={"activo": solo_activos},
            order_by=["planta", "bodega_deposito", "title"],
        )
        return responses.success(
            [mnt_services.to_location(row) for row in rows],
            "Ubicaciones obtenidas exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener ubicaciones: {e}", exc_info=True)
        return responses.error("Error al obtener ubicaciones", "ERROR_OBTENER_UBICACIONES")


@router.get("/locations/plant/", include_in_schema=False)
@router.get("/locations/plant", include_in_schema=False)
async def read_locations_without_plant():
    return responses.validation_failed(["Planta requerida"], "Datos de entrada inválidos")


@router.get("/locations/plant/{planta}", summary="플랜트별 보관 위치 조회")
async def read_locations_by_plant(
    planta: str,
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """특정 플랜트의 보관 위치를 조회합니다. 플랜트 코드는 대문자로 변환됩니다."""
    errores = []
    if not planta.strip():
        errores.append("Planta requerida")
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        errores.append(str(e))
    if errores:
        return responses.validation_failed(errores, "Datos de entrada inválidos")

    planta = planta.strip().upper()
    try:
        rows = await mnt_crud.location.get_by_plant(db, plant=planta, activo=solo_activos)
        return responses.success(
            [mnt_services.to_location(row) for row in rows],
            f"Ubicaciones de planta {planta} obtenidas exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener ubicaciones por planta ({planta}): {e}", exc_info=True)
        return responses.error("Error al obtener ubicaciones por planta", "ERROR_OBTENER_UBICACIONES_PLANTA")


# =============================================================================
# 5. 시즌 (temporadas_app)
# =============================================================================
@router.get("/seasons", summary="시즌 목록 조회")
async def read_seasons(
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """시즌 목록을 시작일 내림차순으로 조회합니다. 필드 이름은 변환하지 않습니다."""
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        return responses.validation_failed([str(e)])

    try:
        rows = await mnt_crud.season.get_multi(
            db, filters={"activo": solo_activos}, order_by=["-fecha_inicio"]
        )
        return responses.success(
            [mnt_services.to_season(row) for row in rows],
            "Temporadas obtenidas exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener temporadas: {e}", exc_info=True)
        return responses.error("Error al obtener temporadas", "ERROR_OBTENER_TEMPORADAS")


@router.get("/seasons/active", summary="활성 시즌 조회")
async def read_active_season(db: AsyncSession = Depends(deps.get_db_session)):
    """현재 활성 시즌을 조회합니다."""
    try:
        row = await mnt_crud.season.get_active(db)
        if row is None:
            return responses.not_found("No hay temporada activa configurada")
        return responses.success(
            mnt_services.to_active_season(row), "Temporada activa obtenida exitosamente"
        )
    except Exception as e:
        logger.error(f"Error al obtener temporada activa: {e}", exc_info=True)
        return responses.error("Error al obtener temporada activa", "ERROR_OBTENER_TEMPORADA_ACTIVA")


# =============================================================================
# 6. 이동 유형 (tipo_movimientos_app)
# =============================================================================
@router.get("/movement-types", summary="이동 유형 목록 조회")
async def read_movement_types(
    activo: Optional[str] = Query(None, description="true (기본값) 이면 활성, false 이면 비활성 레코드"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """이동 유형 목록을 명칭 순으로 조회합니다."""
    try:
        solo_activos = mnt_services.parse_activo(activo)
    except ValueError as e:
        return responses.validation_failed([str(e)])

    try:
        rows = await mnt_crud.movement_type.get_multi(
            db, filters={"activo": solo_activos}, order_by=["title"]
        )
        return responses.success(
            [mnt_services.to_movement_type(row) for row in rows],
            "Tipos de movimiento obtenidos exitosamente",
        )
    except Exception as e:
        logger.error(f"Error al obtener tipos de movimiento: {e}", exc_info=True)
        return responses.error("Error al obtener tipos de movimiento", "ERROR_OBTENER_TIPOS_MOVIMIENTO")


# =============================================================================
# 7. 단위 (정적 목록)
# =============================================================================
@router.get("/units", summary="단위 목록 조회")
async def read_units_of_measure():
    """정적 단위 목록을 반환합니다."""
    try:
        return responses.success(
            mnt_services.list_units_of_measure(), "Unidades de medida obtenidas exitosamente"
        )
    except Exception as e:
        logger.error(f"Error al obtener unidades de medida: {e}", exc_info=True)
        return responses.error("Error al obtener unidades de medida", "ERROR_OBTENER_UNIDADES_MEDIDA")


# =============================================================================
# 8. 마스터 데이터 요약
# =============================================================================
@router.get("/summary", summary="마스터 데이터 요약")
async def read_summary(session_factory: deps.SessionFactory = Depends(deps.get_session_factory)):
    """
    활성 자재/공급업체/위치/이동 유형 수와 활성 시즌을 한 번에 반환합니다.
    조회 중 하나라도 실패하면 부분 결과 없이 500 을 반환합니다.
    """
    try:
        summary = await mnt_services.get_maintainers_summary(session_factory)
        return responses.success(summary, "Resumen de mantenedores obtenido exitosamente")
    except Exception as e:
        logger.error(f"Error al obtener resumen de mantenedores: {e}", exc_info=True)
        return responses.error(
            "Error al obtener resumen de mantenedores", "ERROR_OBTENER_RESUMEN_MANTENEDORES"
        )
