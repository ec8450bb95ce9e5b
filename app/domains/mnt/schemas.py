# app/domains/mnt/schemas.py

"""
'mnt' 도메인의 응답 스키마를 정의하는 모듈입니다.

외부 테이블의 컬럼 이름을 프론트엔드가 기대하는 이름으로 바꾼 형태입니다.
(예: materiales.codigo_ranco -> codigo, proveedores.title -> nombre)
"""

from typing import Optional
from datetime import date
from pydantic import Field
from sqlmodel import SQLModel


# =============================================================================
# 1. 정적 목록 (플랜트, 단위)
# =============================================================================
class CatalogEntryRead(SQLModel):
    codigo: str = Field(..., description="코드")
    nombre: str = Field(..., description="표시 이름")
    descripcion: str = Field(..., description="설명")


# =============================================================================
# 2. materiales 응답 스키마
# =============================================================================
class MaterialRead(SQLModel):
    id: int = Field(..., description="자재 고유 ID")
    codigo: str = Field(..., description="자재 코드 (codigo_ranco)")
    nombre: str = Field(..., description="자재 명칭 (nombre_material)")
    unidad_medida: Optional[str] = Field(None, description="단위 코드")
    requiere_frio: bool = Field(..., description="냉장 보관 필요 여부")
    activo: bool = Field(..., description="활성 여부")


# =============================================================================
# 3. proveedores 응답 스키마
# =============================================================================
class SupplierRead(SQLModel):
    id: int = Field(..., description="공급업체 고유 ID")
    codigo: str = Field(..., description="ID로 생성한 표시 코드 (예: 'PROV007')")
    nombre: str = Field(..., description="공급업체 명칭 (title)")
    # 아래 필드는 외부 테이블에 없으며 프론트엔드 호환을 위해 항상 null 입니다.
    rut: Optional[str] = None
    contacto: Optional[str] = None
    telefono: Optional[str] = None
    email: Optional[str] = None
    activo: bool = Field(..., description="활성 여부")


# =============================================================================
# 4. ubicacion 응답 스키마
# =============================================================================
class LocationRead(SQLModel):
    id: int = Field(..., description="위치 고유 ID")
    codigo: str = Field(..., description="ID로 생성한 표시 코드 (예: 'UB007')")
    nombre: str = Field(..., description="위치 명칭 (title)")
    bodega: Optional[str] = Field(None, description="창고/보관소 (bodega_deposito)")
    planta: Optional[str] = Field(None, description="플랜트 코드")
    tipo: str = Field("bodega", description="위치 유형")
    activo: bool = Field(..., description="활성 여부")


# =============================================================================
# 5. temporadas_app 응답 스키마
# =============================================================================
class SeasonRead(SQLModel):
    """시즌 목록 조회 시 사용하는 원본 행 형태."""
    id: int
    title: str
    fecha_inicio: Optional[date] = None
    fecha_fin: Optional[date] = None
    activo: bool

    class Config:
        from_attributes = True


class ActiveSeasonRead(SQLModel):
    id: int = Field(..., description="시즌 고유 ID")
    codigo: str = Field(..., description="시즌 코드 (title)")
    nombre: str = Field(..., description="시즌 명칭 (title)")
    fecha_inicio: Optional[date] = Field(None, description="시작일")
    fecha_termino: Optional[date] = Field(None, description="종료일 (fecha_fin)")
    activa: bool = Field(..., description="활성 여부")


# =============================================================================
# 6. tipo_movimientos_app 응답 스키마
# =============================================================================
class MovementTypeRead(SQLModel):
    id: int = Field(..., description="이동 유형 고유 ID")
    codigo: str = Field(..., description="이동 유형 코드 (title)")
    nombre: str = Field(..., description="이동 유형 명칭 (title)")
    descripcion: Optional[str] = Field(None, description="설명")
    activo: bool = Field(..., description="활성 여부")


# =============================================================================
# 7. 마스터 데이터 요약
# =============================================================================
class MaintainerSummary(SQLModel):
    materiales: int = Field(..., description="활성 자재 수")
    proveedores: int = Field(..., description="활성 공급업체 수")
    ubicaciones: int = Field(..., description="활성 위치 수")
    tiposMovimiento: int = Field(..., description="활성 이동 유형 수")
    plantas: int = Field(..., description="플랜트 수 (정적 목록)")
    unidadesMedida: int = Field(..., description="단위 수 (정적 목록)")
    temporadaActiva: Optional[str] = Field(None, description="활성 시즌 명칭")
