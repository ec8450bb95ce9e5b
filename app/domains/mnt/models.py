# app/domains/mnt/models.py

"""
'mnt' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈의 테이블 (materiales, proveedores, ubicacion, temporadas_app,
tipo_movimientos_app)은 외부 시스템이 소유하며, 이 서비스는 조회만 수행합니다.
컬럼 이름은 외부 테이블의 이름을 그대로 사용합니다.
"""

from typing import Optional
from datetime import date
from sqlmodel import Field, SQLModel


# =============================================================================
# 1. materiales 테이블 모델
# =============================================================================
class Material(SQLModel, table=True):
    """
    자재 마스터. frio 컬럼은 'Si'/'Sí'/'No' 형태의 문자열로 저장됩니다.
    """
    __tablename__ = "materiales"

    id: Optional[int] = Field(default=None, primary_key=True)
    codigo_ranco: str = Field(max_length=50, index=True, description="자재 업무 코드")
    nombre_material: str = Field(max_length=255, description="자재 명칭")
    unidad_medida: Optional[str] = Field(default=None, max_length=20, description="단위 코드")
    frio: Optional[str] = Field(default=None, max_length=5, description="냉장 보관 필요 여부 ('Si'/'No')")
    activo: bool = Field(default=True, description="활성 여부")


# =============================================================================
# 2. proveedores 테이블 모델
# =============================================================================
class Supplier(SQLModel, table=True):
    """공급업체 마스터. 별도의 업무 코드 컬럼이 없습니다."""
    __tablename__ = "proveedores"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, description="공급업체 명칭")
    activo: bool = Field(default=True, description="활성 여부")


# =============================================================================
# 3. ubicacion 테이블 모델
# =============================================================================
class Location(SQLModel, table=True):
    """플랜트 내 보관 위치 (창고/보관소)."""
    __tablename__ = "ubicacion"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, description="위치 명칭")
    bodega_deposito: Optional[str] = Field(default=None, max_length=100, description="창고/보관소")
    planta: Optional[str] = Field(default=None, max_length=50, index=True, description="플랜트 코드")
    activo: bool = Field(default=True, description="활성 여부")


# =============================================================================
# 4. temporadas_app 테이블 모델
# =============================================================================
class Season(SQLModel, table=True):
    """작업 시즌."""
    __tablename__ = "temporadas_app"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100, description="시즌 명칭 (예: '2024-2025')")
    fecha_inicio: Optional[date] = Field(default=None, description="시작일")
    fecha_fin: Optional[date] = Field(default=None, description="종료일")
    activo: bool = Field(default=True, description="활성 여부")


# =============================================================================
# 5. tipo_movimientos_app 테이블 모델
# =============================================================================
class MovementType(SQLModel, table=True):
    """재고 이동 유형."""
    __tablename__ = "tipo_movimientos_app"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100, description="이동 유형 명칭")
    descripcion: Optional[str] = Field(default=None, description="설명")
    activo: bool = Field(default=True, description="활성 여부")
