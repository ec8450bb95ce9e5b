# app/domains/mnt/crud.py

"""
'mnt' 도메인 (마스터 데이터)과 관련된 조회 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

# 공통 CRUDBase 및 mnt 도메인의 모델 임포트
from app.core.crud_base import CRUDBase
from . import models as mnt_models


# =============================================================================
# 1. 자재 (Material) CRUD
# =============================================================================
class CRUDMaterial(CRUDBase[mnt_models.Material]):
    def __init__(self):
        super().__init__(model=mnt_models.Material)

    async def get_active_by_code(self, db: AsyncSession, *, code: str) -> Optional[mnt_models.Material]:
        """활성 자재를 업무 코드(codigo_ranco)로 조회합니다."""
        return await self.get_first(db, filters={"codigo_ranco": code, "activo": True})


# =============================================================================
# 2. 공급업체 (Supplier) CRUD
# =============================================================================
class CRUDSupplier(CRUDBase[mnt_models.Supplier]):
    def __init__(self):
        super().__init__(model=mnt_models.Supplier)

    async def get_active_by_id(self, db: AsyncSession, *, id: int) -> Optional[mnt_models.Supplier]:
        """활성 공급업체를 ID로 조회합니다."""
        return await self.get_first(db, filters={"id": id, "activo": True})

    async def get_active_by_name(self, db: AsyncSession, *, term: str) -> Optional[mnt_models.Supplier]:
        """이름에 term 이 포함된(대소문자 무시) 첫 번째 활성 공급업체를 조회합니다."""
        return await self.get_first(
            db,
            filters={"activo": True},
            conditions=[self.model.title.icontains(term, autoescape=True)],
            order_by=["title"],
        )


# =============================================================================
# 3. 보관 위치 (Location) CRUD
# =============================================================================
class CRUDLocation(CRUDBase[mnt_models.Location]):
    def __init__(self):
        super().__init__(model=mnt_models.Location)

    async def get_by_plant(
        self, db: AsyncSession, *, plant: str, activo: bool = True
    ) -> List[mnt_models.Location]:
        """특정 플랜트의 위치 목록을 창고, 명칭 순으로 조회합니다."""
        return await self.get_multi(
            db,
            filters={"planta": plant, "activo": activo},
            order_by=["bodega_deposito", "title"],
        )


# =============================================================================
# 4. 시즌 (Season) CRUD
# =============================================================================
class CRUDSeason(CRUDBase[mnt_models.Season]):
    def __init__(self):
        super().__init__(model=mnt_models.Season)

    async def get_active(self, db: AsyncSession) -> Optional[mnt_models.Season]:
        """활성 시즌을 조회합니다. 여러 개인 경우 가장 최근에 시작한 시즌을 반환합니다."""
        return await self.get_first(db, filters={"activo": True}, order_by=["-fecha_inicio", "-id"])


# CRUD 객체 인스턴스 생성
material = CRUDMaterial()
supplier = CRUDSupplier()
location = CRUDLocation()
season = CRUDSeason()
movement_type = CRUDBase(mnt_models.MovementType)
