# app/core/crud_base.py

"""
공통 읽기 전용 CRUD 작업을 위한 기본 클래스 모듈입니다.
마스터 데이터 테이블은 외부 시스템이 소유하므로 조회 메서드만 제공합니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.
"""

from typing import Generic, List, Optional, Sequence, Type, TypeVar, Any, Dict
import logging

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

ModelType = TypeVar("ModelType", bound=SQLModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType]):
    """
    모든 조회 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _conditions(self, filters: Optional[Dict[str, Any]]) -> List[Any]:
        """필터 딕셔너리 {"attribute_name": value} 를 where 조건 목록으로 변환합니다."""
        conditions = []
        for attribute, value in (filters or {}).items():
            if hasattr(self.model, attribute):
                conditions.append(getattr(self.model, attribute) == value)
            else:
                # 유효하지 않은 속성이 전달될 경우 경고만 남기고 무시합니다.
                logger.warning("Model %s has no attribute '%s'", self.model.__name__, attribute)
        return conditions

    def _ordering(self, order_by: Optional[Sequence[str]]) -> List[Any]:
        """
        정렬 필드 목록을 order_by 절로 변환합니다.
        필드 이름 앞에 '-' 를 붙이면 내림차순입니다. (예: ["-fecha_inicio"])
        """
        clauses = []
        for field in order_by or []:
            desc = field.startswith("-")
            name = field.lstrip("-")
            if not hasattr(self.model, name):
                logger.warning("Model %s has no attribute '%s' for ordering.", self.model.__name__, name)
                continue
            column = getattr(self.model, name)
            clauses.append(column.desc() if desc else column.asc())
        return clauses

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,   # 다중 속성 필터: {"attribute_name": "value"}
        order_by: Optional[Sequence[str]] = None,   # 정렬 필드 목록 (예: ["planta", "title"])
    ) -> List[ModelType]:
        """
        다중 속성 필터와 정렬을 적용하여 여러 레코드를 조회합니다.
        """
        query = select(self.model)
        conditions = self._conditions(filters)
        if conditions:
            query = query.where(*conditions)
        ordering = self._ordering(order_by)
        if ordering:
            query = query.order_by(*ordering)

        result = await db.execute(query)
        return list(result.scalars().all())

    """
    조건을 만족하는 레코드가 여러 개 있더라도, 이 함수는 그 중 첫 번째 것을 반환하며,
    조건을 만족하는 레코드가 전혀 없으면 None을 반환
    """
    async def get_first(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,
        conditions: Optional[Sequence[Any]] = None,  # 등호 이외의 추가 where 조건
        order_by: Optional[Sequence[str]] = None,
    ) -> Optional[ModelType]:
        """
        다중 속성 필터를 적용하여 단일 항목을 조회합니다.
        """
        query = select(self.model)
        where = self._conditions(filters) + list(conditions or [])
        if where:
            query = query.where(*where)
        ordering = self._ordering(order_by)
        if ordering:
            query = query.order_by(*ordering)
        query = query.limit(1)

        result = await db.execute(query)
        return result.scalars().first()

    async def count(self, db: AsyncSession, *, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        조건을 만족하는 레코드 수를 반환합니다.
        """
        query = select(func.count()).select_from(self.model)
        conditions = self._conditions(filters)
        if conditions:
            query = query.where(*conditions)
        result = await db.execute(query)
        return result.scalar_one()
