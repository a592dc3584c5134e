"""시스템 속성 레포지토리 (securitydb).

System Property Repository — Named property lookups in securitydb.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from openbank.models.system_property import SystemProperty
from openbank.repositories.base import BaseRepository


class SystemPropertyRepository(BaseRepository[SystemProperty]):
    """시스템 속성 테이블 레포지토리.

    Repository for the system_properties table.
    """

    def __init__(self) -> None:
        super().__init__(SystemProperty)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> SystemProperty | None:
        query: Select = select(SystemProperty).where(SystemProperty.name == name)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_value(
        self,
        db: AsyncSession,
        name: str,
    ) -> str | None:
        """속성 값을 조회합니다.

        Return the value of the named property, or None when it is not set.
        """
        prop: SystemProperty | None = await self.get_by_name(db, name)
        return prop.value if prop is not None else None

    async def set_value(
        self,
        db: AsyncSession,
        name: str,
        value: str,
    ) -> SystemProperty:
        """속성 값을 생성하거나 갱신합니다.

        Create the named property or overwrite its value.
        """
        prop: SystemProperty | None = await self.get_by_name(db, name)
        if prop is None:
            return await self.create(db, {"name": name, "value": value})
        return await self.update(db, prop, {"value": value})


# 싱글턴 인스턴스 — Singleton instance
system_property_repository: SystemPropertyRepository = SystemPropertyRepository()
