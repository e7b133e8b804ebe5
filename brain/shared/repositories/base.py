"""
Base Repository

Generic data access shared by every Brain repository.

Operations:
===========
- get(record_id)              → One row by primary key, or None
- count(filters)              → Number of matching rows
- create(**values)            → INSERT through the ORM, DB defaults refreshed
- insert_ignoring_conflicts() → INSERT ... ON CONFLICT (...) DO NOTHING
- delete(record_id)           → Hard delete through the ORM (cascades apply)

Typing:
=======
    class TagRepository(BaseRepository[Tag]):
        def __init__(self, session):
            super().__init__(Tag, session)

    tag = await TagRepository(db).get(tag_id)   # Optional[Tag]

Transactions:
=============
Repositories flush and never commit. get_db() owns the transaction and
commits once per request, so a failing handler leaves no partial writes.

Uniqueness under concurrency:
=============================
insert_ignoring_conflicts() lets the database's unique index pick a single
winner. It renders for the bound dialect: PostgreSQL in deployments and
SQLite under test.
"""

from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from brain.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Common queries for one mapped model.

    Attributes:
        model: Mapped class handled by this repository
        session: Request-scoped AsyncSession
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    def _filtered(self, query, filters: Optional[dict[str, Any]]):
        for field, value in (filters or {}).items():
            if not hasattr(self.model, field):
                raise ValueError(f"{self.model.__name__} has no field {field!r}")
            query = query.where(getattr(self.model, field) == value)
        return query

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """Fetch one row by id, None when it does not exist."""
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Number of rows matching every field=value pair in filters.

        Raises:
            ValueError: A filter names a field the model does not have
        """
        query = self._filtered(select(sql_count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **values: Any) -> ModelType:
        """
        Insert a row through the ORM.

        The instance is flushed and refreshed so server defaults such as
        created_at are populated before it is returned.
        """
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def insert_ignoring_conflicts(
        self,
        conflict_columns: Sequence[str],
        **values: Any,
    ) -> None:
        """
        Insert a row unless the unique index on conflict_columns already
        holds a matching one.

        Column defaults (uuid4 ids) still apply. Callers read the row back
        afterwards to learn which insert won.

        SQL Generated:
            INSERT INTO share_links (id, hash, user_id) VALUES (...)
            ON CONFLICT (user_id) DO NOTHING
        """
        dialect = self.session.get_bind().dialect.name
        insert = sqlite_insert if dialect == "sqlite" else postgresql_insert
        stmt = insert(self.model).values(**values).on_conflict_do_nothing(
            index_elements=list(conflict_columns),
        )
        await self.session.execute(stmt)

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a row by id.

        Returns:
            False if there was nothing to delete
        """
        instance = await self.get(record_id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
