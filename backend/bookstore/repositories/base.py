"""
Bookstore Backend — Generic Entity Repository
===============================================

What:  The persistence contract, implemented once over any ORM model with an
       integer `id` primary key.
How:   Wraps one AsyncSession. Every write stages its change and then calls
       save(), which commits and reports whether anything was staged.
Who:   Instantiated per request by the CRUD router with the request's session.

Failure semantics:
    Persistence-layer faults (IntegrityError, OperationalError, ...) propagate
    to the caller unchanged after the session has been rolled back.
    Nothing is retried.
"""

import logging
from typing import ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy import exists, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Largest value an Integer primary key holds on every supported backend
# (PostgreSQL INTEGER is 32-bit).
MAX_ID = 2**31 - 1


def is_storable_id(entity_id: int) -> bool:
    return 1 <= entity_id <= MAX_ID


class Repository(Generic[ModelT]):
    """
    CRUD operations for one ORM model.

    Subclasses set `model`:

        class AuthorRepository(Repository[Author]):
            model = Author
    """

    model: ClassVar[Type[Base]]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    async def find_all(self) -> List[ModelT]:
        """All rows ordered by id. Empty list (never None) when there are none."""
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        entities = list(result.scalars().all())
        logger.debug("Loaded %d %s rows", len(entities), self.entity_name)
        return entities

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Primary-key lookup. Absence is reported as None, not raised.

        Ids no row can carry are answered without a query.
        """
        if not is_storable_id(entity_id):
            return None
        return await self.db.get(self.model, entity_id)

    async def does_exist(self, entity_id: int) -> bool:
        if not is_storable_id(entity_id):
            return False
        result = await self.db.execute(
            select(exists().where(self.model.id == entity_id))
        )
        return bool(result.scalar())

    async def create(self, entity: ModelT) -> bool:
        """Stage an insert and commit. The generated id is set on `entity`."""
        self.db.add(entity)
        return await self.save()

    async def update(self, entity: ModelT) -> bool:
        """
        Replace every column of the row whose primary key is `entity.id`.

        `entity` is usually a detached instance built from an update DTO;
        its column values are copied onto the persisted row, so fields the
        DTO left unset become NULL.

        Returns:
            False without committing when no row has that id.
        """
        existing = await self.find_by_id(entity.id)
        if existing is None:
            logger.warning("No %s row with id %s to update", self.entity_name, entity.id)
            return False
        for column in inspect(self.model).column_attrs:
            setattr(existing, column.key, getattr(entity, column.key))
        return await self.save()

    async def delete(self, entity: ModelT) -> bool:
        await self.db.delete(entity)
        return await self.save()

    async def save(self) -> bool:
        """
        Commit staged changes.

        Returns True iff at least one row was staged (new, dirty or deleted).
        On a commit fault the session is rolled back and the error re-raised.
        """
        changes = len(self.db.new) + len(self.db.dirty) + len(self.db.deleted)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        logger.debug("Committed %d staged %s change(s)", changes, self.entity_name)
        return changes > 0
