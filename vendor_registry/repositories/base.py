"""Generic async repository: plain CRUD with store errors translated to AppExceptions."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_registry.core.exceptions import DuplicateKeyError, StoreError
from vendor_registry.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def _driver_message(exc: SQLAlchemyError) -> str:
    """Return the DB-API error text without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Every statement failure is re-raised as :class:`StoreError`. An
    ``IntegrityError`` on insert is re-raised as :class:`DuplicateKeyError`
    naming ``unique_field``, so callers never inspect driver error text.
    """

    model: type[ModelT]
    unique_field: str = "id"

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_all(self) -> list[ModelT]:
        """Return every row in store order."""
        try:
            result = await self._session.execute(select(self.model))
        except SQLAlchemyError as exc:
            raise StoreError(_driver_message(exc)) from exc
        return list(result.scalars().all())

    async def count(self, **filters: Any) -> int:
        """Return the number of rows whose columns equal ``filters``."""
        q = select(func.count(1)).select_from(self.model)
        for col_name, value in filters.items():
            q = q.where(getattr(self.model, col_name) == value)
        try:
            return (await self._session.execute(q)).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError(_driver_message(exc)) from exc

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        try:
            await self._session.flush()  # populate id, surface constraint errors
        except IntegrityError as exc:
            raise DuplicateKeyError(self.unique_field, _driver_message(exc)) from exc
        except SQLAlchemyError as exc:
            raise StoreError(_driver_message(exc)) from exc
        return instance

    async def delete(self, entity_id: Any) -> bool:
        """Hard-delete by primary key. Returns False when no row matched."""
        try:
            result = await self._session.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
        except SQLAlchemyError as exc:
            raise StoreError(_driver_message(exc)) from exc
        return result.rowcount > 0
