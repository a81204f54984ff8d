# app/services/gateway.py
"""
Persistence gateway over a SQLAlchemy session.

The services never build queries themselves: they go through this small
create / find / update / delete surface keyed by string ids. Every
SQLAlchemy failure is rolled back, logged and re-raised as ``GatewayError``
so callers only ever see the error taxonomy from ``app.core.errors``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, GatewayError, NotFound
from app.core.logging_config import logger
from app.models.base import utcnow

T = TypeVar("T")


def _plain(value: Any) -> Any:
    # enums are stored by value
    return getattr(value, "value", value)


class Gateway:
    def __init__(self, db: Session):
        self.db = db

    # ---------------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------------
    def _fail(self, action: str, model: type, e: Exception) -> GatewayError:
        self.db.rollback()
        logger.exception("gateway_failed", action=action, entity=model.__name__)
        if isinstance(e, IntegrityError):
            return ConflictError(
                f"{model.__name__} {action} conflicts with existing data", detail=str(e)
            )
        return GatewayError(detail=str(e))

    @staticmethod
    def _where(model: type, filters: Optional[Mapping[str, Any]]) -> list:
        clauses = []
        for name, value in (filters or {}).items():
            column = getattr(model, name)
            if isinstance(value, (list, tuple, set, frozenset)):
                clauses.append(column.in_([_plain(v) for v in value]))
            else:
                clauses.append(column == _plain(value))
        return clauses

    # ---------------------------------------------------------------
    # Create / read
    # ---------------------------------------------------------------
    def create(self, model: Type[T], fields: Mapping[str, Any]) -> T:
        obj = model(**{k: _plain(v) for k, v in fields.items()})
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise self._fail("create", model, e) from e
        return obj

    def find_by_id(self, model: Type[T], entity_id: str) -> Optional[T]:
        try:
            return self.db.get(model, entity_id)
        except SQLAlchemyError as e:
            raise self._fail("read", model, e) from e

    def require(self, model: Type[T], entity_id: str) -> T:
        obj = self.find_by_id(model, entity_id)
        if obj is None:
            raise NotFound(model.__name__, entity_id)
        return obj

    def find_many(
        self,
        model: Type[T],
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[Any]] = None,
        limit: Optional[int] = None,
    ) -> List[T]:
        stmt = select(model).where(*self._where(model, filters))
        if order_by is not None:
            stmt = stmt.order_by(*order_by)
        if limit:
            stmt = stmt.limit(limit)
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as e:
            raise self._fail("read", model, e) from e

    def count(self, model: type, filters: Optional[Mapping[str, Any]] = None) -> int:
        stmt = select(func.count()).select_from(model).where(*self._where(model, filters))
        try:
            return int(self.db.scalar(stmt) or 0)
        except SQLAlchemyError as e:
            raise self._fail("read", model, e) from e

    # ---------------------------------------------------------------
    # Update / delete
    # ---------------------------------------------------------------
    def update(self, model: Type[T], entity_id: str, fields: Mapping[str, Any]) -> T:
        obj = self.require(model, entity_id)
        try:
            for name, value in fields.items():
                setattr(obj, name, _plain(value))
            self.db.commit()
            self.db.refresh(obj)
        except SQLAlchemyError as e:
            raise self._fail("update", model, e) from e
        return obj

    def update_where(
        self,
        model: type,
        entity_id: str,
        expected: Mapping[str, Any],
        fields: Mapping[str, Any],
    ) -> bool:
        """
        Single conditional UPDATE: applies ``fields`` only while the row still
        matches ``expected``. Returns False when nothing matched.
        """
        values: Dict[str, Any] = {k: _plain(v) for k, v in fields.items()}
        if hasattr(model, "updated_at"):
            values.setdefault("updated_at", utcnow())

        stmt = (
            update(model)
            .where(model.id == entity_id, *self._where(model, expected))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("update", model, e) from e

        # loaded instances still carry the pre-update values
        self.db.expire_all()
        return result.rowcount == 1

    def delete(self, model: type, entity_id: str) -> None:
        obj = self.require(model, entity_id)
        try:
            self.db.delete(obj)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", model, e) from e
