"""
Common plumbing for the per-entity repositories.

A repository wraps one SQLAlchemy ``Session`` passed in by the caller. Store
exceptions never leave this layer: integrity and enum violations become
``ValidationError``, anything else from SQLAlchemy becomes ``StoreError``.
Pure reads are retried on ``OperationalError``; writes are not.
"""

from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar
from uuid import UUID
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError, StatementError
from sqlalchemy.orm import Session

from taskhub.core.errors import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
R = TypeVar("R")


def _integrity_message(exc: IntegrityError) -> str:
    detail = str(exc.orig).lower()
    if "unique" in detail or "duplicate" in detail:
        if "email" in detail:
            return "Email already in use"
        return "Duplicate value"
    if "foreign key" in detail:
        return "Referenced record does not exist"
    if "not null" in detail:
        return "Missing required field"
    if "check" in detail:
        return "Invalid value"
    return "Constraint violation"


class BaseRepository(Generic[ModelT]):
    model: Any = None
    not_found_message = "Record not found"

    def __init__(self, db: Session, auto_commit: bool = True) -> None:
        self.db = db
        self.auto_commit = auto_commit
        # a retry inside an open transaction would roll back pending writes
        self.read_retries = db.info.get("read_retries", 0) if auto_commit else 0

    # Reads

    def read(self, fn: Callable[[], R]) -> R:
        attempt = 0
        while True:
            try:
                return fn()
            except OperationalError as exc:
                if self.auto_commit:
                    self.db.rollback()
                if attempt >= self.read_retries:
                    logger.error(f"{self.model.__name__} read failed: {exc.orig}")
                    raise StoreError() from exc
                attempt += 1
                logger.warning(f"{self.model.__name__} read failed, retry {attempt}/{self.read_retries}")
            except SQLAlchemyError as exc:
                logger.error(f"{self.model.__name__} read failed: {exc}")
                raise StoreError() from exc

    def scalars(self, statement) -> List[ModelT]:
        return self.read(lambda: list(self.db.execute(statement).scalars().all()))

    def scalar_one_or_none(self, statement) -> Optional[ModelT]:
        return self.read(lambda: self.db.execute(statement).scalars().first())

    def load_options(self) -> Iterable:
        """Eager-load options applied by ``get``; overridden per entity."""
        return ()

    def get(self, entity_id: UUID) -> Optional[ModelT]:
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .options(*self.load_options())
            .execution_options(populate_existing=True)
        )
        return self.scalar_one_or_none(stmt)

    def find_by_id(self, entity_id: UUID) -> ModelT:
        entity = self.get(entity_id)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        return entity

    # Writes

    @contextmanager
    def store_errors(self):
        try:
            yield
        except IntegrityError as exc:
            self.db.rollback()
            message = _integrity_message(exc)
            logger.error(f"{self.model.__name__} write rejected: {message}")
            raise ValidationError(message) from exc
        except StatementError as exc:
            self.db.rollback()
            if isinstance(exc.orig, LookupError):
                raise ValidationError(str(exc.orig)) from exc
            logger.error(f"{self.model.__name__} write failed: {exc}")
            raise StoreError() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"{self.model.__name__} write failed: {exc}")
            raise StoreError() from exc

    def persist(self) -> None:
        """Commit, or only flush when the caller owns the transaction."""
        with self.store_errors():
            if self.auto_commit:
                self.db.commit()
            else:
                self.db.flush()

    def create(self, **values) -> ModelT:
        entity = self.model(**values)
        self.db.add(entity)
        self.persist()
        return entity

    def update(self, entity_id: UUID, **values) -> ModelT:
        entity = self.find_by_id(entity_id)
        return self.apply(entity, **values)

    def apply(self, entity: ModelT, **values) -> ModelT:
        for field, value in values.items():
            setattr(entity, field, value)
        self.persist()
        return entity

    def delete(self, entity_id: UUID) -> ModelT:
        return self.remove(self.find_by_id(entity_id))

    def remove(self, entity: ModelT) -> ModelT:
        self.db.delete(entity)
        self.persist()
        return entity


@contextmanager
def transaction(db: Session):
    """Unit of work for multi-row writes: commit once at the end or roll everything back.

    Repositories used inside must be built with ``auto_commit=False``.
    """
    try:
        yield
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ValidationError(_integrity_message(exc)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Transaction failed: {exc}")
        raise StoreError() from exc
    except Exception:
        db.rollback()
        raise
