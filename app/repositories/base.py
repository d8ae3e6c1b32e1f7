"""
Base Repository
Generic find/save/delete helpers over a SQLAlchemy session, keyed by an
integer primary key.
"""
import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """
    Generic repository bound to one ORM model and one session.

    Every mutating call commits on its own; a failed commit is rolled back
    and the error re-raised.
    """

    def __init__(self, model: Type[ModelT], db: Session) -> None:
        self.model = model
        self.db = db

    def find_all(self) -> List[ModelT]:
        return self.db.query(self.model).all()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """
        Insert the entity if it has no identifier, otherwise update it.

        An entity carrying an identifier replaces the stored row as a whole:
        columns it does not set are written as None. If the identifier is not
        stored yet the entity is inserted with it.
        """
        state = inspect(entity)
        if state.persistent or state.pending:
            persisted = entity
            explicit_id = state.attrs.id.history.has_changes()
        elif getattr(entity, "id", None) is None:
            self.db.add(entity)
            persisted = entity
            explicit_id = False
        else:
            for attr in inspect(self.model).column_attrs:
                if attr.key not in entity.__dict__:
                    setattr(entity, attr.key, None)
            persisted = self.db.merge(entity)
            explicit_id = True

        try:
            self.db.commit()
            if explicit_id:
                self._sync_id_sequence()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(persisted)
        logger.info(f"Saved {self.model.__name__} id={persisted.id}")
        return persisted

    def _sync_id_sequence(self) -> None:
        """
        Move the PostgreSQL id sequence past the highest stored id.

        Rows written with a caller-supplied id do not advance the sequence;
        without this the next generated id can collide with them.
        """
        if self.db.get_bind().dialect.name != "postgresql":
            return
        table = self.model.__tablename__
        self.db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE(MAX(id), 1), MAX(id) IS NOT NULL) FROM {table}"
            )
        )
        self.db.commit()

    def delete_by_id(self, entity_id: int) -> None:
        """Delete the entity with this id. A missing id is not an error."""
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == entity_id)
                .delete(synchronize_session="fetch")
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if deleted:
            logger.info(f"Deleted {self.model.__name__} id={entity_id}")
        else:
            logger.info(f"No {self.model.__name__} with id={entity_id} to delete")
