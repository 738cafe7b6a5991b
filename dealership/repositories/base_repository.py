# File: dealership/repositories/base_repository.py

from typing import Generic, TypeVar, Dict, Any, Optional, List, Type
from sqlalchemy.orm import Session
from sqlalchemy.orm.util import identity_key
from sqlalchemy import select, func

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository class providing common data access for all entities using
    modern SQLAlchemy select() syntax.

    Repositories never commit. They add and flush on the session they were
    given, so several repositories can take part in one transaction owned by
    the calling service.

    Attributes:
        session (Session): The SQLAlchemy session for database operations
        model (Type[T]): The SQLAlchemy model class this repository manages
    """

    def __init__(self, session: Session, model: Optional[Type[T]] = None):
        """
        Initialize the repository with a database session and the specific model.

        Args:
            session (Session): SQLAlchemy database session
            model (Type[T]): The SQLAlchemy model class this repository manages.
        """
        self.session = session
        self.model = model

    def _get_model(self) -> Type[T]:
        """Ensures the model is set before use."""
        if self.model is None:
            raise TypeError(f"Repository model is not set for {self.__class__.__name__}")
        return self.model

    def _pk_column(self):
        model_class = self._get_model()
        return model_class.__mapper__.primary_key[0]

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve an entity by its primary key.

        Args:
            id (int): The primary key ID of the entity

        Returns:
            Optional[T]: The entity if found, None otherwise
        """
        model_class = self._get_model()
        stmt = select(model_class).where(self._pk_column() == id)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists(self, id: int) -> bool:
        """
        Check whether a row with the given primary key exists.

        Args:
            id (int): The primary key ID of the entity

        Returns:
            bool: True if the row exists
        """
        stmt = select(self._pk_column()).where(self._pk_column() == id).limit(1)
        return self.session.execute(stmt).first() is not None

    def list(self, skip: int = 0, limit: int = 100, **filters) -> List[T]:
        """
        Retrieve a list of entities with pagination.

        Args:
            skip (int): Number of records to skip (for pagination)
            limit (int): Maximum number of records to return
            **filters: Additional filters to apply (field=value pairs)

        Returns:
            List[T]: List of entities matching the criteria
        """
        model_class = self._get_model()
        stmt = select(model_class)

        for key, value in filters.items():
            if hasattr(model_class, key):
                stmt = stmt.where(getattr(model_class, key) == value)

        stmt = stmt.order_by(self._pk_column()).offset(skip).limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def add(self, data: Dict[str, Any]) -> T:
        """
        Insert a new entity and flush it so generated keys are populated.

        Args:
            data (Dict[str, Any]): Dictionary containing entity field values

        Returns:
            T: The pending entity with its primary key assigned
        """
        model_class = self._get_model()
        model_columns = {c.key for c in model_class.__table__.columns}
        filtered_data = {k: v for k, v in data.items() if k in model_columns}

        entity = model_class(**filtered_data)
        self.session.add(entity)
        self.session.flush()
        return entity

    def count(self, **filters) -> int:
        """
        Count entities matching the given filters.

        Args:
            **filters: Filters to apply (field=value pairs)

        Returns:
            int: Count of matching entities
        """
        model_class = self._get_model()
        stmt = select(func.count(self._pk_column())).select_from(model_class)

        for key, value in filters.items():
            if hasattr(model_class, key):
                stmt = stmt.where(getattr(model_class, key) == value)

        return self.session.execute(stmt).scalar_one()

    def expire_cached(self, id: int) -> None:
        """
        Expire the session's cached copy of a row after a bulk UPDATE.

        Args:
            id (int): The primary key ID of the entity
        """
        instance = self.session.identity_map.get(identity_key(self._get_model(), id))
        if instance is not None:
            self.session.expire(instance)
