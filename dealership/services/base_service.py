# File: dealership/services/base_service.py

from typing import TypeVar, Generic, Optional, Type
from contextlib import contextmanager
import logging

from sqlalchemy.orm import Session

from dealership.core.exceptions import DealershipException, ValidationException
from dealership.repositories.base_repository import BaseRepository

T = TypeVar("T")
logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """
    Base service for dealership services.

    Provides common functionality including:
    - Transaction management
    - Error handling and standardization
    - Event publishing
    """

    def __init__(
            self,
            session: Session,
            repository_class: Optional[Type[BaseRepository]] = None,
            repository: Optional[BaseRepository] = None,
            event_bus=None,
    ):
        """
        Initialize service with dependencies.

        Args:
            session: Database session for persistence operations
            repository_class: Repository class to instantiate (optional if repository is provided)
            repository: Repository instance (optional if repository_class is provided)
            event_bus: Optional event bus for publishing domain events
        """
        self.session = session

        if repository is not None:
            self.repository = repository
        elif repository_class is not None:
            self.repository = repository_class(session)
        else:
            self.repository = None

        self.event_bus = event_bus

    @contextmanager
    def transaction(self):
        """
        Provide a transactional scope around operations.

        Commits when the block exits normally. On any exception the session is
        rolled back before the error propagates, so nothing written inside the
        block is ever committed.

        Yields:
            The service session

        Raises:
            DealershipException: Domain errors, and storage errors after
                transformation by _transform_error
        """
        try:
            yield self.session
            self.session.commit()
        except Exception as e:
            self.session.rollback()

            if isinstance(e, ValidationException):
                logger.warning(f"Transaction aborted: {e.message}")
                raise

            logger.error(f"Transaction failed: {str(e)}", exc_info=True)

            if not isinstance(e, DealershipException):
                transformed = self._transform_error(e)
                if transformed is not None:
                    raise transformed from e
            raise

    def _transform_error(self, error: Exception) -> Optional[DealershipException]:
        """
        Map a low-level error to a domain exception.

        Returns:
            The domain exception to raise, or None to re-raise the original
        """
        return None

    def _publish(self, event) -> None:
        if self.event_bus:
            self.event_bus.publish(event)
