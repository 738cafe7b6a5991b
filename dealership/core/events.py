# File: dealership/core/events.py

from typing import Dict, Any, Callable, List, Type
from collections import defaultdict
from dataclasses import dataclass, field, asdict
from datetime import datetime, date
from decimal import Decimal
import threading
import uuid
import logging

logger = logging.getLogger(__name__)

EventHandler = Callable[["DomainEvent"], None]


# --- Base DomainEvent ---
@dataclass(eq=False)
class DomainEvent:
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["event_type"] = self.__class__.__name__

        for key, value in result.items():
            if isinstance(value, (datetime, date)):
                result[key] = value.isoformat()
            elif isinstance(value, Decimal):
                result[key] = str(value)
        return result


# --- Sales Event Definitions ---
@dataclass(eq=False)
class SaleRecorded(DomainEvent):
    sale_id: int = 0
    customer_id: int = 0
    vehicle_id: int = 0
    salesperson_id: int = 0
    sale_price: Decimal = Decimal("0.00")
    sale_date: date = None
    maintenance_id: int = 0


class EventBus:
    """
    Synchronous event bus for domain events.

    Usage:
        event_bus.subscribe(SaleRecorded, handle_sale_recorded)
        event_bus.publish(SaleRecorded(sale_id=123))
    """

    def __init__(self):
        self.subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        with self._lock:
            self.subscribers[event_type.__name__].append(handler)
        logger.debug(f"Subscribed {handler.__name__} to {event_type.__name__}")

    def publish(self, event: DomainEvent) -> None:
        """
        Publish an event to all registered handlers.

        Handler exceptions are logged and do not propagate to the publisher.
        """
        event_type = type(event).__name__
        logger.debug(f"Publishing event {event_type} ID {event.event_id}")
        with self._lock:
            subscribers_copy = list(self.subscribers.get(event_type, []))
        for handler in subscribers_copy:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Error in handler {handler.__name__} for {event_type} ID {event.event_id}: {e}",
                    exc_info=True,
                )
