from service.event.event_bus import (
    EventBus,
    InventoryEvent,
    InventoryEventType,
    Subscription,
)

__all__ = ["EventBus", "InventoryEvent", "InventoryEventType", "Subscription"]
