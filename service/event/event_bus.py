"""
이벤트 버스 (Event Bus)

옵저버 패턴을 사용하여 인벤토리 변경 이벤트를 발행하고 구독합니다.
인벤토리는 변경이 확정된 뒤 이벤트를 발행하기만 하고, 구독자(UI 등)는 이벤트를 받아 상태를 다시 조회합니다.

이벤트는 같은 호출 스택 안에서 동기적으로 전달되며, 묶거나 합치지 않습니다.
"""

import logging
import uuid
from datetime import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from models.inventory_item import InventoryItem

logger = logging.getLogger(__name__)


class InventoryEventType(Enum):
    """인벤토리 이벤트 타입"""

    INVENTORY_CHANGED = "inventory_changed"     # 인벤토리 전체 변경
    ITEM_ADDED = "item_added"                   # 새 슬롯에 아이템 추가
    ITEM_REMOVED = "item_removed"               # 슬롯에서 아이템 제거
    ITEM_STACK_CHANGED = "item_stack_changed"   # 기존 슬롯의 스택 크기 변경


@dataclass
class InventoryEvent:
    """인벤토리 이벤트"""

    type: InventoryEventType
    item_id: Optional[uuid.UUID] = None
    item: Optional[InventoryItem] = None
    new_stack_size: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __repr__(self) -> str:
        return (
            f"InventoryEvent(type={self.type.value}, item_id={self.item_id}, "
            f"new_stack_size={self.new_stack_size})"
        )


EventCallback = Callable[[InventoryEvent], None]


class Subscription:
    """
    구독 토큰

    subscribe()가 반환하며, cancel()로 구독을 해제합니다.
    with 문으로 사용하면 블록을 벗어날 때 자동으로 해제됩니다.
    """

    def __init__(self, bus: "EventBus", event_type: InventoryEventType, callback: EventCallback):
        self.bus = bus
        self.event_type = event_type
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.bus.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()

    def __repr__(self) -> str:
        name = getattr(self.callback, "__name__", repr(self.callback))
        return f"Subscription(type={self.event_type.value}, callback={name}, active={self.active})"


class EventBus:
    """
    이벤트 버스

    인벤토리 하나당 하나씩 생성됩니다.
    발행자(InventoryService)는 이벤트를 발행하고, 구독자는 이벤트 타입별로 콜백을 등록합니다.

    Example:
        >>> event_bus = EventBus()
        >>>
        >>> def on_item_removed(event: InventoryEvent):
        ...     print(f"Removed: {event.item_id}")
        >>>
        >>> subscription = event_bus.subscribe(InventoryEventType.ITEM_REMOVED, on_item_removed)
        >>> event_bus.publish(InventoryEvent(InventoryEventType.ITEM_REMOVED, item_id=some_id))
        >>> subscription.cancel()
    """

    def __init__(self):
        self._subscribers: Dict[InventoryEventType, List[Subscription]] = {}

    def subscribe(self, event_type: InventoryEventType, callback: EventCallback) -> Subscription:
        """
        이벤트 구독

        같은 콜백을 같은 이벤트 타입에 다시 등록하면 기존 토큰을 반환합니다.

        Args:
            event_type: 구독할 이벤트 타입
            callback: 이벤트 발생 시 호출할 콜백 함수

        Returns:
            구독 토큰
        """
        subscriptions = self._subscribers.setdefault(event_type, [])

        for subscription in subscriptions:
            if subscription.callback == callback:
                return subscription

        subscription = Subscription(self, event_type, callback)
        subscriptions.append(subscription)
        logger.debug(f"Subscribed to {event_type.value}: {getattr(callback, '__name__', callback)}")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """
        구독 취소

        Args:
            subscription: subscribe()가 반환한 구독 토큰
        """
        subscriptions = self._subscribers.get(subscription.event_type, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
            logger.debug(
                f"Unsubscribed from {subscription.event_type.value}: "
                f"{getattr(subscription.callback, '__name__', subscription.callback)}"
            )
        subscription.active = False

    def publish(self, event: InventoryEvent) -> None:
        """
        이벤트 발행

        구독자들에게 이벤트를 구독 순서대로 전파합니다.
        콜백에서 에러가 발생해도 다른 구독자에게 영향을 주지 않습니다.

        Args:
            event: 발행할 이벤트
        """
        subscriptions = self._subscribers.get(event.type)
        if not subscriptions:
            logger.debug(f"No subscribers for event: {event.type.value}")
            return

        logger.debug(f"Publishing event: {event}")

        # 콜백 안에서 구독 해제가 일어날 수 있으므로 복사본으로 순회
        for subscription in list(subscriptions):
            if not subscription.active:
                continue
            try:
                subscription.callback(event)
            except Exception as e:
                logger.error(
                    f"Error in event callback {getattr(subscription.callback, '__name__', subscription.callback)} "
                    f"for {event.type.value}: {e}",
                    exc_info=True
                )

    def get_subscriber_count(self, event_type: InventoryEventType) -> int:
        """
        특정 이벤트 타입의 구독자 수 반환

        Args:
            event_type: 이벤트 타입

        Returns:
            구독자 수
        """
        return len(self._subscribers.get(event_type, []))

    def clear_all_subscribers(self) -> None:
        """모든 구독자 제거"""
        for subscriptions in self._subscribers.values():
            for subscription in subscriptions:
                subscription.active = False
        self._subscribers.clear()
        logger.info("All subscribers cleared")
