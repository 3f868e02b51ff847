"""
인벤토리 View 기본 클래스

인벤토리 이벤트 구독/해제, 자동 새로고침 등 모든 인벤토리 View가 공유하는 생명주기를 정의합니다.
생성(attach) → 이벤트 수신 → 해제(detach) 순서를 지켜야 하며, 해제하지 않은 구독을 남기면 안 됩니다.
"""
import logging
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from models.inventory_item import InventoryItem
from service.event.event_bus import InventoryEvent, InventoryEventType, Subscription
from service.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class InventoryObserver(ABC):
    """인벤토리 변경을 받는 소비자 인터페이스"""

    @abstractmethod
    def refresh(self) -> None:
        """인벤토리를 다시 조회하여 표시 상태 갱신"""

    def on_inventory_changed(self) -> None:
        pass

    def on_item_added(self, item: InventoryItem) -> None:
        pass

    def on_item_removed(self, item_id: uuid.UUID) -> None:
        pass

    def on_item_stack_changed(self, item_id: uuid.UUID, new_stack_size: int) -> None:
        pass


class InventoryViewBase(InventoryObserver):
    """
    인벤토리 View 기본 클래스

    with 문으로 사용하면 진입 시 attach(), 종료 시 detach()가 호출됩니다.

    Example:
        >>> with InventoryGridView(inventory) as view:
        ...     inventory.add_item(item)
        ...     embed = view.create_embed()
    """

    def __init__(
        self,
        inventory: Optional[InventoryService],
        auto_refresh: bool = True,
        bind_events_on_construct: bool = True
    ):
        self.inventory = inventory
        self.auto_refresh = auto_refresh
        self.bind_events_on_construct = bind_events_on_construct
        self._subscriptions: List[Subscription] = []

    @property
    def events_bound(self) -> bool:
        return bool(self._subscriptions)

    def attach(self) -> None:
        """이벤트 구독 후 최초 새로고침"""
        if self.bind_events_on_construct:
            self.bind_inventory_events()
        self.refresh()

    def detach(self) -> None:
        """구독 해제 (View 폐기 전 반드시 호출)"""
        self.unbind_inventory_events()

    def __enter__(self):
        self.attach()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.detach()

    def bind_inventory_events(self) -> None:
        """인벤토리 이벤트 4종 구독 (이미 구독 중이면 무시)"""
        if self.events_bound:
            return

        if self.inventory is None:
            logger.warning("Cannot bind events - inventory is not available")
            return

        bus = self.inventory.events
        self._subscriptions = [
            bus.subscribe(InventoryEventType.INVENTORY_CHANGED, self._handle_inventory_changed),
            bus.subscribe(InventoryEventType.ITEM_ADDED, self._handle_item_added),
            bus.subscribe(InventoryEventType.ITEM_REMOVED, self._handle_item_removed),
            bus.subscribe(InventoryEventType.ITEM_STACK_CHANGED, self._handle_item_stack_changed),
        ]
        logger.debug(f"{type(self).__name__}: events bound")

    def unbind_inventory_events(self) -> None:
        if not self.events_bound:
            return

        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions = []
        logger.debug(f"{type(self).__name__}: events unbound")

    def on_inventory_changed(self) -> None:
        if self.auto_refresh:
            self.refresh()

    # 이벤트 → 훅 연결
    def _handle_inventory_changed(self, event: InventoryEvent) -> None:
        self.on_inventory_changed()

    def _handle_item_added(self, event: InventoryEvent) -> None:
        self.on_item_added(event.item)

    def _handle_item_removed(self, event: InventoryEvent) -> None:
        self.on_item_removed(event.item_id)

    def _handle_item_stack_changed(self, event: InventoryEvent) -> None:
        self.on_item_stack_changed(event.item_id, event.new_stack_size)
