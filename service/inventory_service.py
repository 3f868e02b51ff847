"""
InventoryService

인벤토리 관리 (아이템 추가/삭제/조회, 스택 합치기)를 담당합니다.

모든 조작은 예외를 던지지 않고 InventoryResult를 반환합니다.
변경이 확정된 뒤에만 이벤트를 발행하며, 순서는 항상 아이템 단위 이벤트 → INVENTORY_CHANGED 입니다.
"""
import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Type

from config.inventory import INVENTORY, InventoryConfig
from exceptions import (
    InventoryEngineError,
    InvalidArgumentError,
    InvalidItemError,
    InventoryFullError,
    ItemNotFoundError,
)
from models.inventory_item import InventoryItem, ItemCategory, ItemRarity
from service.event.event_bus import EventBus, InventoryEvent, InventoryEventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryResult:
    """
    인벤토리 조작 결과

    bool(result)로 성공 여부를 확인합니다. 실패 시 error에 원인 예외가 담깁니다.
    """

    success: bool
    error: Optional[InventoryEngineError] = None
    stacked_quantity: int = 0
    """기존 스택에 합쳐진 수량 (add_item 전용)"""

    added_new_slot: bool = False
    """새 슬롯에 아이템이 들어갔는지 (add_item 전용)"""

    @classmethod
    def ok(cls, stacked_quantity: int = 0, added_new_slot: bool = False) -> "InventoryResult":
        return cls(True, None, stacked_quantity, added_new_slot)

    @classmethod
    def fail(cls, error: InventoryEngineError) -> "InventoryResult":
        return cls(False, error)

    @property
    def error_type(self) -> Optional[Type[InventoryEngineError]]:
        return type(self.error) if self.error is not None else None

    def __bool__(self) -> bool:
        return self.success


class StackOutcome(Enum):
    """스택 합치기 결과"""
    FULLY_ABSORBED = "fully_absorbed"           # 전부 기존 스택에 합쳐짐
    PARTIALLY_ABSORBED = "partially_absorbed"   # 일부만 합쳐짐, 나머지는 새 슬롯 필요
    NOTHING_ABSORBED = "nothing_absorbed"       # 합칠 스택 없음


@dataclass
class StackPlan:
    """스택 합치기 계획 (commit 전까지 인벤토리를 변경하지 않음)"""

    original_size: int
    remaining: int
    transfers: List[Tuple[InventoryItem, int]] = field(default_factory=list)

    @property
    def absorbed(self) -> int:
        return self.original_size - self.remaining

    @property
    def outcome(self) -> StackOutcome:
        if self.remaining == 0:
            return StackOutcome.FULLY_ABSORBED
        if self.remaining < self.original_size:
            return StackOutcome.PARTIALLY_ABSORBED
        return StackOutcome.NOTHING_ABSORBED


class InventoryService:
    """
    인벤토리 비즈니스 로직

    아이템 인스턴스를 삽입 순서대로 보관하며, 슬롯 수(max_slots)를 넘지 않도록 관리합니다.
    단일 스레드에서만 사용하며, 이벤트 핸들러 안에서 같은 인벤토리를 변경하면 안 됩니다.
    """

    def __init__(
        self,
        max_slots: int = INVENTORY.MAX_SLOTS,
        auto_stack: bool = INVENTORY.AUTO_STACK,
        event_bus: Optional[EventBus] = None
    ):
        self._items: List[InventoryItem] = []
        self._max_slots = max(1, max_slots)
        self._auto_stack = auto_stack
        self.events = event_bus or EventBus()

    @classmethod
    def from_config(cls, config: InventoryConfig, event_bus: Optional[EventBus] = None) -> "InventoryService":
        return cls(max_slots=config.MAX_SLOTS, auto_stack=config.AUTO_STACK, event_bus=event_bus)

    # =========================================================================
    # 설정
    # =========================================================================

    @property
    def auto_stack(self) -> bool:
        return self._auto_stack

    @auto_stack.setter
    def auto_stack(self, value: bool) -> None:
        self._auto_stack = value

    def set_max_inventory_slots(self, new_max: int) -> None:
        """
        최대 슬롯 수 설정 (최소 1)

        현재 아이템 수보다 작게 설정해도 기존 아이템은 제거하지 않습니다.
        """
        self._max_slots = max(1, new_max)
        logger.info(f"Max inventory slots set to {self._max_slots}")

    def get_max_inventory_slots(self) -> int:
        return self._max_slots

    # =========================================================================
    # 추가
    # =========================================================================

    def add_item(self, item: InventoryItem) -> InventoryResult:
        """
        아이템 추가

        스택 가능한 아이템은 같은 아이템의 기존 스택에 먼저 합칩니다.
        전부 합쳐지면 새 슬롯을 쓰지 않으며 item은 인벤토리에 들어가지 않습니다.
        일부만 합쳐지면 item의 스택 크기를 남은 수량으로 줄여 새 슬롯에 추가합니다.

        남은 수량을 둘 빈 슬롯이 없으면 아무것도 변경하지 않고 실패합니다.

        Args:
            item: 추가할 아이템

        Returns:
            InventoryResult (실패 시 InvalidItemError / InventoryFullError)
        """
        try:
            self._validate_item(item)
        except InvalidItemError as e:
            logger.warning(f"Attempted to add invalid item: {e.reason}")
            return InventoryResult.fail(e)

        if not self.has_room_for_item() and not item.stackable:
            logger.warning(f"Inventory is full ({len(self._items)}/{self._max_slots})")
            return InventoryResult.fail(InventoryFullError(self._max_slots))

        plan: Optional[StackPlan] = None
        if self._auto_stack and item.stackable:
            plan = self._plan_stack(item)

            if plan.outcome == StackOutcome.FULLY_ABSORBED:
                self._commit_stack(plan)
                logger.info(f"Stacked item {item.name} x{plan.absorbed} into {len(plan.transfers)} stack(s)")

                for entry, _ in plan.transfers:
                    self._broadcast_stack_changed(entry)
                self._broadcast(InventoryEvent(InventoryEventType.INVENTORY_CHANGED))
                return InventoryResult.ok(stacked_quantity=plan.absorbed)

        if not self.has_room_for_item():
            logger.warning(f"No room for new item {item.name} ({len(self._items)}/{self._max_slots})")
            return InventoryResult.fail(InventoryFullError(self._max_slots))

        stacked_quantity = 0
        if plan is not None and plan.outcome == StackOutcome.PARTIALLY_ABSORBED:
            self._commit_stack(plan)
            item.set_stack_size(plan.remaining)
            stacked_quantity = plan.absorbed
            logger.debug(f"Stacked {plan.absorbed} of {item.name}, {plan.remaining} remaining")

        self._items.append(item)
        logger.info(f"Added new item {item.name} x{item.current_stack_size} (Total items: {len(self._items)})")

        if plan is not None:
            for entry, _ in plan.transfers:
                self._broadcast_stack_changed(entry)
        self._broadcast(InventoryEvent(InventoryEventType.ITEM_ADDED, item_id=item.item_id, item=item))
        self._broadcast(InventoryEvent(InventoryEventType.INVENTORY_CHANGED))

        return InventoryResult.ok(stacked_quantity=stacked_quantity, added_new_slot=True)

    def _plan_stack(self, new_item: InventoryItem) -> StackPlan:
        """
        기존 스택에 합칠 수량 계산

        삽입 순서대로 같은 이름/카테고리의 가득 차지 않은 스택을 찾아
        먼저 들어온 스택부터 채웁니다. 인벤토리는 변경하지 않습니다.
        """
        plan = StackPlan(
            original_size=new_item.current_stack_size,
            remaining=new_item.current_stack_size,
        )

        for existing in self._items:
            if plan.remaining <= 0:
                break
            if not existing.can_stack_with(new_item) or existing.is_stack_full():
                continue

            amount = min(existing.get_space_remaining(), plan.remaining)
            if amount > 0:
                plan.transfers.append((existing, amount))
                plan.remaining -= amount

        return plan

    @staticmethod
    def _commit_stack(plan: StackPlan) -> None:
        for existing, amount in plan.transfers:
            existing.add_to_stack(amount)

    def _validate_item(self, item: InventoryItem) -> None:
        """아이템 유효성 검사 (실패 시 InvalidItemError)"""
        if not isinstance(item, InventoryItem):
            raise InvalidItemError("not an inventory item")

        if not item.has_valid_id():
            raise InvalidItemError("invalid item id")

        if self.find_item_by_id(item.item_id) is not None:
            raise InvalidItemError(f"duplicate item id {item.item_id}")

        if not item.name:
            raise InvalidItemError("empty name")

        if item.current_stack_size <= 0 or item.current_stack_size > item.max_stack_size:
            raise InvalidItemError(
                f"invalid stack size {item.current_stack_size}/{item.max_stack_size}"
            )

        if not item.stackable and item.max_stack_size != 1:
            raise InvalidItemError(f"non-stackable item with max stack {item.max_stack_size}")

    # =========================================================================
    # 제거
    # =========================================================================

    def remove_item(self, item_id: uuid.UUID) -> InventoryResult:
        """
        아이템 제거 (슬롯 전체)

        Args:
            item_id: 제거할 아이템 ID

        Returns:
            InventoryResult (실패 시 ItemNotFoundError)
        """
        for index, existing in enumerate(self._items):
            if existing.item_id == item_id:
                break
        else:
            logger.warning(f"Item not found for removal: {item_id}")
            return InventoryResult.fail(ItemNotFoundError(item_id))

        del self._items[index]
        logger.info(f"Removed item {existing.name} (Remaining: {len(self._items)})")

        self._broadcast(InventoryEvent(InventoryEventType.ITEM_REMOVED, item_id=item_id, item=existing))
        self._broadcast(InventoryEvent(InventoryEventType.INVENTORY_CHANGED))
        return InventoryResult.ok()

    def remove_item_quantity(self, item_id: uuid.UUID, quantity: int) -> InventoryResult:
        """
        스택에서 일정 수량 제거

        스택 크기 이상을 제거하면 슬롯 전체를 제거합니다.

        Args:
            item_id: 아이템 ID
            quantity: 제거할 수량

        Returns:
            InventoryResult (실패 시 InvalidArgumentError / ItemNotFoundError)
        """
        if quantity <= 0:
            logger.warning(f"Invalid quantity for removal: {quantity}")
            return InventoryResult.fail(InvalidArgumentError("quantity", quantity))

        existing = self.find_item_by_id(item_id)
        if existing is None:
            logger.warning(f"Item not found for quantity removal: {item_id}")
            return InventoryResult.fail(ItemNotFoundError(item_id))

        if quantity >= existing.current_stack_size:
            return self.remove_item(item_id)

        existing.remove_from_stack(quantity)
        logger.info(f"Removed {quantity} from stack of {existing.name}")

        self._broadcast_stack_changed(existing)
        self._broadcast(InventoryEvent(InventoryEventType.INVENTORY_CHANGED))
        return InventoryResult.ok()

    def clear_inventory(self) -> None:
        """인벤토리 비우기 (개별 제거 이벤트 없이 INVENTORY_CHANGED 한 번)"""
        previous_count = len(self._items)
        self._items.clear()
        logger.info(f"Cleared {previous_count} items from inventory")

        self._broadcast(InventoryEvent(InventoryEventType.INVENTORY_CHANGED))

    # =========================================================================
    # 조회 (읽기 전용)
    # =========================================================================

    def find_item_by_id(self, item_id: uuid.UUID) -> Optional[InventoryItem]:
        for existing in self._items:
            if existing.item_id == item_id:
                return existing
        return None

    def get_all_items(self) -> List[InventoryItem]:
        return list(self._items)

    def get_items_by_category(self, category: ItemCategory) -> List[InventoryItem]:
        return [item for item in self._items if item.category == category]

    def get_items_by_rarity(self, rarity: ItemRarity) -> List[InventoryItem]:
        return [item for item in self._items if item.rarity == rarity]

    def search_items_by_name(self, search_text: str) -> List[InventoryItem]:
        """
        이름 부분 검색 (대소문자 무시)

        검색어가 비어 있으면 전체 아이템을 반환합니다.
        """
        if not search_text:
            return list(self._items)

        query = search_text.lower()
        return [item for item in self._items if query in item.name.lower()]

    def get_item_count(self) -> int:
        """슬롯 수 (스택은 1개로 계산)"""
        return len(self._items)

    def get_total_item_quantity(self) -> int:
        """스택 수량을 모두 합친 아이템 개수"""
        return sum(item.current_stack_size for item in self._items)

    def has_room_for_item(self) -> bool:
        return len(self._items) < self._max_slots

    def get_inventory_fill_percentage(self) -> float:
        """슬롯 사용 비율 (0.0 ~ 1.0)"""
        if self._max_slots <= 0:
            return 0.0
        return len(self._items) / self._max_slots

    # =========================================================================
    # 이벤트
    # =========================================================================

    def _broadcast_stack_changed(self, item: InventoryItem) -> None:
        self._broadcast(InventoryEvent(
            InventoryEventType.ITEM_STACK_CHANGED,
            item_id=item.item_id,
            item=item,
            new_stack_size=item.current_stack_size,
        ))

    def _broadcast(self, event: InventoryEvent) -> None:
        self.events.publish(event)
