"""
InventoryItem 모델 정의

인벤토리에 담기는 아이템 인스턴스(스택 하나)를 표현합니다.

- item_id는 생성 시 부여되며 변경할 수 없습니다.
- 스택 크기는 add_to_stack / remove_from_stack / set_stack_size 로만 바꿉니다.
- 같은 이름, 같은 카테고리의 아이템이라도 인스턴스가 다르면 서로 다른 아이템입니다 (identity 비교).
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum

NIL_ITEM_ID = uuid.UUID(int=0)
"""할당되지 않은 아이템 ID"""


class ItemCategory(Enum):
    """아이템 카테고리 (필터링용)"""
    WEAPON = "weapon"
    CONSUMABLE = "consumable"
    MATERIAL = "material"
    EQUIPMENT = "equipment"
    QUEST = "quest"


class ItemRarity(IntEnum):
    """아이템 희귀도 (표시용, 로직에는 사용하지 않음)"""
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4


@dataclass(eq=False)
class InventoryItem:
    """
    인벤토리 아이템 인스턴스

    불변식: 1 <= current_stack_size <= max_stack_size,
    stackable이 아니면 max_stack_size == 1
    """

    # 아이템 기본 정보
    name: str = "New Item"
    description: str = "Item description"
    category: ItemCategory = ItemCategory.MATERIAL
    rarity: ItemRarity = ItemRarity.COMMON

    # 스택 정보
    stackable: bool = False
    max_stack_size: int = 1
    current_stack_size: int = 1

    # 무기/장비 스탯 (스택 로직과 무관)
    min_damage: float = 0.0
    max_damage: float = 0.0
    attack_speed: float = 1.0
    current_durability: float = 100.0
    max_durability: float = 100.0
    weight: float = 1.0

    item_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not self.stackable:
            self.max_stack_size = 1
        else:
            self.max_stack_size = max(1, self.max_stack_size)
        self.current_stack_size = min(max(self.current_stack_size, 1), self.max_stack_size)

    def __setattr__(self, key, value):
        if key == "item_id" and "item_id" in self.__dict__:
            raise AttributeError("item_id는 변경할 수 없습니다")
        super().__setattr__(key, value)

    def has_valid_id(self) -> bool:
        return isinstance(self.item_id, uuid.UUID) and self.item_id != NIL_ITEM_ID

    # =========================================================================
    # 스택 관리
    # =========================================================================

    def add_to_stack(self, amount: int) -> bool:
        """
        스택에 수량 추가

        최대 스택을 넘는 경우 최대치까지만 채우고 False를 반환합니다.

        Args:
            amount: 추가할 수량

        Returns:
            요청한 수량을 모두 추가했으면 True
        """
        if not self.stackable or amount <= 0:
            return False

        new_size = self.current_stack_size + amount
        if new_size > self.max_stack_size:
            self.current_stack_size = self.max_stack_size
            return False

        self.current_stack_size = new_size
        return True

    def remove_from_stack(self, amount: int) -> bool:
        """
        스택에서 수량 제거

        전부 제거하면 스택 크기가 0이 되며, 이 경우 인벤토리에서 아이템을 제거해야 합니다.

        Args:
            amount: 제거할 수량

        Returns:
            성공 여부 (수량이 잘못되었거나 부족하면 변경 없이 False)
        """
        if amount <= 0 or amount > self.current_stack_size:
            return False

        self.current_stack_size -= amount
        return True

    def is_stack_full(self) -> bool:
        return self.current_stack_size >= self.max_stack_size

    def set_stack_size(self, new_size: int) -> None:
        """스택 크기 직접 설정 (1 ~ max_stack_size 로 보정)"""
        self.current_stack_size = min(max(new_size, 1), self.max_stack_size)

    def get_space_remaining(self) -> int:
        return self.max_stack_size - self.current_stack_size

    def can_stack_with(self, other: "InventoryItem") -> bool:
        """같은 이름, 같은 카테고리이고 둘 다 스택 가능한지"""
        return (
            self.stackable
            and other.stackable
            and self.name == other.name
            and self.category == other.category
        )

    def __str__(self):
        return self.name or str(self.item_id)
