"""
아이템 생성 함수

InventoryItem 생성 시 스택 규칙(비스택 아이템은 최대 1, 초기 수량 보정)을 적용합니다.
자주 쓰는 아이템 유형(재료, 무기, 소비 아이템)은 편의 함수를 제공합니다.
"""
import logging

from config.inventory import INVENTORY
from models.inventory_item import InventoryItem, ItemCategory, ItemRarity

logger = logging.getLogger(__name__)


def create_inventory_item(
    name: str,
    description: str,
    category: ItemCategory,
    rarity: ItemRarity,
    stackable: bool = False,
    max_stack_size: int = 1,
    initial_stack_size: int = 1
) -> InventoryItem:
    """
    새 아이템 인스턴스 생성

    Args:
        name: 아이템 이름
        description: 설명
        category: 카테고리
        rarity: 희귀도
        stackable: 스택 가능 여부
        max_stack_size: 최대 스택 (스택 불가 아이템은 무시되고 1)
        initial_stack_size: 초기 스택 (1 ~ 최대 스택으로 보정)

    Returns:
        새 ID가 부여된 InventoryItem
    """
    max_stack = max(1, max_stack_size) if stackable else 1
    item = InventoryItem(
        name=name,
        description=description,
        category=category,
        rarity=rarity,
        stackable=stackable,
        max_stack_size=max_stack,
        current_stack_size=min(max(initial_stack_size, 1), max_stack),
    )
    logger.debug(f"Created item: {name} (Stack: {item.current_stack_size}/{item.max_stack_size})")
    return item


def create_stackable_material(
    name: str,
    stack_size: int = INVENTORY.DEFAULT_MATERIAL_STACK,
    max_stack_size: int = INVENTORY.MATERIAL_MAX_STACK
) -> InventoryItem:
    """재료 아이템 생성 (Material, Common, 스택 가능)"""
    return create_inventory_item(
        name,
        f"A crafting material: {name}",
        ItemCategory.MATERIAL,
        ItemRarity.COMMON,
        stackable=True,
        max_stack_size=max_stack_size,
        initial_stack_size=stack_size,
    )


def create_weapon_item(
    name: str,
    min_damage: float,
    max_damage: float,
    attack_speed: float = 1.0,
    rarity: ItemRarity = ItemRarity.COMMON
) -> InventoryItem:
    """무기 아이템 생성 (Weapon, 스택 불가)"""
    weapon = create_inventory_item(
        name,
        f"Damage: {min_damage:.0f}-{max_damage:.0f}",
        ItemCategory.WEAPON,
        rarity,
        stackable=False,
    )
    weapon.min_damage = min_damage
    weapon.max_damage = max_damage
    weapon.attack_speed = attack_speed
    return weapon


def create_consumable_item(
    name: str,
    stack_size: int = 1,
    max_stack_size: int = INVENTORY.CONSUMABLE_MAX_STACK,
    rarity: ItemRarity = ItemRarity.COMMON
) -> InventoryItem:
    """소비 아이템 생성 (Consumable, 스택 가능)"""
    return create_inventory_item(
        name,
        f"Consumable item: {name}",
        ItemCategory.CONSUMABLE,
        rarity,
        stackable=True,
        max_stack_size=max_stack_size,
        initial_stack_size=stack_size,
    )
