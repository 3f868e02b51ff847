"""
인벤토리 디버그 유틸리티

인벤토리 내용을 로그로 출력하거나, 테스트용 아이템을 무작위로 채워 넣습니다.
"""
import logging
import random
from typing import Optional

from models.inventory_item import ItemRarity
from service.inventory_service import InventoryService
from service.item_factory import (
    create_consumable_item,
    create_stackable_material,
    create_weapon_item,
)

logger = logging.getLogger(__name__)

MATERIAL_NAMES = [
    "Iron Ore", "Wood", "Stone", "Gold Nugget",
    "Crystal Shard", "Leather", "Cloth", "Bone Fragment",
]

WEAPON_NAMES = [
    "Iron Sword", "Steel Axe", "Magic Staff",
    "Longbow", "Dagger", "War Hammer",
]

CONSUMABLE_NAMES = [
    "Health Potion", "Mana Potion", "Stamina Elixir",
    "Antidote", "Bread", "Cooked Meat",
]


def debug_print_inventory(inventory: InventoryService) -> None:
    """인벤토리 전체 내용을 INFO 로그로 출력"""
    items = inventory.get_all_items()

    logger.info("========== INVENTORY DEBUG ==========")
    logger.info(f"Total Slots Used: {inventory.get_item_count()} / {inventory.get_max_inventory_slots()}")
    logger.info(f"Total Item Quantity: {inventory.get_total_item_quantity()}")
    logger.info("-" * 38)

    for index, item in enumerate(items):
        logger.info(
            f"[{index}] {item.name} - Stack: {item.current_stack_size}/{item.max_stack_size} "
            f"- Category: {item.category.value} - Rarity: {item.rarity.name}"
        )

    logger.info("=" * 38)


def add_test_items_to_inventory(
    inventory: InventoryService,
    num_materials: int = 5,
    num_weapons: int = 3,
    num_consumables: int = 5,
    rng: Optional[random.Random] = None
) -> int:
    """
    테스트용 아이템 추가

    Args:
        inventory: 대상 인벤토리
        num_materials: 추가할 재료 수
        num_weapons: 추가할 무기 수
        num_consumables: 추가할 소비 아이템 수
        rng: 난수 생성기 (테스트에서 시드 고정용)

    Returns:
        add_item이 성공한 횟수
    """
    rng = rng or random.Random()
    added = 0

    for _ in range(num_materials):
        material = create_stackable_material(
            rng.choice(MATERIAL_NAMES),
            stack_size=rng.randint(1, 50),
            max_stack_size=99,
        )
        if inventory.add_item(material):
            added += 1

    for _ in range(num_weapons):
        min_damage = rng.uniform(5.0, 20.0)
        weapon = create_weapon_item(
            rng.choice(WEAPON_NAMES),
            min_damage,
            min_damage + rng.uniform(5.0, 30.0),
            attack_speed=rng.uniform(0.8, 1.5),
            rarity=rng.choice(list(ItemRarity)),
        )
        if inventory.add_item(weapon):
            added += 1

    for _ in range(num_consumables):
        consumable = create_consumable_item(
            rng.choice(CONSUMABLE_NAMES),
            stack_size=rng.randint(1, 10),
            max_stack_size=20,
        )
        if inventory.add_item(consumable):
            added += 1

    logger.info(f"Added {added} test items to inventory")
    return added
