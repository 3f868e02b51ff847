"""
테스트용 InventoryItem 픽스처 데이터
"""
from typing import Any

# 무기 아이템 (스택 불가)
WEAPON_ITEMS: list[dict[str, Any]] = [
    {
        "name": "Iron Sword",
        "category": "weapon",
        "rarity": 0,
        "stackable": False,
        "min_damage": 10.0,
        "max_damage": 18.0,
    },
    {
        "name": "Magic Staff",
        "category": "weapon",
        "rarity": 3,
        "stackable": False,
        "min_damage": 6.0,
        "max_damage": 30.0,
    },
]

# 재료 아이템
MATERIAL_ITEMS: list[dict[str, Any]] = [
    {
        "name": "Wood",
        "category": "material",
        "rarity": 0,
        "stackable": True,
        "max_stack_size": 10,
        "current_stack_size": 2,
    },
    {
        "name": "Iron Ore",
        "category": "material",
        "rarity": 1,
        "stackable": True,
        "max_stack_size": 99,
        "current_stack_size": 40,
    },
]

# 소비 아이템
CONSUMABLE_ITEMS: list[dict[str, Any]] = [
    {
        "name": "Health Potion",
        "category": "consumable",
        "rarity": 0,
        "stackable": True,
        "max_stack_size": 20,
        "current_stack_size": 5,
    },
]

# 퀘스트 아이템
QUEST_ITEMS: list[dict[str, Any]] = [
    {
        "name": "Old Map",
        "category": "quest",
        "rarity": 2,
        "stackable": False,
    },
]

ALL_TEST_ITEMS = WEAPON_ITEMS + MATERIAL_ITEMS + CONSUMABLE_ITEMS + QUEST_ITEMS
