"""
디버그 유틸리티 유닛 테스트
"""
import logging
import random

from models.inventory_item import ItemCategory
from service.debug_service import (
    CONSUMABLE_NAMES,
    MATERIAL_NAMES,
    WEAPON_NAMES,
    add_test_items_to_inventory,
    debug_print_inventory,
)
from service.inventory_service import InventoryService
from service.item_factory import create_stackable_material


class TestAddTestItems:
    """add_test_items_to_inventory 테스트"""

    def test_adds_every_requested_item(self, inventory):
        added = add_test_items_to_inventory(inventory, rng=random.Random(42))

        assert added == 5 + 3 + 5
        assert len(inventory.get_items_by_category(ItemCategory.WEAPON)) == 3

    def test_names_come_from_pools(self, inventory):
        add_test_items_to_inventory(inventory, rng=random.Random(7))

        for item in inventory.get_all_items():
            if item.category == ItemCategory.MATERIAL:
                assert item.name in MATERIAL_NAMES
            elif item.category == ItemCategory.WEAPON:
                assert item.name in WEAPON_NAMES
            else:
                assert item.name in CONSUMABLE_NAMES

    def test_seeded_rng_is_reproducible(self):
        first = InventoryService()
        second = InventoryService()

        add_test_items_to_inventory(first, rng=random.Random(3))
        add_test_items_to_inventory(second, rng=random.Random(3))

        def summary(inventory):
            return [(item.name, item.current_stack_size) for item in inventory.get_all_items()]

        assert summary(first) == summary(second)

    def test_counts_only_successful_adds(self):
        inventory = InventoryService(max_slots=2)

        added = add_test_items_to_inventory(
            inventory, num_materials=0, num_weapons=4, num_consumables=0, rng=random.Random(1)
        )

        assert added == 2
        assert inventory.get_item_count() == 2


class TestDebugPrint:
    """debug_print_inventory 테스트"""

    def test_logs_summary_and_items(self, inventory, caplog):
        inventory.add_item(create_stackable_material("Wood", stack_size=12))

        with caplog.at_level(logging.INFO, logger="service.debug_service"):
            debug_print_inventory(inventory)

        assert "Total Slots Used: 1 / 100" in caplog.text
        assert "Total Item Quantity: 12" in caplog.text
        assert "[0] Wood - Stack: 12/99 - Category: material - Rarity: COMMON" in caplog.text

    def test_empty_inventory(self, inventory, caplog):
        with caplog.at_level(logging.INFO, logger="service.debug_service"):
            debug_print_inventory(inventory)

        assert "Total Slots Used: 0 / 100" in caplog.text
