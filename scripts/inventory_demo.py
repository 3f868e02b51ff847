"""
인벤토리 엔진 데모 스크립트

세션을 열어 테스트 아이템을 채우고, 스택 합치기/제거 결과를 로그로 확인합니다.
.env 의 INVENTORY_MAX_SLOTS, INVENTORY_AUTO_STACK 설정이 반영됩니다.
"""
import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config import load_inventory_config
from service.debug_service import add_test_items_to_inventory, debug_print_inventory
from service.event import InventoryEvent, InventoryEventType
from service.item_factory import create_stackable_material
from service.session import SessionRegistry

# 로그 기본 설정
logging.basicConfig(
    level=logging.INFO,  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def on_stack_changed(event: InventoryEvent):
    logging.info(f"  -> stack changed: {event.item_id} = {event.new_stack_size}")


def main():
    config = load_inventory_config()
    registry = SessionRegistry()
    session = registry.create_session("demo-player", config)
    inventory = session.inventory

    with inventory.events.subscribe(InventoryEventType.ITEM_STACK_CHANGED, on_stack_changed):
        add_test_items_to_inventory(inventory)

        # 나무 2/10 에 20개 추가 → 기존 스택 10/10, 새 슬롯 12
        inventory.add_item(create_stackable_material("Oak Plank", stack_size=2, max_stack_size=10))
        result = inventory.add_item(create_stackable_material("Oak Plank", stack_size=20))
        logging.info(f"Oak Plank add: success={result.success}, stacked={result.stacked_quantity}")

    debug_print_inventory(inventory)
    logging.info(f"Fill: {inventory.get_inventory_fill_percentage():.0%}")

    registry.end_session("demo-player")


if __name__ == "__main__":
    main()
