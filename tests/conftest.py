"""
pytest 설정 및 공통 픽스처 정의
"""
import sys
from pathlib import Path
from typing import List

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 아이템 팩토리 픽스처
# =============================================================================


@pytest.fixture
def item_factory():
    """테스트용 InventoryItem 생성 팩토리"""
    from models.inventory_item import InventoryItem, ItemCategory, ItemRarity

    def _create_item(
        name: str = "Wood",
        category: ItemCategory = ItemCategory.MATERIAL,
        rarity: ItemRarity = ItemRarity.COMMON,
        stackable: bool = True,
        max_stack_size: int = 10,
        current_stack_size: int = 1,
    ) -> InventoryItem:
        return InventoryItem(
            name=name,
            description=f"테스트 아이템: {name}",
            category=category,
            rarity=rarity,
            stackable=stackable,
            max_stack_size=max_stack_size,
            current_stack_size=current_stack_size,
        )

    return _create_item


@pytest.fixture
def weapon_factory(item_factory):
    """테스트용 무기(스택 불가) 생성 팩토리"""
    from models.inventory_item import ItemCategory, ItemRarity

    def _create_weapon(name: str = "Iron Sword", rarity: ItemRarity = ItemRarity.COMMON):
        return item_factory(
            name=name,
            category=ItemCategory.WEAPON,
            rarity=rarity,
            stackable=False,
            max_stack_size=1,
        )

    return _create_weapon


# =============================================================================
# 인벤토리 픽스처
# =============================================================================


@pytest.fixture
def inventory():
    """기본 설정(100칸, 자동 스택)의 빈 인벤토리"""
    from service.inventory_service import InventoryService

    return InventoryService()


class EventRecorder:
    """인벤토리 이벤트를 발생 순서대로 기록"""

    def __init__(self):
        self.events: List = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def types(self) -> List:
        return [event.type for event in self.events]

    def clear(self):
        self.events.clear()


@pytest.fixture
def event_recorder(inventory):
    """inventory의 4가지 이벤트를 모두 기록하는 레코더"""
    from service.event.event_bus import InventoryEventType

    recorder = EventRecorder()
    subscriptions = [
        inventory.events.subscribe(event_type, recorder)
        for event_type in InventoryEventType
    ]

    yield recorder

    for subscription in subscriptions:
        subscription.cancel()


@pytest.fixture
def sample_items():
    """fixtures/items.py 데이터로 만든 InventoryItem 목록"""
    from models.inventory_item import InventoryItem, ItemCategory, ItemRarity
    from tests.fixtures.items import ALL_TEST_ITEMS

    items = []
    for data in ALL_TEST_ITEMS:
        fields = dict(data)
        fields["category"] = ItemCategory(fields["category"])
        fields["rarity"] = ItemRarity(fields["rarity"])
        items.append(InventoryItem(**fields))
    return items
