"""
인벤토리 UI 패키지

인벤토리 이벤트를 구독하여 목록/필터/선택 상태를 유지하고 Discord 임베드로 표시하는 View 컴포넌트입니다.
"""
from views.inventory.base import InventoryObserver, InventoryViewBase
from views.inventory.grid_view import InventoryGridView, SortType

__all__ = ["InventoryObserver", "InventoryViewBase", "InventoryGridView", "SortType"]
