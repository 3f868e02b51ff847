"""
인벤토리 그리드 View

필터(카테고리, 이름 검색), 정렬, 페이지, 선택 상태를 관리하고 현재 페이지를 임베드로 만듭니다.
선택한 아이템은 ID만 기억하며, 사용할 때마다 인벤토리에서 다시 조회합니다.
"""
import uuid
from enum import Enum
from typing import Callable, List, Optional

import discord

from config.ui import EmbedColor, UI
from models.inventory_item import InventoryItem, ItemCategory
from resources.item_emoji import ItemEmoji
from service.inventory_service import InventoryService
from utils.rarity_display import format_item_name
from views.inventory.base import InventoryViewBase


CATEGORY_TITLES = {
    ItemCategory.WEAPON: "⚔️ 무기",
    ItemCategory.CONSUMABLE: "🧪 소모품",
    ItemCategory.MATERIAL: "🪵 재료",
    ItemCategory.EQUIPMENT: "🛡️ 장비",
    ItemCategory.QUEST: "📜 퀘스트",
}

SelectionListener = Callable[[Optional[InventoryItem]], None]


class SortType(Enum):
    """정렬 타입 (표시 전용, 인벤토리 순서는 바꾸지 않음)"""
    NONE = "기본"
    RARITY = "희귀도"
    NAME = "이름"
    QUANTITY = "수량"


class InventoryGridView(InventoryViewBase):
    """
    인벤토리 그리드 View

    인벤토리 이벤트를 받아 표시 목록을 갱신합니다.
    """

    def __init__(
        self,
        inventory: Optional[InventoryService],
        items_per_page: int = UI.ITEMS_PER_PAGE,
        auto_refresh: bool = True,
        bind_events_on_construct: bool = True
    ):
        super().__init__(inventory, auto_refresh, bind_events_on_construct)

        self.items_per_page = max(1, items_per_page)
        self.category_filter: Optional[ItemCategory] = None
        self.search_filter: str = ""
        self.current_sort = SortType.NONE
        self.page = 0
        self.displayed_items: List[InventoryItem] = []
        self.selected_item_id: Optional[uuid.UUID] = None
        self._selection_listeners: List[SelectionListener] = []

    # =========================================================================
    # 새로고침 / 이벤트 훅
    # =========================================================================

    def refresh(self) -> None:
        self.displayed_items = self.get_filtered_items()
        self.page = min(self.page, self.total_pages - 1)

    def on_item_removed(self, item_id: uuid.UUID) -> None:
        # 목록 갱신은 뒤따르는 INVENTORY_CHANGED에서 처리
        if self.selected_item_id == item_id:
            self.clear_selection()

    # =========================================================================
    # 필터 / 정렬
    # =========================================================================

    def get_filtered_items(self) -> List[InventoryItem]:
        """카테고리 필터 + 검색 + 정렬"""
        if self.inventory is None:
            return []

        items = self.inventory.get_all_items()

        if self.category_filter is not None:
            items = [item for item in items if item.category == self.category_filter]

        if self.search_filter:
            query = self.search_filter.lower()
            items = [item for item in items if query in item.name.lower()]

        return self._apply_sort(items)

    def _apply_sort(self, items: List[InventoryItem]) -> List[InventoryItem]:
        if self.current_sort == SortType.RARITY:
            items.sort(key=lambda item: item.rarity, reverse=True)
        elif self.current_sort == SortType.NAME:
            items.sort(key=lambda item: item.name)
        elif self.current_sort == SortType.QUANTITY:
            items.sort(key=lambda item: item.current_stack_size, reverse=True)
        return items

    def set_category_filter(self, category: Optional[ItemCategory]) -> None:
        self.category_filter = category
        self.page = 0
        self.refresh()

    def set_search_filter(self, search_text: str) -> None:
        self.search_filter = search_text or ""
        self.page = 0
        self.refresh()

    def set_sort(self, sort_type: SortType) -> None:
        self.current_sort = sort_type
        self.refresh()

    def clear_all_filters(self) -> None:
        self.category_filter = None
        self.search_filter = ""
        self.page = 0
        self.refresh()

    def has_active_filter(self) -> bool:
        return self.category_filter is not None or bool(self.search_filter)

    # =========================================================================
    # 페이지
    # =========================================================================

    @property
    def total_pages(self) -> int:
        return max(1, (len(self.displayed_items) + self.items_per_page - 1) // self.items_per_page)

    def get_page_items(self) -> List[InventoryItem]:
        """현재 페이지 아이템 목록"""
        start = self.page * self.items_per_page
        return self.displayed_items[start:start + self.items_per_page]

    def next_page(self) -> bool:
        if self.page + 1 >= self.total_pages:
            return False
        self.page += 1
        return True

    def prev_page(self) -> bool:
        if self.page == 0:
            return False
        self.page -= 1
        return True

    # =========================================================================
    # 선택
    # =========================================================================

    def add_selection_listener(self, listener: SelectionListener) -> None:
        if listener not in self._selection_listeners:
            self._selection_listeners.append(listener)

    def remove_selection_listener(self, listener: SelectionListener) -> None:
        if listener in self._selection_listeners:
            self._selection_listeners.remove(listener)

    def select_item(self, item: Optional[InventoryItem]) -> None:
        self.selected_item_id = item.item_id if item is not None else None
        self._notify_selection(item)

    def select_slot_by_index(self, index: int) -> bool:
        """현재 페이지의 index번째 슬롯 선택 (빈 슬롯이면 False)"""
        page_items = self.get_page_items()
        if 0 <= index < len(page_items):
            self.select_item(page_items[index])
            return True
        return False

    def clear_selection(self) -> None:
        self.selected_item_id = None
        self._notify_selection(None)

    def get_selected_item(self) -> Optional[InventoryItem]:
        """선택한 아이템을 인벤토리에서 다시 조회 (이미 제거됐으면 선택 해제 후 None)"""
        if self.selected_item_id is None or self.inventory is None:
            return None

        item = self.inventory.find_item_by_id(self.selected_item_id)
        if item is None:
            self.selected_item_id = None
        return item

    def _notify_selection(self, item: Optional[InventoryItem]) -> None:
        for listener in list(self._selection_listeners):
            listener(item)

    # =========================================================================
    # 임베드
    # =========================================================================

    def create_embed(self) -> discord.Embed:
        """인벤토리 임베드 생성"""
        tab_title = CATEGORY_TITLES.get(self.category_filter, "전체")
        description = "보유 아이템 목록입니다."
        if self.search_filter:
            description = f"🔍 '{self.search_filter}' 검색 결과입니다."

        embed = discord.Embed(
            title=f"🎒 인벤토리 - {tab_title}",
            description=description,
            color=self._get_fill_color()
        )

        item_count = self.inventory.get_item_count() if self.inventory is not None else 0
        max_slots = self.inventory.get_max_inventory_slots() if self.inventory is not None else 0
        total_quantity = self.inventory.get_total_item_quantity() if self.inventory is not None else 0

        embed.add_field(name="📦 슬롯", value=f"{item_count}/{max_slots}", inline=True)
        embed.add_field(name="🔢 총 수량", value=f"{total_quantity}개", inline=True)
        embed.add_field(name="📄 페이지", value=f"{self.page + 1}/{self.total_pages}", inline=True)

        page_items = self.get_page_items()
        if not page_items:
            self._add_empty_message(embed)
        else:
            self._add_item_list(embed, page_items)

        embed.set_footer(text=f"정렬: {self.current_sort.value}")
        return embed

    def _get_fill_color(self) -> EmbedColor:
        if self.inventory is None:
            return EmbedColor.DEFAULT

        fill = self.inventory.get_inventory_fill_percentage()
        if fill >= UI.FILL_DANGER_RATIO:
            return EmbedColor.ERROR
        if fill >= UI.FILL_WARNING_RATIO:
            return EmbedColor.WARNING
        return EmbedColor.DEFAULT

    def _add_empty_message(self, embed: discord.Embed) -> None:
        """빈 목록 메시지"""
        message = "조건에 맞는 아이템이 없습니다." if self.has_active_filter() else "인벤토리가 비어있습니다."
        embed.add_field(name="아이템 없음", value=message, inline=False)

    def _add_item_list(self, embed: discord.Embed, page_items: List[InventoryItem]) -> None:
        start = self.page * self.items_per_page
        lines = [self._format_item(item) for item in page_items]

        value = "\n".join(lines)
        if len(value) > UI.MAX_EMBED_FIELD_VALUE:
            value = value[:UI.MAX_EMBED_FIELD_VALUE - 3] + "..."

        embed.add_field(
            name=f"목록 ({start + 1}-{start + len(page_items)})",
            value=value,
            inline=False
        )

    def _format_item(self, item: InventoryItem) -> str:
        emoji = ItemEmoji.for_category(item.category)
        name = format_item_name(item.name, item.rarity)
        qty = f" x{item.current_stack_size}" if item.stackable else ""
        marker = "▶ " if item.item_id == self.selected_item_id else ""
        return f"{marker}{emoji} **{name}**{qty}"
