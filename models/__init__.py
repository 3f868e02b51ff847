from models.inventory_item import (
    InventoryItem,
    ItemCategory,
    ItemRarity,
    NIL_ITEM_ID,
)

__all__ = ["InventoryItem", "ItemCategory", "ItemRarity", "NIL_ITEM_ID"]
