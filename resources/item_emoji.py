from models.inventory_item import ItemCategory


class ItemEmoji:
    CATEGORY = {
        ItemCategory.WEAPON.value: "⚔️",
        ItemCategory.CONSUMABLE.value: "🧪",
        ItemCategory.MATERIAL.value: "🪵",
        ItemCategory.EQUIPMENT.value: "🛡️",
        ItemCategory.QUEST.value: "📜",
    }

    DEFAULT = "📦"

    @classmethod
    def for_category(cls, category: ItemCategory) -> str:
        return cls.CATEGORY.get(category.value, cls.DEFAULT)
