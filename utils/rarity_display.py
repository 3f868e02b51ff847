"""
희귀도 표시 유틸리티

아이템 이름에 희귀도 표시(이모지, 이름, 임베드 색상)를 추가합니다.
"""
from typing import Optional

from config.ui import EmbedColor
from models.inventory_item import ItemRarity


def get_rarity_name(rarity: ItemRarity) -> str:
    """
    희귀도 표시 이름 반환

    Args:
        rarity: 희귀도

    Returns:
        표시 이름 (예: "Legendary")
    """
    return rarity.name.capitalize()


def get_rarity_emoji(rarity: ItemRarity) -> str:
    """
    희귀도에 따른 이모지 반환

    Args:
        rarity: 희귀도

    Returns:
        희귀도 이모지
    """
    rarity_emojis = {
        ItemRarity.COMMON: "⚪",     # 회색
        ItemRarity.UNCOMMON: "🟢",   # 녹색
        ItemRarity.RARE: "🔵",       # 파란색
        ItemRarity.EPIC: "🟣",       # 보라색
        ItemRarity.LEGENDARY: "🟡",  # 금색
    }
    return rarity_emojis.get(rarity, "⚫")


def get_rarity_color(rarity: ItemRarity) -> EmbedColor:
    """희귀도에 따른 임베드 색상"""
    rarity_colors = {
        ItemRarity.COMMON: EmbedColor.ITEM_COMMON,
        ItemRarity.UNCOMMON: EmbedColor.ITEM_UNCOMMON,
        ItemRarity.RARE: EmbedColor.ITEM_RARE,
        ItemRarity.EPIC: EmbedColor.ITEM_EPIC,
        ItemRarity.LEGENDARY: EmbedColor.ITEM_LEGENDARY,
    }
    return rarity_colors.get(rarity, EmbedColor.DEFAULT)


def format_item_name(name: str, rarity: Optional[ItemRarity] = None) -> str:
    """
    아이템 이름에 희귀도 표시 추가

    Common 아이템과 희귀도가 없는 경우는 이름만 반환합니다.

    Args:
        name: 아이템 이름
        rarity: 희귀도

    Returns:
        포맷된 이름 (예: "[Epic] Magic Staff")
    """
    if rarity is not None and rarity > ItemRarity.COMMON:
        return f"[{get_rarity_name(rarity)}] {name}"
    return name
