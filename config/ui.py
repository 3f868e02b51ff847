"""인벤토리 UI 관련 설정"""
from dataclasses import dataclass
from enum import IntEnum


class EmbedColor(IntEnum):
    """임베드 색상"""

    DEFAULT = 0x3498DB  # 파란색
    SUCCESS = 0x2ECC71  # 초록색
    WARNING = 0xF39C12  # 주황색
    ERROR = 0xE74C3C  # 빨간색
    ITEM_COMMON = 0x95A5A6  # Common 회색
    ITEM_UNCOMMON = 0x2ECC71  # Uncommon 초록색
    ITEM_RARE = 0x3498DB  # Rare 파란색
    ITEM_EPIC = 0x9B59B6  # Epic 보라색
    ITEM_LEGENDARY = 0xF1C40F  # Legendary 금색


@dataclass(frozen=True)
class UIConfig:
    """UI 설정"""

    # 페이지네이션
    ITEMS_PER_PAGE: int = 10
    """페이지당 아이템 수"""

    MAX_EMBED_FIELD_VALUE: int = 1024
    """임베드 필드 값 최대 길이"""

    # 채움 비율 경고 구간
    FILL_WARNING_RATIO: float = 0.75
    """채움 비율 경고 기준 (75%)"""

    FILL_DANGER_RATIO: float = 0.9
    """채움 비율 위험 기준 (90%)"""


UI = UIConfig()
