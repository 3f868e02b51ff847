"""
인벤토리 엔진 설정 상수

모든 매직 넘버와 인벤토리 관련 상수를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
"""
from config.inventory import InventoryConfig, INVENTORY, load_inventory_config
from config.ui import EmbedColor, UIConfig, UI

__all__ = [
    # inventory
    "InventoryConfig", "INVENTORY", "load_inventory_config",
    # ui
    "EmbedColor", "UIConfig", "UI",
]
