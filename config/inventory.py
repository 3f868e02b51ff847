"""인벤토리 설정"""
import logging
import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InventoryConfig:
    """인벤토리 설정"""

    MAX_SLOTS: int = 100
    """최대 인벤토리 슬롯"""

    AUTO_STACK: bool = True
    """추가 시 같은 아이템 스택에 자동으로 합치기"""

    MATERIAL_MAX_STACK: int = 99
    """재료 아이템 기본 최대 스택"""

    CONSUMABLE_MAX_STACK: int = 20
    """소비 아이템 기본 최대 스택"""

    DEFAULT_MATERIAL_STACK: int = 1
    """재료 아이템 생성 시 기본 스택"""


INVENTORY = InventoryConfig()

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using default {default}")
        return default


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid boolean for {name}: {raw!r}, using default {default}")
    return default


def load_inventory_config(base: InventoryConfig = INVENTORY) -> InventoryConfig:
    """
    .env / 환경변수에서 인벤토리 설정 로드

    INVENTORY_MAX_SLOTS, INVENTORY_AUTO_STACK 값이 있으면 base 설정을 덮어씁니다.

    Args:
        base: 기본 설정

    Returns:
        환경변수가 반영된 InventoryConfig
    """
    load_dotenv()

    max_slots = max(1, _read_int("INVENTORY_MAX_SLOTS", base.MAX_SLOTS))
    auto_stack = _read_bool("INVENTORY_AUTO_STACK", base.AUTO_STACK)

    return replace(base, MAX_SLOTS=max_slots, AUTO_STACK=auto_stack)
