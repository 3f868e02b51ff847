import logging
from typing import Dict, Hashable, List, Optional

from config.inventory import INVENTORY, InventoryConfig
from exceptions import SessionAlreadyExistsError, SessionNotFoundError
from service.inventory_service import InventoryService


class InventorySession:
    """컨텍스트(플레이어 세션) 하나가 소유하는 인벤토리"""

    def __init__(self, context_id: Hashable, config: InventoryConfig = INVENTORY):
        self.context_id = context_id
        self.config = config
        self.inventory = InventoryService.from_config(config)
        self.ended = False

    def close(self):
        """세션 종료: 인벤토리를 비우고 남은 구독을 모두 해제"""
        if self.ended:
            return
        self.inventory.clear_inventory()
        self.inventory.events.clear_all_subscribers()
        self.ended = True


class SessionRegistry:
    """context_id 별 InventorySession 레지스트리"""

    def __init__(self):
        self.active_sessions: Dict[Hashable, InventorySession] = {}

    def create_session(self, context_id: Hashable, config: Optional[InventoryConfig] = None) -> InventorySession:
        if self.is_in_session(context_id):
            raise SessionAlreadyExistsError(context_id)

        logging.info(f"Creating inventory session for {context_id}")
        session = InventorySession(context_id, config or INVENTORY)
        self.active_sessions[context_id] = session
        return session

    def get_session(self, context_id: Hashable) -> Optional[InventorySession]:
        return self.active_sessions.get(context_id)

    def require_session(self, context_id: Hashable) -> InventorySession:
        session = self.get_session(context_id)
        if session is None or session.ended:
            raise SessionNotFoundError(context_id)
        return session

    def end_session(self, context_id: Hashable) -> bool:
        session = self.active_sessions.pop(context_id, None)
        if session is None:
            return False
        logging.info(f"End inventory session for {context_id}")
        session.close()
        return True

    def is_in_session(self, context_id: Hashable) -> bool:
        return context_id in self.active_sessions and not self.active_sessions[context_id].ended

    def active_context_ids(self) -> List[Hashable]:
        return [cid for cid, session in self.active_sessions.items() if not session.ended]


def get_inventory_manager(registry: SessionRegistry, context_id: Hashable) -> Optional[InventoryService]:
    """컨텍스트의 인벤토리 조회 (활성 세션이 없으면 None)"""
    session = registry.get_session(context_id)
    if session is None or session.ended:
        return None
    return session.inventory
