"""
인벤토리 엔진 커스텀 예외 클래스 정의

모든 예외는 InventoryEngineError를 상속받아 일관된 에러 처리를 제공합니다.
인벤토리 조작(InventoryService)은 예외를 밖으로 던지지 않고 InventoryResult.error에 담아 반환합니다.
"""


class InventoryEngineError(Exception):
    """인벤토리 엔진 기본 예외 클래스"""

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# 아이템 관련 예외
# =============================================================================


class InvalidItemError(InventoryEngineError):
    """유효하지 않은 아이템 (ID, 이름, 스택 크기 검증 실패)"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"유효하지 않은 아이템입니다: {reason}")


class ItemNotFoundError(InventoryEngineError):
    """아이템을 찾을 수 없음"""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"아이템을 찾을 수 없습니다: {item_id}")


class InvalidArgumentError(InventoryEngineError):
    """잘못된 인자 (0 이하의 수량 등)"""

    def __init__(self, argument: str, value):
        self.argument = argument
        self.value = value
        super().__init__(f"잘못된 인자입니다: {argument}={value}")


# =============================================================================
# 인벤토리 관련 예외
# =============================================================================


class InventoryFullError(InventoryEngineError):
    """인벤토리 가득 참"""

    def __init__(self, max_slots: int):
        self.max_slots = max_slots
        super().__init__(f"인벤토리가 가득 찼습니다. (최대 {max_slots}칸)")


# =============================================================================
# 세션 관련 예외
# =============================================================================


class SessionNotFoundError(InventoryEngineError):
    """세션을 찾을 수 없음"""

    def __init__(self, context_id):
        self.context_id = context_id
        super().__init__(f"활성화된 인벤토리 세션이 없습니다: {context_id}")


class SessionAlreadyExistsError(InventoryEngineError):
    """이미 세션이 존재함"""

    def __init__(self, context_id):
        self.context_id = context_id
        super().__init__(f"이미 인벤토리 세션이 존재합니다: {context_id}")
