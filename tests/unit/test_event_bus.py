"""
EventBus 유닛 테스트
"""
import logging
import uuid

import pytest

from service.event.event_bus import EventBus, InventoryEvent, InventoryEventType, Subscription


@pytest.fixture
def bus():
    return EventBus()


def make_event(event_type=InventoryEventType.INVENTORY_CHANGED, **kwargs):
    return InventoryEvent(event_type, **kwargs)


class TestSubscribe:
    """구독 테스트"""

    def test_subscribe_returns_active_token(self, bus):
        subscription = bus.subscribe(InventoryEventType.ITEM_ADDED, lambda event: None)

        assert isinstance(subscription, Subscription)
        assert subscription.active
        assert bus.get_subscriber_count(InventoryEventType.ITEM_ADDED) == 1

    def test_duplicate_callback_returns_same_token(self, bus):
        def callback(event):
            pass

        first = bus.subscribe(InventoryEventType.ITEM_ADDED, callback)
        second = bus.subscribe(InventoryEventType.ITEM_ADDED, callback)

        assert first is second
        assert bus.get_subscriber_count(InventoryEventType.ITEM_ADDED) == 1

    def test_same_callback_different_types(self, bus):
        def callback(event):
            pass

        bus.subscribe(InventoryEventType.ITEM_ADDED, callback)
        bus.subscribe(InventoryEventType.ITEM_REMOVED, callback)

        assert bus.get_subscriber_count(InventoryEventType.ITEM_ADDED) == 1
        assert bus.get_subscriber_count(InventoryEventType.ITEM_REMOVED) == 1

    def test_count_for_unknown_type(self, bus):
        assert bus.get_subscriber_count(InventoryEventType.ITEM_STACK_CHANGED) == 0


class TestPublish:
    """발행 테스트"""

    def test_delivers_only_matching_type(self, bus):
        received = []
        bus.subscribe(InventoryEventType.ITEM_REMOVED, received.append)

        bus.publish(make_event(InventoryEventType.ITEM_ADDED))
        removed = make_event(InventoryEventType.ITEM_REMOVED, item_id=uuid.uuid4())
        bus.publish(removed)

        assert received == [removed]

    def test_delivers_in_subscription_order(self, bus):
        calls = []
        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, lambda event: calls.append("first"))
        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, lambda event: calls.append("second"))

        bus.publish(make_event())

        assert calls == ["first", "second"]

    def test_publish_without_subscribers(self, bus):
        bus.publish(make_event())

    def test_failing_callback_is_logged_and_isolated(self, bus, caplog):
        received = []

        def broken(event):
            raise ValueError("broken subscriber")

        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, broken)
        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, received.append)

        with caplog.at_level(logging.ERROR, logger="service.event.event_bus"):
            bus.publish(make_event())

        assert len(received) == 1
        assert "broken subscriber" in caplog.text

    def test_unsubscribe_during_publish(self, bus):
        """콜백 안에서 다른 구독을 해제하면 그 구독은 이번 발행부터 호출되지 않음"""
        calls = []
        holder = {}

        def first(event):
            calls.append("first")
            holder["second"].cancel()

        def second(event):
            calls.append("second")

        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, first)
        holder["second"] = bus.subscribe(InventoryEventType.INVENTORY_CHANGED, second)

        bus.publish(make_event())

        assert calls == ["first"]

    def test_subscribe_during_publish(self, bus):
        """발행 중 추가된 구독은 다음 발행부터 호출"""
        calls = []

        def late(event):
            calls.append("late")

        def first(event):
            calls.append("first")
            bus.subscribe(InventoryEventType.INVENTORY_CHANGED, late)

        bus.subscribe(InventoryEventType.INVENTORY_CHANGED, first)

        bus.publish(make_event())
        assert calls == ["first"]

        bus.publish(make_event())
        assert calls == ["first", "first", "late"]


class TestSubscriptionToken:
    """구독 토큰 테스트"""

    def test_cancel_stops_delivery(self, bus):
        received = []
        subscription = bus.subscribe(InventoryEventType.INVENTORY_CHANGED, received.append)

        subscription.cancel()
        bus.publish(make_event())

        assert received == []
        assert not subscription.active
        assert bus.get_subscriber_count(InventoryEventType.INVENTORY_CHANGED) == 0

    def test_cancel_is_idempotent(self, bus):
        subscription = bus.subscribe(InventoryEventType.INVENTORY_CHANGED, lambda event: None)
        subscription.cancel()
        subscription.cancel()
        assert not subscription.active

    def test_context_manager_cancels(self, bus):
        received = []

        with bus.subscribe(InventoryEventType.INVENTORY_CHANGED, received.append) as subscription:
            bus.publish(make_event())

        bus.publish(make_event())

        assert len(received) == 1
        assert not subscription.active

    def test_resubscribe_after_cancel_creates_new_token(self, bus):
        def callback(event):
            pass

        first = bus.subscribe(InventoryEventType.INVENTORY_CHANGED, callback)
        first.cancel()
        second = bus.subscribe(InventoryEventType.INVENTORY_CHANGED, callback)

        assert second is not first
        assert second.active


class TestClearAllSubscribers:
    """clear_all_subscribers 테스트"""

    def test_clear_deactivates_tokens(self, bus):
        received = []
        tokens = [bus.subscribe(event_type, received.append) for event_type in InventoryEventType]

        bus.clear_all_subscribers()
        for event_type in InventoryEventType:
            bus.publish(make_event(event_type))

        assert received == []
        assert all(not token.active for token in tokens)
        assert all(bus.get_subscriber_count(event_type) == 0 for event_type in InventoryEventType)
