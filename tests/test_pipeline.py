"""Tests for the handoff channel, completion barrier and order pipeline."""

import threading
import time
from collections import Counter

import pytest

from restaurant.errors import ChannelClosedError, InvalidItemError
from restaurant.models import DrinkItem, FoodItem
from restaurant.order import MenuOrder, compute_signature
from restaurant.pipeline import CompletionBarrier, HandoffChannel, OrderPipeline


def test_send_blocks_until_received():
    channel = HandoffChannel()
    delivered = threading.Event()

    def sender():
        channel.send("burger")
        delivered.set()

    thread = threading.Thread(target=sender)
    thread.start()

    assert not delivered.wait(0.1)
    assert channel.receive() == ("burger", True)
    thread.join(timeout=2)
    assert delivered.is_set()


def test_receive_after_close_reports_end():
    channel = HandoffChannel()
    channel.close()

    assert channel.receive() == (None, False)
    assert list(channel) == []


def test_item_handed_over_before_close_is_still_drained():
    channel = HandoffChannel()
    thread = threading.Thread(target=channel.send, args=("fries",))
    thread.start()

    deadline = time.monotonic() + 2
    while not channel.pending and time.monotonic() < deadline:
        time.sleep(0.005)
    channel.close()

    assert list(channel) == ["fries"]
    thread.join(timeout=2)
    assert not thread.is_alive()


def test_send_and_close_on_closed_channel_fail():
    channel = HandoffChannel()
    channel.close()

    with pytest.raises(ChannelClosedError):
        channel.send("pizza")
    with pytest.raises(ChannelClosedError):
        channel.close()


def test_barrier_releases_after_all_done():
    barrier = CompletionBarrier()
    barrier.add(2)

    assert not barrier.wait(timeout=0.01)
    barrier.done()
    assert barrier.pending == 1
    barrier.done()
    assert barrier.wait(timeout=1)


def test_barrier_counter_cannot_go_negative():
    barrier = CompletionBarrier()

    with pytest.raises(ValueError):
        barrier.done()


def test_submit_requires_started_pipeline(burger):
    pipeline = OrderPipeline(MenuOrder("1"))

    with pytest.raises(RuntimeError):
        pipeline.submit(FoodItem(entry=burger, quantity=1))


def test_every_submitted_item_arrives_exactly_once(burger, pepsi):
    order = MenuOrder("1")
    submitted = []
    for n in range(1, 41):
        submitted.append(FoodItem(entry=burger, quantity=n))
        submitted.append(DrinkItem(entry=pepsi, quantity=n, refills=n % 3))

    with OrderPipeline(order) as pipeline:
        for item in submitted:
            pipeline.submit(item)
        faults = pipeline.close()

    assert faults == []
    assert pipeline.submitted == len(submitted)
    assert Counter(order.items) == Counter(submitted)
    assert compute_signature(order.items) == order.signature


def test_received_callback_runs_for_each_item(burger, pepsi):
    order = MenuOrder("1")
    seen = []
    items = [FoodItem(entry=burger, quantity=2), DrinkItem(entry=pepsi, quantity=1)]

    with OrderPipeline(order, on_received=seen.append) as pipeline:
        for item in items:
            pipeline.submit(item)

    assert Counter(seen) == Counter(items)
    assert len(order) == 2


def test_invalid_item_is_collected_as_fault(burger):
    order = MenuOrder("1")
    pipeline = OrderPipeline(order)
    pipeline.start()
    pipeline.submit(FoodItem(entry=burger, quantity=1))
    pipeline.submit("salad")

    faults = pipeline.close()

    assert len(faults) == 1
    assert isinstance(faults[0], InvalidItemError)
    assert faults[0].item == "salad"
    assert order.items == (FoodItem(entry=burger, quantity=1),)


def test_close_without_items_leaves_empty_order():
    order = MenuOrder("1")
    pipeline = OrderPipeline(order)
    pipeline.start()

    assert pipeline.close() == []
    assert order.signature == ""


def test_closing_twice_fails():
    pipeline = OrderPipeline(MenuOrder("1"))
    pipeline.start()
    pipeline.close()

    with pytest.raises(ChannelClosedError):
        pipeline.close()


def test_pending_reports_waiting_handoff():
    channel = HandoffChannel()
    assert not channel.pending

    thread = threading.Thread(target=channel.send, args=("pizza",))
    thread.start()
    deadline = time.monotonic() + 2
    while not channel.pending and time.monotonic() < deadline:
        time.sleep(0.005)

    assert channel.pending
    assert channel.receive() == ("pizza", True)
    thread.join(timeout=2)
    assert not channel.pending


def test_failing_receipt_notification_does_not_stall_kitchen(burger, pepsi):
    def broken_display(item):
        raise OSError("stdout closed")

    order = MenuOrder("1")
    pipeline = OrderPipeline(order, on_received=broken_display)
    pipeline.start()
    items = [FoodItem(entry=burger, quantity=1), DrinkItem(entry=pepsi, quantity=2)]
    for item in items:
        pipeline.submit(item)

    result = []
    closer = threading.Thread(target=lambda: result.append(pipeline.close()))
    closer.start()
    closer.join(timeout=3)

    assert not closer.is_alive()
    assert result == [[]]
    assert Counter(order.items) == Counter(items)
