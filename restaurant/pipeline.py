"""Producer/consumer orchestration between order entry and the kitchen."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterator

from restaurant.errors import ChannelClosedError, InvalidItemError, RestaurantError
from restaurant.models import OrderItem
from restaurant.order import MenuOrder

logger = logging.getLogger(__name__)

_EMPTY = object()


class HandoffChannel:
    """
    Unbuffered channel: every send rendezvous with exactly one receive.

    A sender blocks until a receiver has taken its item. After ``close`` the
    receiver still drains an item already handed over, then sees the end.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._slot: object = _EMPTY
        self._closed = False
        self._sent = 0
        self._taken = 0

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    @property
    def pending(self) -> bool:
        """True while a sent item waits for a receiver."""
        with self._cond:
            return self._slot is not _EMPTY

    def send(self, item: object) -> None:
        with self._cond:
            while self._slot is not _EMPTY and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            self._slot = item
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            while self._taken < ticket:
                self._cond.wait()

    def receive(self) -> tuple[object | None, bool]:
        with self._cond:
            while self._slot is _EMPTY and not self._closed:
                self._cond.wait()
            if self._slot is _EMPTY:
                return None, False
            item = self._slot
            self._slot = _EMPTY
            self._taken += 1
            self._cond.notify_all()
            return item, True

    def close(self) -> None:
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[object]:
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item


class CompletionBarrier:
    """Counter that releases waiters once every registered task is done."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._pending = 0

    @property
    def pending(self) -> int:
        with self._cond:
            return self._pending

    def add(self, count: int = 1) -> None:
        with self._cond:
            if self._pending + count < 0:
                raise ValueError("negative barrier counter")
            self._pending += count
            if self._pending == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout: float | None = None) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: self._pending == 0, timeout=timeout)


class OrderPipeline:
    """
    Fan order items from one producer thread each into a single kitchen consumer.

    Shutdown order is fixed: wait for every producer, close the channel, then
    join the consumer once it has drained the last handoff.
    """

    def __init__(
        self,
        order: MenuOrder,
        on_received: Callable[[OrderItem], None] | None = None,
    ) -> None:
        self.order = order
        self._on_received = on_received
        self._channel = HandoffChannel()
        self._barrier = CompletionBarrier()
        self._consumer: threading.Thread | None = None
        self._faults: list[Exception] = []
        self._faults_lock = threading.Lock()
        self._submitted = 0

    @property
    def submitted(self) -> int:
        return self._submitted

    @property
    def faults(self) -> list[Exception]:
        with self._faults_lock:
            return list(self._faults)

    def start(self) -> None:
        if self._consumer is not None:
            return
        self._consumer = threading.Thread(target=self._receive_orders, name="kitchen", daemon=True)
        self._consumer.start()
        logger.debug("order=%s kitchen consumer started", self.order.number)

    def submit(self, item: object) -> None:
        """Spawn one producer thread that hands ``item`` to the kitchen."""
        if self._consumer is None:
            raise RuntimeError("pipeline must be started before submitting items")
        self._barrier.add(1)
        self._submitted += 1
        producer = threading.Thread(
            target=self._generate_order,
            args=(item,),
            name=f"producer-{self._submitted}",
            daemon=True,
        )
        producer.start()

    def close(self) -> list[Exception]:
        """Wait for producers, close the channel, drain, and return collected faults."""
        logger.debug("order=%s waiting for %d producer(s)", self.order.number, self._barrier.pending)
        self._barrier.wait()
        self._channel.close()
        if self._consumer is not None:
            self._consumer.join()
        faults = self.faults
        logger.info(
            "order=%s drained: submitted=%d accepted=%d faults=%d",
            self.order.number,
            self._submitted,
            len(self.order),
            len(faults),
        )
        return faults

    def __enter__(self) -> OrderPipeline:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self._channel.closed:
            self.close()

    def _generate_order(self, item: object) -> None:
        try:
            if not isinstance(item, OrderItem):
                raise InvalidItemError(item)
            self._channel.send(item)
        except RestaurantError as exc:
            logger.error("producer fault: %s", exc)
            with self._faults_lock:
                self._faults.append(exc)
        finally:
            self._barrier.done()

    def _receive_orders(self) -> None:
        for item in self._channel:
            logger.info("order=%s received %s", self.order.number, item.metadata)
            try:
                if self._on_received is not None:
                    self._on_received(item)
            except Exception:
                logger.exception("order=%s receipt notification failed for %s", self.order.number, item.metadata)
            try:
                self.order.add_item(item)
            except Exception as exc:
                logger.exception("order=%s could not accept %s", self.order.number, item.metadata)
                with self._faults_lock:
                    self._faults.append(exc)
