"""Interrupt observation for the interactive session."""

from __future__ import annotations

import logging
import signal
from types import FrameType
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptMonitor:
    """
    Record SIGINT/SIGTERM instead of acting on them.

    The ordering session runs to completion; the last received signal is
    reported once it has ended.
    """

    def __init__(self, signals: tuple[signal.Signals, ...] = DEFAULT_SIGNALS) -> None:
        self._signals = signals
        self._previous: dict[signal.Signals, Any] = {}
        self.received: signal.Signals | None = None

    @property
    def received_name(self) -> str | None:
        if self.received is None:
            return None
        return self.received.name

    def install(self) -> None:
        for sig in self._signals:
            self._previous[sig] = signal.signal(sig, self._handle)

    def restore(self) -> None:
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)
        self._previous.clear()

    def _handle(self, signum: int, frame: FrameType | None) -> None:
        self.received = signal.Signals(signum)
        logger.warning("received %s; finishing the session before exit", self.received.name)

    def __enter__(self) -> InterruptMonitor:
        self.install()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()
