"""Interrupt-driven cancellation of the run loop."""

from __future__ import annotations

import signal
import sys
from collections.abc import Callable

if sys.platform == "win32":
    INTERRUPT_SIGNAL = signal.SIGBREAK
else:
    INTERRUPT_SIGNAL = signal.SIGINT


class CancellationSignal:
    """Single-writer, single-reader stop flag shared with a signal handler.

    ``request`` is the only writer and performs one attribute store, so it is
    safe to call from a Python signal handler while the run loop is inside a
    blocking driver call. The run loop only reads ``requested``.
    """

    __slots__ = ("_requested",)

    def __init__(self) -> None:
        self._requested = False

    @property
    def requested(self) -> bool:
        return self._requested

    def request(self) -> None:
        self._requested = True


def install_interrupt_handler(cancellation: CancellationSignal) -> Callable[[], None]:
    """Route the platform interrupt to ``cancellation`` and return a restore callable.

    Must be called from the main thread.
    """

    def _handle_interrupt(signum, frame) -> None:  # pylint: disable=unused-argument
        cancellation.request()

    previous = signal.signal(INTERRUPT_SIGNAL, _handle_interrupt)

    def restore() -> None:
        signal.signal(INTERRUPT_SIGNAL, previous)

    return restore
