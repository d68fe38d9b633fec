"""
cancellation.py
===============
Cooperative cancellation shared between a caller and an in-flight
computation. Checked between component boundaries and on every
solar-return iteration.
"""

import threading

from .errors import ComputationCancelled


class CancellationToken:
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, stage: str = "") -> None:
        if self._event.is_set():
            where = f" during {stage}" if stage else ""
            raise ComputationCancelled(f"Computation cancelled{where}", {"stage": stage})


def check(token, stage: str = "") -> None:
    """``raise_if_cancelled`` that tolerates a missing token."""
    if token is not None:
        token.raise_if_cancelled(stage)
