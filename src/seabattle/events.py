"""Lightweight event model used by TurnCoordinator to report match progress.

Subscribers (tests, logging, a future front-end) receive strongly-typed events
instead of having to parse the console text shown to the players.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class Category(Enum):
    """High-level event categories."""

    TURN = auto()  # per-turn lifecycle (prompt, shot, switch, end)
    SYSTEM = auto()  # actor start / exit


@dataclass(slots=True)
class Event:
    """Immutable event emitted by TurnCoordinator."""

    category: Category
    type: str  # finer-grained identifier, e.g. "prompt", "shot", "end"
    payload: Dict[str, Any]


Subscriber = Callable[[Event], None]


class EventBus:
    def __init__(self) -> None:
        self._subs: List[Subscriber] = []

    def subscribe(self, handler: Subscriber) -> None:
        self._subs.append(handler)

    def emit(self, event: Event) -> None:
        for handler in list(self._subs):
            try:
                handler(event)
            except Exception:  # noqa: BLE001
                logger.exception("Event subscriber failed for %s", event)
