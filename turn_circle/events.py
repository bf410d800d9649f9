from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary for circle mutations and traced rounds.
    Queries never produce events.
    """

    PLAYER_INSERTED = "PLAYER_INSERTED"
    PLAYER_REMOVED = "PLAYER_REMOVED"
    FIRST_CHANGED = "FIRST_CHANGED"
    CIRCLE_CLEARED = "CIRCLE_CLEARED"
    ROUND_START = "ROUND_START"
    TURN_TAKEN = "TURN_TAKEN"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by a circle or a trace run.

    round and seq are owned by the sink; round 0 holds setup events.
    """

    round: int
    seq: int
    type: EventType
    player: Any = None
    data: dict[str, Any] = field(default_factory=dict)
