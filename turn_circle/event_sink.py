from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from turn_circle.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured events.
    A TurnCircle must behave identically with event_sink=None.
    """

    @abstractmethod
    def start_round(self) -> int: ...

    @abstractmethod
    def emit(self, event_type: EventType, player: Any = None, **data: Any) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for tests and the CLI.
    Owns round/seq numbering so the circle carries no counters of its own.
    """

    events: list[Event] = field(default_factory=list)
    _round: int = field(default=0, init=False)
    _seq: int = field(default=0, init=False)

    @property
    def current_round(self) -> int:
        return self._round

    def start_round(self) -> int:
        self._round += 1
        self._seq = 0
        return self._round

    def emit(self, event_type: EventType, player: Any = None, **data: Any) -> None:
        self._seq += 1
        self.events.append(
            Event(
                round=self._round,
                seq=self._seq,
                type=event_type,
                player=player,
                data=dict(data),
            )
        )

    def of_type(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.type == event_type]
