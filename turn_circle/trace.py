from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from turn_circle.circle import TurnCircle
from turn_circle.event_sink import EventSink
from turn_circle.events import EventType

T = TypeVar("T")


@dataclass(frozen=True)
class TurnTrace(Generic[T]):
    round: int
    # 1-based position within the round
    turn: int
    player: T


def iter_turns(circle: TurnCircle[T], start: T | None = None) -> Iterator[T]:
    """
    Yield players in turn order forever, beginning at `start` (default: the
    first player) and following circle.next().

    The walk is live: players inserted or removed between turns are honored.
    It stops when the circle empties or the current player has been removed.
    """
    current = circle.first() if start is None else (start if start in circle else None)
    while current is not None:
        yield current
        current = circle.next(current)


def run_rounds(
        circle: TurnCircle[T],
        rounds: int,
        *,
        start: T | None = None,
        event_sink: EventSink | None = None,
) -> list[TurnTrace[T]]:
    """
    Walk the circle for `rounds` full rounds, returning one TurnTrace per turn.

    Notes:
    - A round is circle.size() turns, measured before the first round.
    - An empty circle or a `start` outside the circle yields no turns.
    - Adds observability only; the circle is not mutated.
    """
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")

    per_round = circle.size()
    if per_round == 0 or (start is not None and start not in circle):
        return []

    turns = iter_turns(circle, start=start)
    log: list[TurnTrace[T]] = []
    for r in range(1, rounds + 1):
        if event_sink is not None:
            event_sink.start_round()
            event_sink.emit(EventType.ROUND_START, size=per_round)

        for t in range(1, per_round + 1):
            player = next(turns)
            log.append(TurnTrace(round=r, turn=t, player=player))
            if event_sink is not None:
                event_sink.emit(EventType.TURN_TAKEN, player=player, turn=t)
    return log
