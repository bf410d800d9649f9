from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from turn_circle.event_sink import EventSink
from turn_circle.events import EventType

T = TypeVar("T")


class TurnCircle(Generic[T]):
    """
    A circle of distinct players with a fixed turn order.

    Rules:
    - Players are distinct by ==; they are never hashed.
    - Insertion order is turn order; index 0 is the first player.
    - next() wraps from the last player back to the first.
    - None means "no player": it is never stored and never a member.
    - Invalid input yields False/None instead of raising.

    Mutations that change state emit events to the optional event_sink.
    Failed mutations and queries emit nothing.
    """

    def __init__(
            self,
            initial: Iterable[T] = (),
            *,
            event_sink: EventSink | None = None,
    ) -> None:
        self._order: list[T] = []
        self._event_sink = event_sink
        # Later duplicates are dropped, same as repeated insert().
        self.insert_all(initial)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, player: object) -> bool:
        return self._index_of(player) is not None

    def __iter__(self) -> Iterator[T]:
        # Iterate a snapshot so callers may mutate the circle while looping.
        return iter(self.to_ordered_list())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._order!r})"

    def _index_of(self, player: object) -> int | None:
        if player is None:
            return None
        for i, p in enumerate(self._order):
            if p == player:
                return i
        return None

    def _emit(self, event_type: EventType, player: T | None = None, **data: object) -> None:
        if self._event_sink is not None:
            self._event_sink.emit(event_type, player=player, **data)

    # -- queries -----------------------------------------------------------

    def next(self, player: T | None) -> T | None:
        """
        Return the player after `player`, or None if the circle is empty or
        `player` is not in it. A lone player is its own successor.
        """
        i = self._index_of(player)
        if i is None:
            return None
        return self._order[(i + 1) % len(self._order)]

    def first(self) -> T | None:
        if not self._order:
            return None
        return self._order[0]

    def size(self) -> int:
        return len(self._order)

    def to_ordered_list(self) -> list[T]:
        """Players in turn order, first player at 0. Always a new list."""
        return list(self._order)

    # -- mutations ---------------------------------------------------------

    def designate_first(self, player: T | None) -> bool:
        """
        Make `player` the first player without changing relative order.

        Returns False (no change) if `player` is None or not in the circle.
        Returns True if `player` is already first, or after rotating
        [p0 .. pi .. pn] into [pi .. pn, p0 .. pi-1].
        """
        i = self._index_of(player)
        if i is None:
            return False
        if i == 0:
            return True

        previous = self._order[0]
        self._order[:] = self._order[i:] + self._order[:i]
        self._emit(EventType.FIRST_CHANGED, player=self._order[0], previous=previous, offset=i)
        return True

    def insert(self, player: T | None) -> bool:
        """Append `player` to the end of the turn order unless None or already present."""
        if player is None or player in self:
            return False
        self._order.append(player)
        self._emit(EventType.PLAYER_INSERTED, player=player, index=len(self._order) - 1)
        return True

    def insert_all(self, players: Iterable[T | None]) -> bool:
        """
        Insert each player in order.

        Returns True only if every insert succeeded. Earlier successes stay
        applied when a later insert fails.
        """
        ok = True
        for p in players:
            if not self.insert(p):
                ok = False
        return ok

    def remove(self, player: T | None) -> bool:
        i = self._index_of(player)
        if i is None:
            return False
        removed = self._order.pop(i)
        self._emit(EventType.PLAYER_REMOVED, player=removed, index=i)
        return True

    def clear(self) -> bool:
        """Drop every player. True iff there was at least one to drop."""
        if not self._order:
            return False
        count = len(self._order)
        self._order.clear()
        self._emit(EventType.CIRCLE_CLEARED, count=count)
        return True
