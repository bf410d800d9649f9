from __future__ import annotations

from dataclasses import dataclass

from turn_circle import TurnCircle


@dataclass(eq=True)
class Seat:
    """Unhashable player type: equality only (dataclass eq sets __hash__ = None)."""

    name: str


def make_circle() -> TurnCircle[str]:
    c: TurnCircle[str] = TurnCircle()
    assert c.insert_all(["A", "B", "C"]) is True
    return c


def test_empty_circle_queries():
    c: TurnCircle[str] = TurnCircle()
    assert c.size() == 0
    assert len(c) == 0
    assert c.first() is None
    assert c.next("A") is None
    assert c.next(None) is None
    assert c.to_ordered_list() == []


def test_next_follows_order_and_wraps():
    """
    Baseline scenario:
      insert_all([A,B,C]) -> [A,B,C]; next(A)=B; next(C)=A
      remove(B) -> next(A)=C
      insert(B) -> [A,C,B]
    """
    c = make_circle()
    assert c.to_ordered_list() == ["A", "B", "C"]
    assert c.next("A") == "B"
    assert c.next("C") == "A"

    assert c.remove("B") is True
    assert c.next("A") == "C"

    assert c.insert("B") is True
    assert c.to_ordered_list() == ["A", "C", "B"]


def test_next_matches_index_formula_for_every_member():
    c = TurnCircle(["A", "B", "C", "D", "E"])
    order = c.to_ordered_list()
    for i, p in enumerate(order):
        assert c.next(p) == order[(i + 1) % len(order)]
        assert c.next(p) in c


def test_next_of_non_member_or_none_is_none():
    c = make_circle()
    assert c.next("Z") is None
    assert c.next(None) is None


def test_singleton_is_its_own_successor():
    c = TurnCircle(["X"])
    assert c.next("X") == "X"
    assert c.next("Y") is None


def test_first_tracks_removal_of_first_player():
    c = make_circle()
    assert c.first() == "A"
    c.remove("A")
    assert c.first() == "B"


def test_insert_rejects_none_and_duplicates():
    c = make_circle()
    assert c.insert(None) is False
    assert c.insert("A") is False
    assert c.to_ordered_list() == ["A", "B", "C"]


def test_insert_twice_same_as_once():
    once: TurnCircle[str] = TurnCircle(["A"])
    once.insert("B")

    twice: TurnCircle[str] = TurnCircle(["A"])
    assert twice.insert("B") is True
    assert twice.insert("B") is False

    assert twice.to_ordered_list() == once.to_ordered_list()


def test_insert_then_remove_restores_order():
    c = make_circle()
    before = c.to_ordered_list()
    assert c.insert("D") is True
    assert c.remove("D") is True
    assert c.to_ordered_list() == before


def test_insert_all_with_duplicate_is_partial_success():
    c: TurnCircle[str] = TurnCircle()
    assert c.insert_all(["A", "B", "A"]) is False
    assert c.to_ordered_list() == ["A", "B"]


def test_insert_all_keeps_successes_after_a_failure():
    c: TurnCircle[str] = TurnCircle()
    assert c.insert_all(["A", None, "B"]) is False
    assert c.to_ordered_list() == ["A", "B"]


def test_constructor_drops_later_duplicates():
    c = TurnCircle(["B", "A", "B", "C", "A"])
    assert c.to_ordered_list() == ["B", "A", "C"]


def test_remove_missing_or_none_is_false():
    c = make_circle()
    assert c.remove("Z") is False
    assert c.remove(None) is False
    assert c.size() == 3


def test_clear_reports_transition_once():
    c = make_circle()
    assert c.clear() is True
    assert c.size() == 0
    assert c.clear() is False
    assert TurnCircle().clear() is False


def test_clear_keeps_identity():
    c = make_circle()
    same = c
    c.clear()
    c.insert("Q")
    assert same is c
    assert same.to_ordered_list() == ["Q"]


def test_ordered_list_is_a_copy():
    c = make_circle()
    out = c.to_ordered_list()
    out.append("Z")
    out.reverse()
    assert c.to_ordered_list() == ["A", "B", "C"]
    assert c.to_ordered_list() is not c.to_ordered_list()


def test_iteration_is_over_a_snapshot():
    c = make_circle()
    seen = []
    for p in c:
        seen.append(p)
        c.remove(p)
    assert seen == ["A", "B", "C"]
    assert c.size() == 0


def test_contains_never_matches_none():
    c = make_circle()
    assert "A" in c
    assert "Z" not in c
    assert None not in c


def test_membership_uses_equality_not_hashing():
    c = TurnCircle([Seat("north"), Seat("east")])

    # A distinct but equal instance is the same player.
    assert c.insert(Seat("north")) is False
    assert c.next(Seat("east")) == Seat("north")
    assert c.remove(Seat("north")) is True
    assert c.to_ordered_list() == [Seat("east")]


def test_repr_shows_order():
    assert repr(TurnCircle(["A", "B"])) == "TurnCircle(['A', 'B'])"
