from dataclasses import dataclass

import pytest

from holdem.structures import CardStack, PlayerList


@dataclass
class _Seat:
    id: int
    name: str


def test_stack_is_last_in_first_out():
    stack = CardStack()
    for item in ("a", "b", "c"):
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]


def test_stack_length_tracks_push_and_pop():
    stack = CardStack()
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1


def test_stack_iterates_from_top():
    stack = CardStack()
    for item in (1, 2, 3):
        stack.push(item)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_pop_empty_stack_raises():
    with pytest.raises(IndexError):
        CardStack().pop()


def _players(count):
    players = PlayerList()
    for number in range(1, count + 1):
        players.append(_Seat(number, f"p{number}"))
    return players


def test_player_list_keeps_insertion_order():
    players = _players(3)
    assert [p.id for p in players] == [1, 2, 3]
    assert len(players) == 3


@pytest.mark.parametrize("removed, remaining", [(1, [2, 3]), (2, [1, 3]), (3, [1, 2])])
def test_remove_head_middle_and_tail(removed, remaining):
    players = _players(3)
    gone = players.remove(removed)
    assert gone.id == removed
    assert [p.id for p in players] == remaining
    assert len(players) == 2


def test_remove_missing_player_raises():
    players = _players(2)
    with pytest.raises(KeyError):
        players.remove(9)
    assert len(players) == 2