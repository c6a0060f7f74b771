"""Container types used by the game: a stack of cards and an ordered player list."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class CardStack(Generic[T]):
    """A last-in, first-out pile of cards; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, card: T) -> None:
        """Place a card on top of the stack."""
        self._items.append(card)

    def pop(self) -> T:
        """Remove and return the card on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty card stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)


class PlayerList(Generic[T]):
    """Players kept in the order they joined; each player carries an ``id``."""

    def __init__(self) -> None:
        self._players: deque[T] = deque()

    def append(self, player: T) -> None:
        """Add a player at the end of the list."""
        self._players.append(player)

    def remove(self, player_id: Any) -> T:
        """Remove the first player whose ``id`` equals ``player_id`` and return it."""
        for player in self._players:
            if getattr(player, "id") == player_id:
                self._players.remove(player)
                return player
        raise KeyError(player_id)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[T]:
        return iter(self._players)