"""Playing cards, deck construction, shuffling and text rendering."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, MutableSequence, Sequence

from holdem.structures import CardStack


class Suit(IntEnum):
    HEARTS = 1
    SPADES = 2
    DIAMONDS = 3
    CLUBS = 4


@dataclass(frozen=True)
class Card:
    """A card; ``value`` runs from 2 to 14, with the ace as 14."""

    id: int
    suit: Suit
    value: int


_VALUE_NAMES = {
    2: "Dois",
    3: "Tres",
    4: "Quatro",
    5: "Cinco",
    6: "Seis",
    7: "Sete",
    8: "Oito",
    9: "Nove",
    10: "Dez",
    11: "Valete",
    12: "Rainha",
    13: "Rei",
    14: "As",
}

_SUIT_NAMES = {
    Suit.HEARTS: "Copas",
    Suit.SPADES: "Espadas",
    Suit.DIAMONDS: "Ouros",
    Suit.CLUBS: "Paus",
}


def new_deck() -> list[Card]:
    """Return the 52 cards in order, suit by suit, ids 1 to 52."""
    deck = []
    for suit in Suit:
        for rank in range(1, 14):
            value = 14 if rank == 1 else rank
            deck.append(Card(len(deck) + 1, suit, value))
    return deck


def shuffle(cards: MutableSequence[Card], rng: random.Random | None = None) -> None:
    """Shuffle ``cards`` in place with the Fisher-Yates algorithm."""
    rng = rng if rng is not None else random.Random()
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randrange(i + 1)
        cards[i], cards[j] = cards[j], cards[i]


def fill_stack(stack: CardStack, cards: Sequence[Card]) -> None:
    """Push ``cards`` so that the first card ends up on top."""
    for card in reversed(cards):
        stack.push(card)


def card_name(card: Card) -> str:
    """Return the spoken name of a card, such as ``"As de Copas"``."""
    value = _VALUE_NAMES.get(card.value)
    suit = _SUIT_NAMES.get(card.suit, "")
    return f"{value} de {suit}" if value else suit


def format_card(card: Card) -> str:
    return f"\nCARTA de ID: {card.id}\n{card_name(card)}\n"


def format_cards(cards: Iterable[Card]) -> str:
    return "".join(format_card(card) for card in cards)


def format_stack(stack: CardStack) -> str:
    """Render every card in the stack from the top down."""
    return format_cards(stack)