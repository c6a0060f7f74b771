"""Classification of a seven-card hold'em hand from value and suit frequencies."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

from holdem.cards import Card


class Ranking(IntEnum):
    """Hand rankings; a lower number is a stronger hand."""

    ROYAL_FLUSH = 1
    STRAIGHT_FLUSH = 2
    FOUR_OF_A_KIND = 3
    FULL_HOUSE = 4
    FLUSH = 5
    STRAIGHT = 6
    THREE_OF_A_KIND = 7
    TWO_PAIRS = 8
    ONE_PAIR = 9
    HIGH_CARD = 10


_DESCRIPTIONS = {
    Ranking.ROYAL_FLUSH: "tem um royal flush",
    Ranking.STRAIGHT_FLUSH: "tem um straight flush",
    Ranking.FOUR_OF_A_KIND: "tem uma quadra",
    Ranking.FULL_HOUSE: "tem um full house",
    Ranking.FLUSH: "tem um flush",
    Ranking.STRAIGHT: "tem um straight",
    Ranking.THREE_OF_A_KIND: "tem uma trinca",
    Ranking.TWO_PAIRS: "tem duas duplas",
    Ranking.ONE_PAIR: "tem uma dupla",
    Ranking.HIGH_CARD: "e uma carta alta",
}


def count_frequencies(cards: Iterable[Card]) -> tuple[list[int], list[int]]:
    """Return (value counts indexed 0..14, suit counts indexed 0..4)."""
    value_counts = [0] * 15
    suit_counts = [0] * 5
    for card in cards:
        if not 0 <= card.value < 15 or not 0 <= card.suit < 5:
            raise ValueError(f"invalid card: {card!r}")
        value_counts[card.value] += 1
        suit_counts[card.suit] += 1
    return value_counts, suit_counts


def evaluate(hole: Sequence[Card], board: Sequence[Card]) -> Ranking:
    """Rank the five board cards together with the two hole cards."""
    values, suits = count_frequencies([*board[:5], *hole[:2]])
    if four_of_a_kind(values):
        return Ranking.FOUR_OF_A_KIND
    if full_house(values):
        return Ranking.FULL_HOUSE
    if two_pairs(values):
        return Ranking.TWO_PAIRS
    if three_of_a_kind(values):
        return Ranking.THREE_OF_A_KIND
    if one_pair(values):
        return Ranking.ONE_PAIR
    if straight_flush(values, suits):
        return Ranking.STRAIGHT_FLUSH
    if straight(values):
        return Ranking.STRAIGHT
    if flush(suits):
        return Ranking.FLUSH
    return Ranking.HIGH_CARD


def ranking_message(ranking: Ranking) -> str:
    """Return the announcement printed for a ranking."""
    ranking = Ranking(ranking)
    return f"\nA sua sequencia {_DESCRIPTIONS[ranking]}.\nRANKING: TOP {int(ranking)}"


def one_pair(value_counts: Sequence[int]) -> bool:
    return any(count == 2 for count in value_counts)


def two_pairs(value_counts: Sequence[int]) -> bool:
    """True when exactly two values appear twice."""
    return sum(1 for count in value_counts if count == 2) == 2


def three_of_a_kind(value_counts: Sequence[int]) -> bool:
    return any(count == 3 for count in value_counts)


def four_of_a_kind(value_counts: Sequence[int]) -> bool:
    return any(count == 4 for count in value_counts)


def full_house(value_counts: Sequence[int]) -> bool:
    """Scan from the highest value for a triple with a pair, or two triples."""
    triples = pairs = 0
    for count in reversed(value_counts[:15]):
        if count == 3:
            triples += 1
        elif count == 2:
            pairs += 1
        if (triples == 1 and pairs == 1) or triples == 2:
            return True
    return False


def flush(suit_counts: Sequence[int]) -> bool:
    return any(count >= 5 for count in suit_counts[:5])


def straight(value_counts: Sequence[int]) -> bool:
    """True when five consecutive values from 2 to 14 are present."""
    run = 0
    for count in value_counts[14:1:-1]:
        if count > 0:
            run += 1
            if run == 5:
                return True
        else:
            run = 0
    return False


def straight_flush(value_counts: Sequence[int], suit_counts: Sequence[int]) -> bool:
    return straight(value_counts) and flush(suit_counts)