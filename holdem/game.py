"""One round of hold'em: deal hands and board, then rank every player."""

from __future__ import annotations

import argparse
import random
import sys
from typing import IO, Sequence

from holdem.cards import Card, fill_stack, format_card, format_cards, new_deck, shuffle
from holdem.hands import Ranking, evaluate, ranking_message
from holdem.players import format_players, read_players
from holdem.structures import CardStack, PlayerList

BOARD_SIZE = 5


def deal_hands(players: PlayerList, stack: CardStack, out: IO[str]) -> None:
    """Give each player two cards from the top of the stack and show them."""
    for player in players:
        player.hand = (stack.pop(), stack.pop())
        out.write(f"\nSEGUE A MAO DO {player.name}")
        out.write(format_cards(player.hand))


def deal_board(stack: CardStack, out: IO[str]) -> list[Card]:
    """Take the five community cards from the stack, showing each one."""
    board = []
    for _ in range(BOARD_SIZE):
        card = stack.pop()
        out.write(format_card(card))
        board.append(card)
    return board


def rank_players(
    players: PlayerList, board: Sequence[Card], out: IO[str]
) -> list[Ranking]:
    """Combine the board with each player's hand, rank it and report the result."""
    rankings = []
    for player in players:
        player.sequence = (*board[:BOARD_SIZE], *player.hand)
        out.write(f"\n\n\n\nPRINTANDO A SEQUENCIA AUXILIAR DO {player.name}\n\n\n\n")
        out.write(format_cards(player.sequence))
        player.ranking = evaluate(player.hand, board)
        out.write(ranking_message(player.ranking))
        rankings.append(player.ranking)
    return rankings


def main(argv: Sequence[str] | None = None) -> int:
    """Register players from standard input, deal one round and rank the hands."""
    parser = argparse.ArgumentParser(prog="holdem", description="Deal a round of hold'em.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    args = parser.parse_args(argv)

    out = sys.stdout
    players: PlayerList = PlayerList()
    read_players(players, sys.stdin, out)
    out.write(format_players(players))

    deck = new_deck()
    shuffle(deck, random.Random(args.seed))
    stack: CardStack = CardStack()
    fill_stack(stack, deck)

    out.write("\n\n\n\nPRINTANDO AS MAOS\n\n\n\n")
    deal_hands(players, stack, out)

    out.write("\n\n\n\nPRINTANDO AS CARTAS DA MESA \n\n\n\n")
    board = deal_board(stack, out)

    rank_players(players, board, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())