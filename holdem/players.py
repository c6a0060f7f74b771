"""Players at the table and the console dialogue that registers them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator

from holdem.cards import Card
from holdem.hands import Ranking
from holdem.structures import PlayerList


@dataclass
class Player:
    """A seat at the table: name, chips, the two hole cards and the final ranking."""

    name: str
    bank: int
    id: int = 0
    bet: int = 0
    ranking: Ranking | None = None
    hand: tuple[Card, ...] = ()
    sequence: tuple[Card, ...] = ()


def _tokens(stream: IO[str]) -> Iterator[str]:
    """Yield whitespace-separated words from ``stream``, a line at a time."""
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended while reading players") from None


def _next_int(tokens: Iterator[str]) -> int:
    word = _next_token(tokens)
    try:
        return int(word)
    except ValueError:
        raise ValueError(f"expected a whole number, got {word!r}") from None


def _prompt(stdout: IO[str], text: str) -> None:
    stdout.write(text)
    stdout.flush()


def read_players(players: PlayerList, stdin: IO[str], stdout: IO[str]) -> None:
    """Ask for the number of players, then each one's name and bank, and add them."""
    tokens = _tokens(stdin)
    _prompt(stdout, "\nEntre com o total de jogadores: ")
    total = _next_int(tokens)
    stdout.write("\n")

    for player_id in range(1, total + 1):
        _prompt(stdout, "Entre com o seu nome: ")
        name = _next_token(tokens)
        _prompt(stdout, "Entre com a sua banca: ")
        bank = _next_int(tokens)
        players.append(Player(name=name, bank=bank, id=player_id))
        stdout.write("\n")


def format_players(players: PlayerList) -> str:
    """Render every player's name and bank, followed by a blank line."""
    lines = "".join(
        f"\nJOGADOR:\t{player.name}\nBANCA:\t\t{player.bank} FICHAS\n"
        for player in players
    )
    return lines + "\n"