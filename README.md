# holdem

A console Texas hold'em table. Each player has a name and a bank of chips. The program shuffles a 52-card deck and deals two hole cards to each player. It then deals five board cards. For each player it classifies the seven cards, which are the board plus that player's hole cards.

## Installing

```
pip install .
```

## Playing

```
holdem
holdem --seed 42
```

The program reads its answers from standard input:

1. It asks for the number of players.
2. For each player it asks for a name and a bank. The name is a single word and the bank is a whole number of chips.

Answers are read as whitespace-separated words, so they can also be piped in on one line:

```
echo "2 Ana 100 Bruno 200" | holdem --seed 1
```

The program then prints the following, in order:

1. The player list.
2. Each player's hole cards.
3. The five board cards.
4. For each player, the seven cards and a line such as `RANKING: TOP 9`.

`--seed` fixes the shuffle, so that a round can be repeated.

Card names are printed in Portuguese, for example `As de Copas` or `Rei de Paus`. Aces count high, with a value of 14.

## Using it as a library

```python
import random

from holdem.cards import fill_stack, new_deck, shuffle
from holdem.hands import evaluate, ranking_message
from holdem.structures import CardStack

cards = new_deck()
shuffle(cards, random.Random(7))
stack = CardStack()
fill_stack(stack, cards)

hole = [stack.pop(), stack.pop()]
board = [stack.pop() for _ in range(5)]
print(ranking_message(evaluate(hole, board)))
```

### Modules

- **`holdem.structures`**
  - `CardStack` is a last-in, first-out pile. `pop` raises `IndexError` when the pile is empty.
  - `PlayerList` keeps players in the order they joined. `remove(player_id)` raises `KeyError` when no player has that id.
- **`holdem.cards`**
  - `Suit` and `Card` describe the cards.
  - `new_deck` builds the 52 cards.
  - `shuffle` is a Fisher–Yates shuffle that takes an optional `random.Random`.
  - `fill_stack` pushes cards onto a stack.
  - `card_name`, `format_card`, `format_cards` and `format_stack` render cards as text.
- **`holdem.counter`**
  - `FrequencyTable` is a fixed-size table that counts small integer keys. Its size defaults to 7. `insert` and `find` raise `IndexError` for a key outside the table.
- **`holdem.hands`**
  - `count_frequencies` turns cards into value and suit counts.
  - `evaluate` returns a `Ranking`.
  - `ranking_message` returns the text that is printed for a ranking.
  - The individual checks work on those counts: `one_pair`, `two_pairs`, `three_of_a_kind`, `four_of_a_kind`, `full_house`, `flush`, `straight` and `straight_flush`.
- **`holdem.players`**
  - `Player` holds a player's name, bank, hole cards and ranking.
  - `read_players` runs the console dialogue.
  - `format_players` renders the player list.
- **`holdem.game`**
  - `deal_hands`, `deal_board` and `rank_players` are the steps of one round.
  - `main` is the `holdem` command.

### How hands are ranked

`Ranking` numbers the categories from 1 (royal flush) to 10 (high card). A lower number is a stronger hand.

`evaluate` checks the categories in this order and returns the first that matches:

1. four of a kind
2. full house
3. two pairs
4. three of a kind
5. one pair
6. straight flush
7. straight
8. flush

If none matches, the hand is a high card.

Because of this order, a hand that holds any pair or set is reported by that pair or set, even when it also holds a straight or a flush.

A straight flush is any hand that has both a straight and five cards of one suit. The same cards do not have to make both.

Straights count the ace only as high, so A-2-3-4-5 is not a straight.

`evaluate` never returns `Ranking.ROYAL_FLUSH`.

## What it does not do

The program plays no betting rounds. Banks are recorded and printed but never change, and every player's bet stays at 0.

The program does not compare hands to pick a winner. It does not break ties between hands of the same category.

It keeps no record of past rounds.

## Running the tests

```
pip install .[test]
pytest
```