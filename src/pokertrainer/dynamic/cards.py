from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.errors import EmptyDeckError, InsufficientCardsError, InvalidCardError

RANKS = "23456789TJQKA"
SUITS = "shdc"  # spades, hearts, diamonds, clubs

RANK_VALUES: dict[str, int] = {rank: idx + 2 for idx, rank in enumerate(RANKS)}

# Symbols sent by older clients map onto the letter suits.
SUIT_ALIASES: dict[str, str] = {"♠": "s", "♥": "h", "♦": "d", "♣": "c"}
SUIT_SYMBOLS: dict[str, str] = {letter: symbol for symbol, letter in SUIT_ALIASES.items()}


@dataclass(frozen=True)
class Card:
    suit: str
    rank: str
    value: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.suit, str) or self.suit not in SUITS or len(self.suit) != 1:
            raise InvalidCardError(f"Invalid card: {self.rank}{self.suit}")
        if not isinstance(self.rank, str) or self.rank not in RANK_VALUES:
            raise InvalidCardError(f"Invalid card: {self.rank}{self.suit}")
        object.__setattr__(self, "value", RANK_VALUES[self.rank])

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


def parse_card(text: str) -> Card:
    """Build a card from ``"As"`` style text (suit symbols are accepted)."""

    token = (text or "").strip()
    if len(token) != 2:
        raise InvalidCardError(f"Invalid card: {text!r}")
    rank, suit = token[0].upper(), token[1]
    suit = SUIT_ALIASES.get(suit, suit.lower())
    return Card(suit=suit, rank=rank)


def full_card_set() -> list[Card]:
    return [Card(suit=suit, rank=rank) for suit in SUITS for rank in RANKS]


class Deck:
    """Ordered 52-card deck; dealing pops from the end of ``cards``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.cards: list[Card] = []
        self.reset()
        self.shuffle()

    def reset(self) -> None:
        self.cards = full_card_set()

    def shuffle(self) -> None:
        # random.shuffle is an in-place Fisher-Yates permutation.
        self._rng.shuffle(self.cards)

    def deal_one(self) -> Card:
        if not self.cards:
            raise EmptyDeckError("Deck is empty. Cannot deal.")
        return self.cards.pop()

    def deal(self, n: int) -> list[Card]:
        if n < 0:
            raise ValueError("Cannot deal a negative number of cards")
        if n > len(self.cards):
            raise InsufficientCardsError(f"Cannot deal {n} cards. Only {len(self.cards)} remaining.")
        return [self.deal_one() for _ in range(n)]

    def remove(self, cards: Iterable[Card]) -> None:
        """Take specific cards out of the live deck; absent cards are ignored."""

        blocked = set(cards)
        self.cards = [card for card in self.cards if card not in blocked]

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards


def card_strings(cards: Iterable[Card]) -> list[str]:
    return [str(card) for card in cards]
