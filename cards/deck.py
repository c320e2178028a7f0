import random

from card import Card, SUITS, RANKS
from cardset import CardSet

DECK_SIZE = len(SUITS) * len(RANKS)  # 52


class Deck(CardSet):
    """All 52 cards, built in canonical (suit, rank) order and not shuffled."""

    def __init__(self, seed: int | None = None) -> None:
        self._cards: list[Card] = [Card(suit, rank) for suit in SUITS for rank in RANKS]
        self._rng = random.Random(seed)

    def cards(self) -> list[Card]:
        return list(self._cards)

    def remove_top(self) -> Card:
        if not self._cards:
            raise RuntimeError("Deck is empty")
        return self._cards.pop()

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def deal(self) -> Card:
        return self.remove_top()

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def sort(self) -> None:
        self._cards.sort()

    def cards_remaining(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.display()})"
