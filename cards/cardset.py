from abc import ABC, abstractmethod
from collections.abc import Iterator

from card import Card
from logging_utils import get_logger

log = get_logger("cards.cardset")


class CardView:
    """Lazy, restartable rendering of a card set's cards in current order."""

    def __init__(self, cardset: "CardSet") -> None:
        self._cardset = cardset

    def __iter__(self) -> Iterator[str]:
        for card in self._cardset.cards():
            yield repr(card)

    def __len__(self) -> int:
        return len(self._cardset)

    def __str__(self) -> str:
        return " ".join(self)


class CardSet(ABC):
    """Interface shared by Deck and Hand.

    Each variant owns its card list; the top of the set is the last card.
    """

    @abstractmethod
    def cards(self) -> list[Card]:
        """Return a copy of the contained cards, in order."""

    @abstractmethod
    def remove_top(self) -> Card:
        """Remove and return the last card. Raises RuntimeError when empty."""

    @abstractmethod
    def add_card(self, card: Card) -> None:
        """Append a card."""

    def __len__(self) -> int:
        return len(self.cards())

    def display(self) -> CardView:
        return CardView(self)


def move_cards(source: CardSet, dest: CardSet, n: int) -> None:
    """Move n cards from the top of source onto dest, one at a time.

    The first card removed from source is the first one dest receives.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"Card count must be an int, got {type(n).__name__}")
    available = len(source)
    if not 1 <= n <= available:
        raise ValueError(f"Cannot move {n} cards: source holds {available}")
    for _ in range(n):
        dest.add_card(source.remove_top())
    log.debug("moved %d cards, %d left in source", n, available - n)
