from card import Card
from cardset import CardSet
from poker import HandRank, classify


class Hand(CardSet):
    def __init__(self, label: str = "") -> None:
        self._label = label
        self._cards: list[Card] = []

    @property
    def label(self) -> str:
        return self._label

    def cards(self) -> list[Card]:
        return list(self._cards)

    def remove_top(self) -> Card:
        if not self._cards:
            raise RuntimeError(f"Hand {self._label!r} is empty")
        return self._cards.pop()

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def classify(self) -> HandRank:
        return classify(self._cards)

    def __repr__(self) -> str:
        return f"Hand({self._label!r}: {self.display()})"
