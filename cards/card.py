from functools import total_ordering

SUITS = (1, 2, 3, 4)
RANKS = tuple(range(1, 14))

# Indexed by code - 1: 1=Clubs, 2=Diamonds, 3=Hearts, 4=Spades
SUIT_SYMBOLS = ("♣", "♦", "♥", "♠")
RANK_SYMBOLS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")


def _is_code(value, codes: tuple[int, ...]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in codes


@total_ordering
class Card:
    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: int, rank: int) -> None:
        if not _is_code(suit, SUITS):
            raise ValueError(f"Invalid suit: {suit!r}")
        if not _is_code(rank, RANKS):
            raise ValueError(f"Invalid rank: {rank!r}")
        self._suit = suit
        self._rank = rank

    @property
    def suit(self) -> int:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    def _key(self) -> tuple[int, int]:
        return (self._suit, self._rank)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{RANK_SYMBOLS[self._rank - 1]}{SUIT_SYMBOLS[self._suit - 1]}"
