"""Poker hand classification.

Predicates answer "do these cards contain ...", so they work for hands of any
size; classify() returns the best classification present.
"""

from collections import Counter
from collections.abc import Iterable
from enum import IntEnum

from card import Card

STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5
ACE = 1
ACE_HIGH = 14


class HandRank(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


def _rank_counts(cards: Iterable[Card]) -> list[int]:
    """Multiplicities of each rank, largest first."""
    return sorted(Counter(c.rank for c in cards).values(), reverse=True)


def _suit_groups(cards: Iterable[Card]) -> dict[int, list[Card]]:
    groups: dict[int, list[Card]] = {}
    for card in cards:
        groups.setdefault(card.suit, []).append(card)
    return groups


def has_pair(cards: Iterable[Card]) -> bool:
    counts = _rank_counts(cards)
    return bool(counts) and counts[0] >= 2


def has_two_pair(cards: Iterable[Card]) -> bool:
    counts = _rank_counts(cards)
    return len(counts) >= 2 and counts[1] >= 2


def has_three_of_a_kind(cards: Iterable[Card]) -> bool:
    counts = _rank_counts(cards)
    return bool(counts) and counts[0] >= 3


def has_four_of_a_kind(cards: Iterable[Card]) -> bool:
    counts = _rank_counts(cards)
    return bool(counts) and counts[0] >= 4


def has_full_house(cards: Iterable[Card]) -> bool:
    counts = _rank_counts(cards)
    return len(counts) >= 2 and counts[0] >= 3 and counts[1] >= 2


def has_flush(cards: Iterable[Card]) -> bool:
    return any(len(group) >= FLUSH_LENGTH for group in _suit_groups(cards).values())


def has_straight(cards: Iterable[Card]) -> bool:
    ranks = {c.rank for c in cards}
    if ACE in ranks:
        ranks.add(ACE_HIGH)
    run = 0
    for rank in range(ACE, ACE_HIGH + 1):
        run = run + 1 if rank in ranks else 0
        if run >= STRAIGHT_LENGTH:
            return True
    return False


def has_straight_flush(cards: Iterable[Card]) -> bool:
    return any(
        len(group) >= STRAIGHT_LENGTH and has_straight(group)
        for group in _suit_groups(cards).values()
    )


# Checked best first
_PREDICATES = (
    (HandRank.STRAIGHT_FLUSH, has_straight_flush),
    (HandRank.FOUR_OF_A_KIND, has_four_of_a_kind),
    (HandRank.FULL_HOUSE, has_full_house),
    (HandRank.FLUSH, has_flush),
    (HandRank.STRAIGHT, has_straight),
    (HandRank.THREE_OF_A_KIND, has_three_of_a_kind),
    (HandRank.TWO_PAIR, has_two_pair),
    (HandRank.PAIR, has_pair),
)


def classify(cards: Iterable[Card]) -> HandRank:
    """Return the highest-value classification the cards contain."""
    cards = list(cards)
    for hand_rank, predicate in _PREDICATES:
        if predicate(cards):
            return hand_rank
    return HandRank.HIGH_CARD
