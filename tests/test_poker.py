"""
Unit tests for poker hand classification.
"""

import pytest

from card import Card
from hand import Hand
from poker import (
    HandRank,
    classify,
    has_flush,
    has_full_house,
    has_pair,
    has_straight,
    has_straight_flush,
    has_two_pair,
)

SYMBOLS = {"c": 1, "d": 2, "h": 3, "s": 4}
RANK_CODES = {"A": 1, "T": 10, "J": 11, "Q": 12, "K": 13}


def cards(text):
    """Build cards from 'As Td 7h' style shorthand."""
    result = []
    for token in text.split():
        rank = RANK_CODES.get(token[0]) or int(token[0])
        result.append(Card(SYMBOLS[token[1]], rank))
    return result


class TestClassify:

    @pytest.mark.parametrize("text, expected", [
        ("2c 5d 9h Js Kc", HandRank.HIGH_CARD),
        ("2c 2d 9h Js Kc", HandRank.PAIR),
        ("2c 2d 9h 9s Kc", HandRank.TWO_PAIR),
        ("2c 2d 2h Js Kc", HandRank.THREE_OF_A_KIND),
        ("3c 4d 5h 6s 7c", HandRank.STRAIGHT),
        ("2h 5h 9h Jh Kh", HandRank.FLUSH),
        ("2c 2d 2h Ks Kc", HandRank.FULL_HOUSE),
        ("9c 9d 9h 9s Kc", HandRank.FOUR_OF_A_KIND),
        ("5s 6s 7s 8s 9s", HandRank.STRAIGHT_FLUSH),
        ("Td Jd Qd Kd Ad", HandRank.STRAIGHT_FLUSH),
    ])
    def test_five_card_hands(self, text, expected):
        assert classify(cards(text)) == expected

    def test_best_classification_of_seven_cards(self):
        # Contains a pair, a straight and a flush; flush wins
        hand = cards("2h 2c 3h 4d 5h 6h 9h")
        assert has_pair(hand)
        assert has_straight(hand)
        assert has_flush(hand)
        assert classify(hand) == HandRank.FLUSH

    def test_straight_and_flush_in_different_suits_is_not_straight_flush(self):
        hand = cards("5s 6s 7s 8s 9d 2s")
        assert has_straight(hand)
        assert has_flush(hand)
        assert not has_straight_flush(hand)
        assert classify(hand) == HandRank.FLUSH

    def test_ace_low_and_high_straights(self):
        assert has_straight(cards("Ac 2d 3h 4s 5c"))
        assert has_straight(cards("Tc Jd Qh Ks Ac"))

    def test_no_wraparound_straight(self):
        assert not has_straight(cards("Qc Kd Ah 2s 3c"))

    def test_three_pairs_is_two_pair(self):
        assert classify(cards("2c 2d 5h 5s 9c 9d Kh")) == HandRank.TWO_PAIR

    def test_two_trips_is_full_house(self):
        hand = cards("2c 2d 2h 5s 5c 5d")
        assert has_full_house(hand)
        assert classify(hand) == HandRank.FULL_HOUSE

    def test_four_cards_of_one_suit_is_not_flush(self):
        assert not has_flush(cards("2h 5h 9h Jh"))

    def test_small_and_empty_hands(self):
        assert classify([]) == HandRank.HIGH_CARD
        assert classify(cards("7c 7d")) == HandRank.PAIR
        assert not has_two_pair(cards("7c 7d"))

    def test_hand_classify_veneer(self):
        hand = Hand("p1")
        for card in cards("9c 9d 9h 9s Kc"):
            hand.add_card(card)
        assert hand.classify() == HandRank.FOUR_OF_A_KIND

    def test_ranks_are_ordered(self):
        assert HandRank.HIGH_CARD < HandRank.PAIR < HandRank.STRAIGHT_FLUSH
        assert HandRank.FLUSH > HandRank.STRAIGHT
