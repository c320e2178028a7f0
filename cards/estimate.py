"""Monte Carlo estimate of poker hand classification frequencies.

Each trial shuffles a fresh deck, deals HANDS_PER_DECK hands of HAND_SIZE
cards and classifies every hand.
"""

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from cardset import move_cards
from deck import Deck, DECK_SIZE
from hand import Hand
from logging_utils import get_logger
from poker import HandRank

log = get_logger("cards.estimate")

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #
N_TRIALS = 10_000
HAND_SIZE = 7
HANDS_PER_DECK = 7
LOG_EVERY = 1_000


def deal_hands(deck: Deck, n_hands: int, hand_size: int) -> list[Hand]:
    """Deal n_hands hands of hand_size cards each, one hand at a time."""
    if n_hands * hand_size > len(deck):
        raise ValueError(
            f"Cannot deal {n_hands} hands of {hand_size}: deck holds {len(deck)}"
        )
    hands = []
    for i in range(n_hands):
        hand = Hand(f"hand {i + 1}")
        move_cards(deck, hand, hand_size)
        hands.append(hand)
    return hands


def estimate_probabilities(
    n_trials: int = N_TRIALS,
    hand_size: int = HAND_SIZE,
    hands_per_deck: int = HANDS_PER_DECK,
    seed: int | None = None,
) -> np.ndarray:
    """Return relative frequencies indexed by HandRank value (sums to 1)."""
    if n_trials < 1:
        raise ValueError(f"n_trials must be positive, got {n_trials}")
    if hand_size < 1 or hands_per_deck < 1:
        raise ValueError("hand_size and hands_per_deck must be positive")
    if hand_size * hands_per_deck > DECK_SIZE:
        raise ValueError(
            f"{hands_per_deck} hands of {hand_size} need more than {DECK_SIZE} cards"
        )

    # Per-trial deck seeds, all drawn from one generator
    seeds = np.random.default_rng(seed).integers(0, 2**32, size=n_trials)
    counts = np.zeros(len(HandRank), dtype=np.int64)

    for trial in range(n_trials):
        deck = Deck(seed=int(seeds[trial]))
        deck.shuffle()
        for hand in deal_hands(deck, hands_per_deck, hand_size):
            counts[hand.classify()] += 1
        if (trial + 1) % LOG_EVERY == 0:
            log.info("trial %d/%d", trial + 1, n_trials)

    return counts / counts.sum()


def format_table(probabilities: np.ndarray) -> str:
    lines = []
    for hand_rank in HandRank:
        name = hand_rank.name.replace("_", " ").lower()
        lines.append(f"{name:<16} {probabilities[hand_rank] * 100:7.3f}%")
    return "\n".join(lines)


# --------------------------------------------------------------------------- #
# Visualisation
# --------------------------------------------------------------------------- #
def plot_probabilities(probabilities: np.ndarray, path: str) -> None:
    """Horizontal bar chart of the estimated frequencies; saves to path."""
    labels = [r.name.replace("_", " ").title() for r in HandRank]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.barh(range(len(labels)), probabilities * 100)
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels)
    ax.set_xlabel("Frequency (%)")
    ax.set_title("Estimated Poker Hand Frequencies")
    ax.grid(True, axis="x", alpha=0.3)
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close(fig)
    log.info("saved %s", path)
