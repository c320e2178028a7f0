from cardset import move_cards
from deck import Deck
from estimate import deal_hands, estimate_probabilities, format_table
from hand import Hand
from logging_utils import get_logger, setup_logging
from markov import MarkovAnalysis

log = get_logger("cards.demo")

N_HANDS = 4
HAND_SIZE = 5
N_TRIALS = 2_000
N_WORDS = 30

PASSAGE = """
Half a bee, philosophically, must ipso facto half not be. But half the bee
has got to be, vis a vis its entity. D'you see? But can a bee be said to be
or not to be an entire bee, when half the bee is not a bee, due to some
ancient injury?
"""


def main() -> None:
    setup_logging()

    deck = Deck()
    print(f"New deck ({len(deck)} cards):\n{deck.display()}\n")

    top = Hand("top")
    move_cards(deck, top, 1)
    print(f"Top card: {top.display()}, {len(deck)} left\n")
    move_cards(top, deck, 1)

    deck.shuffle()
    for hand in deal_hands(deck, N_HANDS, HAND_SIZE):
        name = hand.classify().name.replace("_", " ").lower()
        print(f"{hand.label}: {hand.display()}  ({name})")

    deck.sort()
    print(f"\nRemaining deck, sorted ({len(deck)} cards):\n{deck.display()}\n")

    print(f"Estimated 7-card hand frequencies over {N_TRIALS:,} decks:")
    print(format_table(estimate_probabilities(n_trials=N_TRIALS)))

    analysis = MarkovAnalysis(order=2)
    analysis.process_text(PASSAGE)
    log.debug("markov map holds %d prefixes", len(analysis))
    print(f"\nMarkov text:\n{analysis.random_text(N_WORDS)}")


if __name__ == "__main__":
    main()
