"""Markov analysis of text.

Every analysis owns its own prefix map and prefix window, so independent
analyses can be built side by side.
"""

import random

from logging_utils import get_logger

log = get_logger("cards.markov")

START_MARKER = "*** START OF"
END_MARKER = "*** END OF"


class MarkovAnalysis:
    """Maps each run of `order` consecutive words to the words that follow it.

    Args:
        order: number of words in a prefix.
        seed:  seed for the generator used by random_text().
    """

    def __init__(self, order: int = 2, seed: int | None = None) -> None:
        if order < 1:
            raise ValueError(f"order must be at least 1, got {order}")
        self._order = order
        self._rng = random.Random(seed)
        self._suffix_map: dict[tuple[str, ...], list[str]] = {}
        self._window: tuple[str, ...] = ()

    @property
    def order(self) -> int:
        return self._order

    # ---------------------------------------------------------------------- #
    # Building the map
    # ---------------------------------------------------------------------- #

    def process_word(self, word: str) -> None:
        if len(self._window) < self._order:
            self._window += (word,)
            return
        # Duplicates kept: suffix frequency weights the choice in random_text()
        self._suffix_map.setdefault(self._window, []).append(word)
        self._window = self._window[1:] + (word,)

    def process_text(self, text: str) -> None:
        for word in text.split():
            self.process_word(word)

    def process_file(self, path, skip_header: bool = True) -> None:
        """Feed every word of a UTF-8 text file.

        With skip_header, a Project Gutenberg preamble (up to the START marker
        line) and trailer (from the END marker line) are ignored.
        """
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()

        if skip_header:
            for i, line in enumerate(lines):
                if line.startswith(START_MARKER):
                    lines = lines[i + 1:]
                    break
            for i, line in enumerate(lines):
                if line.startswith(END_MARKER):
                    lines = lines[:i]
                    break

        for line in lines:
            self.process_text(line)
        log.debug("processed %s: %d prefixes", path, len(self._suffix_map))

    # ---------------------------------------------------------------------- #
    # Queries
    # ---------------------------------------------------------------------- #

    def prefixes(self) -> list[tuple[str, ...]]:
        return list(self._suffix_map)

    def suffixes(self, prefix: tuple[str, ...]) -> list[str]:
        return list(self._suffix_map.get(tuple(prefix), []))

    def __len__(self) -> int:
        return len(self._suffix_map)

    def random_text(self, n: int = 100) -> str:
        """Generate n words by walking the chain from a random prefix.

        When the walk reaches a prefix with no recorded suffix it restarts
        from another random prefix.
        """
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        if not self._suffix_map:
            raise ValueError("No prefixes recorded; process some text first")

        starts = list(self._suffix_map)
        prefix = self._rng.choice(starts)
        words = []
        while len(words) < n:
            suffixes = self._suffix_map.get(prefix)
            if not suffixes:
                prefix = self._rng.choice(starts)
                continue
            word = self._rng.choice(suffixes)
            words.append(word)
            prefix = prefix[1:] + (word,)
        return " ".join(words)
