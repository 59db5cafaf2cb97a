"""
Dictionary - immutable word list shared by every session
"""

import logging
from typing import Dict, Iterable, Iterator, List

from wordlehelper.constants import ALPHABET, WORD_LENGTH
from wordlehelper.errors import InvalidDictionary

logger = logging.getLogger(__name__)


class Dictionary:
    """Ordered, de-duplicated list of fixed-length words with letter frequencies"""

    def __init__(self, words: List[str], word_length: int, letter_counts: Dict[str, int]):
        self._words = tuple(words)
        self._index = {w: i for i, w in enumerate(self._words)}
        self._word_length = word_length
        total = sum(letter_counts.values())
        self._frequency = {c: letter_counts.get(c, 0) / total for c in ALPHABET}

    @classmethod
    def load(cls, words: Iterable[str], word_length: int = WORD_LENGTH) -> "Dictionary":
        """Validate and build a dictionary.

        Words are stripped and lowercased; a repeated word keeps its first
        position. Raises InvalidDictionary for an empty list, a word of the
        wrong length, or a word containing characters outside the alphabet.
        """
        if word_length < 1:
            raise InvalidDictionary(f"Word length must be positive, got {word_length}")

        alphabet = set(ALPHABET)
        seen = set()
        ordered: List[str] = []
        letter_counts: Dict[str, int] = {}

        for n, raw in enumerate(words):
            word = raw.strip().lower()
            if len(word) != word_length:
                raise InvalidDictionary(
                    f"Word #{n} '{raw}' has length {len(word)}, expected {word_length}"
                )
            if not set(word) <= alphabet:
                raise InvalidDictionary(f"Word #{n} '{raw}' contains characters outside a-z")
            if word in seen:
                continue
            seen.add(word)
            ordered.append(word)
            for c in word:
                letter_counts[c] = letter_counts.get(c, 0) + 1

        if not ordered:
            raise InvalidDictionary("Dictionary is empty")

        logger.debug("Loaded %d words of length %d", len(ordered), word_length)
        return cls(ordered, word_length, letter_counts)

    @property
    def word_length(self) -> int:
        return self._word_length

    def all_words(self) -> Iterator[str]:
        return iter(self._words)

    def letter_frequency(self, letter: str) -> float:
        return self._frequency.get(letter.lower(), 0.0)

    def index_of(self, word: str) -> int:
        """Dictionary position of word, or -1 when it is not in the dictionary"""
        return self._index.get(word.lower(), -1)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, length={self._word_length})"
