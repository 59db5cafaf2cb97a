"""
Constraints - everything the feedback so far says about the answer
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Set

from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Feedback import Feedback
from wordlehelper.classes.InputRow import Guess
from wordlehelper.constants import WORD_LENGTH
from wordlehelper.errors import MalformedGuess

logger = logging.getLogger(__name__)


@dataclass
class Constraints:
    """Tracks all known constraints from confirmed guesses"""
    word_length: int = WORD_LENGTH
    fixed: Dict[int, str] = field(default_factory=dict)
    excluded_at: Dict[int, Set[str]] = field(default_factory=dict)
    required_min_count: Dict[str, int] = field(default_factory=dict)
    globally_excluded: Set[str] = field(default_factory=set)
    max_count: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        for i in range(self.word_length):
            self.excluded_at.setdefault(i, set())

    def update(self, guess: Guess):
        """Fold one confirmed guess in. Correct, then Present, then Absent:
        an Absent letter can only be judged once the same guess's Correct and
        Present copies of it have been counted."""
        if len(guess) != self.word_length:
            raise MalformedGuess(
                f"Guess '{guess.word}' has length {len(guess)}, expected {self.word_length}"
            )

        seen: Dict[str, int] = {}
        pairs = list(enumerate(zip(guess.letters, guess.feedback)))

        for i, (letter, fb) in pairs:
            if fb == Feedback.correct:
                self.fixed[i] = letter
                seen[letter] = seen.get(letter, 0) + 1

        for i, (letter, fb) in pairs:
            if fb == Feedback.present:
                self.excluded_at[i].add(letter)
                seen[letter] = seen.get(letter, 0) + 1

        for letter, count in seen.items():
            self.required_min_count[letter] = max(self.required_min_count.get(letter, 0), count)

        for i, (letter, fb) in pairs:
            if fb != Feedback.absent:
                continue
            self.excluded_at[i].add(letter)
            if seen.get(letter, 0) > 0:
                # The grey copy means the answer holds exactly `seen` of them
                self.max_count[letter] = min(self.max_count.get(letter, seen[letter]), seen[letter])
            else:
                self.globally_excluded.add(letter)

    def matches(self, word: str) -> bool:
        """Check if word satisfies all constraints"""
        word = word.lower()
        if len(word) != self.word_length:
            return False

        for pos, letter in self.fixed.items():
            if word[pos] != letter:
                return False

        for pos, excluded in self.excluded_at.items():
            if word[pos] in excluded:
                return False

        counts = Counter(word)

        # A letter later shown to be in the word overrides an earlier exclusion
        for letter in self.globally_excluded:
            if letter not in self.required_min_count and counts[letter]:
                return False

        for letter, min_c in self.required_min_count.items():
            if counts[letter] < min_c:
                return False

        for letter, max_c in self.max_count.items():
            if counts[letter] > max_c:
                return False

        return True

    def apply(self, dictionary: Dictionary) -> List[str]:
        return filter_candidates(dictionary, self)

    def reset(self):
        self.fixed.clear()
        self.excluded_at = {i: set() for i in range(self.word_length)}
        self.required_min_count.clear()
        self.globally_excluded.clear()
        self.max_count.clear()

    @property
    def is_empty(self) -> bool:
        return not (
            self.fixed
            or any(self.excluded_at.values())
            or self.required_min_count
            or self.globally_excluded
            or self.max_count
        )


def filter_candidates(dictionary: Dictionary, constraints: Constraints) -> List[str]:
    """Words still consistent with constraints, in dictionary order"""
    if dictionary.word_length != constraints.word_length:
        raise MalformedGuess(
            f"Constraints for length {constraints.word_length} applied to a "
            f"dictionary of length {dictionary.word_length}"
        )
    candidates = [w for w in dictionary.all_words() if constraints.matches(w)]
    logger.debug("%d of %d words remain", len(candidates), len(dictionary))
    return candidates
