from enum import Enum
from typing import List, Sequence, Tuple

from wordlehelper.errors import MalformedGuess


class Feedback(Enum):
    absent = "absent"
    present = "present"
    correct = "correct"

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    def next(self) -> "Feedback":
        """Next colour in the click cycle: absent -> present -> correct -> absent"""
        return _CYCLE[self]


_EMOJI = {
    Feedback.absent: "⬛",
    Feedback.present: "🟨",
    Feedback.correct: "🟩",
}

_CYCLE = {
    Feedback.absent: Feedback.present,
    Feedback.present: Feedback.correct,
    Feedback.correct: Feedback.absent,
}

# Digit of each feedback value in a base-3 pattern code
_DIGITS = (Feedback.absent, Feedback.present, Feedback.correct)
ABSENT, PRESENT, CORRECT = 0, 1, 2


def _score(guess: str, target: str) -> List[int]:
    """Per-position digits for guess against target"""
    if len(guess) != len(target):
        raise MalformedGuess(f"Cannot compare '{guess}' with '{target}': lengths differ")

    result = [ABSENT] * len(guess)
    unmatched = {}

    # First pass: greens. Every target letter not matched in place stays
    # available for a yellow.
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = CORRECT
        else:
            unmatched[t] = unmatched.get(t, 0) + 1

    # Second pass: yellows, left to right, each one using up a target letter
    for i, g in enumerate(guess):
        if result[i] == CORRECT:
            continue
        if unmatched.get(g, 0) > 0:
            result[i] = PRESENT
            unmatched[g] -= 1

    return result


def simulate(guess: str, target: str) -> Tuple[Feedback, ...]:
    """Feedback the game would give for guess if the answer were target"""
    return tuple(_DIGITS[d] for d in _score(guess.lower(), target.lower()))


def pattern_code(guess: str, target: str) -> int:
    """Same pattern as simulate(), packed into a base-3 integer.

    Used as a dictionary key when partitioning candidates, where building
    enum tuples for every pair is the dominant cost. Expects lowercase input.
    """
    code = 0
    for d in _score(guess, target):
        code = code * 3 + d
    return code


def render(word: str, feedback: Sequence[Feedback]) -> str:
    """One-line 'CRANE 🟩⬛⬛🟨⬛' rendering"""
    return f"{word.upper()} {''.join(fb.emoji for fb in feedback)}"
