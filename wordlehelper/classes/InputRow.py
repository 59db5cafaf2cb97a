"""
InputRow - the guess currently being typed and coloured in, and the
immutable Guess it turns into on confirmation
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from wordlehelper.classes.Feedback import Feedback, render
from wordlehelper.classes.LetterCell import LetterCell
from wordlehelper.constants import ALPHABET, WORD_LENGTH
from wordlehelper.errors import IncompleteGuess, MalformedGuess


class RowStatus(Enum):
    incomplete = "incomplete"
    ready = "ready"


@dataclass(frozen=True)
class Guess:
    """A confirmed word with one feedback value per letter"""
    letters: Tuple[str, ...]
    feedback: Tuple[Feedback, ...]

    def __post_init__(self):
        if len(self.letters) != len(self.feedback):
            raise MalformedGuess(
                f"{len(self.letters)} letters but {len(self.feedback)} feedback values"
            )
        for letter in self.letters:
            if len(letter) != 1 or letter not in ALPHABET:
                raise MalformedGuess(f"'{letter}' is not a single letter a-z")

    @classmethod
    def from_word(cls, word: str, feedback: Sequence[Feedback]) -> "Guess":
        return cls(tuple(word.lower()), tuple(feedback))

    @property
    def word(self) -> str:
        return "".join(self.letters)

    @property
    def is_solved(self) -> bool:
        return all(fb == Feedback.correct for fb in self.feedback)

    def emoji(self) -> str:
        return "".join(fb.emoji for fb in self.feedback)

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return render(self.word, self.feedback)


class InputRow:
    """Row of cells; letters are typed in, then each cell's colour is clicked
    until it matches what the game showed, then the row is confirmed."""

    def __init__(self, word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self.cells: List[LetterCell] = [LetterCell() for _ in range(word_length)]

    @property
    def status(self) -> RowStatus:
        if all(cell.is_set for cell in self.cells):
            return RowStatus.ready
        return RowStatus.incomplete

    def _cell(self, pos: int) -> LetterCell:
        if not 0 <= pos < self.word_length:
            raise MalformedGuess(f"Position {pos} outside 0..{self.word_length - 1}")
        return self.cells[pos]

    def set_letter(self, pos: int, letter: str):
        self._cell(pos).set_letter(letter)

    def clear_letter(self, pos: int):
        self._cell(pos).clear()

    def set_word(self, word: str):
        """Fill every cell at once; all colours start out absent"""
        word = word.strip().lower()
        if len(word) != self.word_length:
            raise MalformedGuess(f"'{word}' has length {len(word)}, expected {self.word_length}")
        if not set(word) <= set(ALPHABET):
            raise MalformedGuess(f"'{word}' contains characters outside a-z")
        for cell, letter in zip(self.cells, word):
            cell.set_letter(letter)

    def cycle(self, pos: int) -> Optional[Feedback]:
        return self._cell(pos).cycle()

    def set_feedback(self, feedback: Sequence[Feedback]):
        if len(feedback) != self.word_length:
            raise MalformedGuess(
                f"{len(feedback)} feedback values for a row of {self.word_length}"
            )
        if self.status != RowStatus.ready:
            raise IncompleteGuess("Every cell needs a letter before it can be coloured")
        for cell, fb in zip(self.cells, feedback):
            cell.set_feedback(fb)

    def get_feedback(self) -> List[Feedback]:
        return [cell.feedback for cell in self.cells]

    def confirm(self) -> Guess:
        """Freeze the row into a Guess and start a fresh row"""
        if self.status != RowStatus.ready:
            missing = [i for i, cell in enumerate(self.cells) if not cell.is_set]
            raise IncompleteGuess(f"No letter at position(s) {missing}")
        guess = Guess(
            tuple(cell.letter for cell in self.cells),
            tuple(cell.feedback for cell in self.cells),
        )
        self.cells = [LetterCell() for _ in range(self.word_length)]
        return guess

    def __str__(self) -> str:
        word = "".join(cell.letter or "_" for cell in self.cells)
        return render(word, self.get_feedback())
