from typing import Optional

from wordlehelper.classes.Feedback import Feedback
from wordlehelper.constants import ALPHABET
from wordlehelper.errors import MalformedGuess


class LetterCell:
    def __init__(self):
        self.letter: Optional[str] = None
        self.feedback: Feedback = Feedback.absent

    @property
    def is_set(self) -> bool:
        return self.letter is not None

    def set_letter(self, letter: str):
        """Set or overwrite the letter. A new letter always starts out absent."""
        letter = letter.lower()
        if len(letter) != 1 or letter not in ALPHABET:
            raise MalformedGuess(f"'{letter}' is not a single letter a-z")
        self.letter = letter
        self.feedback = Feedback.absent

    def clear(self):
        self.letter = None
        self.feedback = Feedback.absent

    def set_feedback(self, feedback: Feedback):
        if not self.is_set:
            raise MalformedGuess("Cannot colour an empty cell")
        self.feedback = feedback

    def cycle(self) -> Optional[Feedback]:
        """Advance the colour of a populated cell; empty cells ignore clicks"""
        if not self.is_set:
            return None
        self.feedback = self.feedback.next()
        return self.feedback

    def __repr__(self) -> str:
        return f"LetterCell({self.letter!r}, {self.feedback.value})"
