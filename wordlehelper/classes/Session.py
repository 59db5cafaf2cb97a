"""
Session - one puzzle-solving attempt: input row, constraints, candidates
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from wordlehelper.classes.Constraints import Constraints, filter_candidates
from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Feedback import Feedback
from wordlehelper.classes.InputRow import Guess, InputRow
from wordlehelper.classes.Suggestions import ScoringWeights, SuggestionScore, rank
from wordlehelper.errors import MalformedGuess, NoCandidatesRemain

logger = logging.getLogger(__name__)


class Status(Enum):
    playing = "playing"
    solved = "solved"


class Session:
    """Owns the state of one game; the dictionary is shared and never changed"""

    def __init__(
        self,
        dictionary: Dictionary,
        weights: Optional[ScoringWeights] = None,
        workers: Optional[int] = None,
    ):
        self.dictionary = dictionary
        self.weights = weights or ScoringWeights()
        self.workers = workers

        self.constraints = Constraints(word_length=dictionary.word_length)
        self.row = InputRow(dictionary.word_length)
        self.candidates: List[str] = list(dictionary.all_words())
        self.guesses: List[Guess] = []
        self.status = Status.playing
        self._suggestions: Dict[tuple, List[Tuple[str, SuggestionScore]]] = {}

    def reset(self):
        """Reset session for a new puzzle"""
        self.constraints.reset()
        self.row = InputRow(self.dictionary.word_length)
        self.candidates = list(self.dictionary.all_words())
        self.guesses = []
        self.status = Status.playing
        self._suggestions.clear()
        logger.debug("Session reset, %d candidates", len(self.candidates))

    # -- input row ---------------------------------------------------------

    def enter_word(self, word: str):
        self.row.set_word(word)

    def set_letter(self, pos: int, letter: str):
        self.row.set_letter(pos, letter)

    def clear_letter(self, pos: int):
        self.row.clear_letter(pos)

    def cycle_feedback(self, pos: int) -> Optional[Feedback]:
        return self.row.cycle(pos)

    def confirm_row(self) -> Guess:
        """Confirm the input row and fold it into the constraints.

        Raises IncompleteGuess, leaving the row untouched, if a cell is empty.
        """
        guess = self.row.confirm()
        self.apply_guess(guess)
        return guess

    # -- solving -----------------------------------------------------------

    def apply_guess(self, guess: Guess):
        if len(guess) != self.dictionary.word_length:
            raise MalformedGuess(
                f"Guess '{guess.word}' has length {len(guess)}, "
                f"expected {self.dictionary.word_length}"
            )
        before = len(self.candidates)
        self.constraints.update(guess)
        self.candidates = filter_candidates(self.dictionary, self.constraints)
        self.guesses.append(guess)
        self._suggestions.clear()

        if guess.is_solved:
            self.status = Status.solved

        logger.info("Guess %d: %s  (%d -> %d candidates)",
                    len(self.guesses), guess, before, len(self.candidates))
        if not self.candidates:
            logger.warning("No candidates left after: %s",
                           "; ".join(str(g) for g in self.guesses))

    def suggestions(
        self,
        pool: Optional[Iterable[str]] = None,
        hard_mode: bool = False,
        limit: Optional[int] = None,
        time_limit: Optional[float] = None,
    ) -> List[Tuple[str, SuggestionScore]]:
        """Ranked next guesses, best first.

        The pool defaults to the whole dictionary, or to the remaining
        candidates in hard mode. Complete rankings are cached until the next
        confirmed guess. Raises NoCandidatesRemain if the feedback entered so
        far contradicts every word in the dictionary.
        """
        if not self.candidates:
            raise NoCandidatesRemain(
                f"No word fits {len(self.guesses)} guess(es); check the colours entered"
            )

        if pool is not None:
            pool = list(pool)
        elif hard_mode:
            pool = self.candidates
        else:
            pool = list(self.dictionary.all_words())

        key = (tuple(pool), limit)
        if key in self._suggestions:
            return list(self._suggestions[key])

        ranked = rank(
            self.candidates,
            pool,
            self.dictionary,
            weights=self.weights,
            workers=self.workers,
            time_limit=time_limit,
            limit=limit,
        )
        # A ranking cut short by the time limit is not worth reusing
        if time_limit is None:
            self._suggestions[key] = list(ranked)
        return ranked

    @property
    def solved(self) -> bool:
        return self.status == Status.solved
