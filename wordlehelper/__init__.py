"""Wordle Helper - constraint tracking and entropy-ranked guess suggestions"""

from wordlehelper.classes.Constraints import Constraints, filter_candidates
from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Feedback import Feedback, pattern_code, simulate
from wordlehelper.classes.InputRow import Guess, InputRow, RowStatus
from wordlehelper.classes.LetterCell import LetterCell
from wordlehelper.classes.Session import Session, Status
from wordlehelper.classes.Suggestions import ScoringWeights, SuggestionScore, rank
from wordlehelper.errors import (
    IncompleteGuess,
    InvalidDictionary,
    MalformedGuess,
    NoCandidatesRemain,
    WordleHelperError,
)

__version__ = "0.1.0"
