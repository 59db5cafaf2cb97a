"""
Errors raised by the solving core. None of them are retried internally;
all of them leave session state exactly as it was before the call.
"""


class WordleHelperError(Exception):
    """Base class for every error the core raises"""


class InvalidDictionary(WordleHelperError, ValueError):
    """Word list is empty, or holds a word of the wrong length or alphabet"""


class MalformedGuess(WordleHelperError, ValueError):
    """Guess does not fit the configured word length or alphabet"""


class IncompleteGuess(WordleHelperError):
    """Input row confirmed while some cell has no letter"""


class NoCandidatesRemain(WordleHelperError):
    """No dictionary word satisfies the accumulated constraints"""
