"""
Suggestions - ranks guesses by expected information gain

Every guess in the pool splits the remaining candidates into groups by the
feedback pattern it would produce. The entropy of that split is the expected
number of bits the guess reveals. Letter diversity, letter frequency and
vowel/consonant balance break near-ties, and a small bonus goes to guesses
that could themselves be the answer.
"""

import logging
import math
import os
import time
from collections import Counter
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Feedback import pattern_code
from wordlehelper.constants import (
    ALPHABET,
    BALANCE_WEIGHT,
    CANDIDATE_WEIGHT,
    DIVERSITY_WEIGHT,
    ENTROPY_WEIGHT,
    FREQUENCY_WEIGHT,
    MAX_WORKERS,
    PARALLEL_THRESHOLD,
    VOWEL_TARGET_RATIO,
    VOWELS,
)
from wordlehelper.errors import MalformedGuess, NoCandidatesRemain

logger = logging.getLogger(__name__)

CHUNKS_PER_WORKER = 4


@dataclass(frozen=True)
class ScoringWeights:
    entropy: float = ENTROPY_WEIGHT
    diversity: float = DIVERSITY_WEIGHT
    frequency: float = FREQUENCY_WEIGHT
    balance: float = BALANCE_WEIGHT
    candidate: float = CANDIDATE_WEIGHT
    vowel_target_ratio: float = VOWEL_TARGET_RATIO


@dataclass(frozen=True)
class SuggestionScore:
    word: str
    entropy: float
    diversity: float
    frequency: float
    balance: float
    is_candidate: bool
    total: float


def entropy(guess: str, candidates: Sequence[str]) -> float:
    """Expected information (bits) from guessing guess against candidates"""
    n = len(candidates)
    if n <= 1:
        return 0.0
    groups = Counter(pattern_code(guess, target) for target in candidates)
    return -sum((c / n) * math.log2(c / n) for c in groups.values())


def diversity(word: str) -> float:
    return len(set(word)) / len(word)


def frequency(word: str, letter_frequency: Dict[str, float]) -> float:
    letters = sorted(set(word))
    return sum(letter_frequency.get(c, 0.0) for c in letters) / len(letters)


def vowel_balance(word: str, target_ratio: float = VOWEL_TARGET_RATIO) -> float:
    """1.0 at the target vowel ratio, falling linearly to 0.0 at whichever
    extreme (all vowels or no vowels) lies farthest from it"""
    ratio = sum(1 for c in word if c in VOWELS) / len(word)
    spread = max(target_ratio, 1.0 - target_ratio)
    return max(0.0, 1.0 - abs(ratio - target_ratio) / spread)


def score_word(
    guess: str,
    candidates: Sequence[str],
    candidate_set: frozenset,
    letter_frequency: Dict[str, float],
    weights: ScoringWeights,
) -> SuggestionScore:
    e = entropy(guess, candidates)
    d = diversity(guess)
    f = frequency(guess, letter_frequency)
    b = vowel_balance(guess, weights.vowel_target_ratio)
    is_candidate = guess in candidate_set
    total = (
        weights.entropy * e
        + weights.diversity * d
        + weights.frequency * f
        + weights.balance * b
        + weights.candidate * is_candidate
    )
    return SuggestionScore(guess, e, d, f, b, is_candidate, total)


def _score_chunk(args) -> List[SuggestionScore]:
    """Pool worker: scores one slice of the guess pool. Inputs are read-only
    copies, so workers share nothing."""
    chunk, candidates, letter_frequency, weights = args
    candidate_set = frozenset(candidates)
    return [score_word(g, candidates, candidate_set, letter_frequency, weights) for g in chunk]


def _normalise_pool(guess_pool: Iterable[str], word_length: int) -> List[str]:
    alphabet = set(ALPHABET)
    pool: List[str] = []
    seen = set()
    for raw in guess_pool:
        word = raw.strip().lower()
        if len(word) != word_length or not set(word) <= alphabet:
            raise MalformedGuess(f"Pool word '{raw}' is not a {word_length}-letter word")
        if word not in seen:
            seen.add(word)
            pool.append(word)
    return pool


def _chunks(words: List[str], size: int) -> List[List[str]]:
    return [words[i:i + size] for i in range(0, len(words), size)]


def _resolve_workers(workers: Optional[int]) -> int:
    if workers is None:
        return min(MAX_WORKERS, os.cpu_count() or 1)
    return max(1, workers)


def _score_in_process(pool, candidates, letter_frequency, weights, deadline):
    candidate_set = frozenset(candidates)
    scores: List[SuggestionScore] = []
    for guess in pool:
        scores.append(score_word(guess, candidates, candidate_set, letter_frequency, weights))
        if deadline is not None and time.monotonic() >= deadline and len(scores) < len(pool):
            logger.warning("Ranking cut off after %d of %d guesses", len(scores), len(pool))
            break
    return scores


def _score_in_pool(pool, candidates, letter_frequency, weights, deadline, workers):
    size = max(1, math.ceil(len(pool) / (workers * CHUNKS_PER_WORKER)))
    chunks = _chunks(pool, size)
    scores: List[SuggestionScore] = []
    executor = ProcessPoolExecutor(max_workers=workers)
    truncated = False
    try:
        pending = {
            executor.submit(_score_chunk, (chunk, candidates, letter_frequency, weights))
            for chunk in chunks
        }
        while pending:
            timeout = None if deadline is None else max(0.0, deadline - time.monotonic())
            done, pending = wait(pending, timeout=timeout, return_when=FIRST_COMPLETED)
            for future in done:
                scores.extend(future.result())
            if pending and deadline is not None and time.monotonic() >= deadline:
                truncated = True
                break
    finally:
        executor.shutdown(wait=not truncated, cancel_futures=True)

    if truncated and not scores:
        # Nothing came back in time; score the first guess here so a
        # truncated ranking still has a best guess
        scores = _score_in_process(pool[:1], candidates, letter_frequency, weights, None)
    if truncated:
        logger.warning("Ranking cut off after %d of %d guesses", len(scores), len(pool))
    logger.debug("Scored %d guesses in %d chunks on %d workers", len(scores), len(chunks), workers)
    return scores


def rank(
    candidates: Sequence[str],
    guess_pool: Iterable[str],
    dictionary: Dictionary,
    weights: Optional[ScoringWeights] = None,
    workers: Optional[int] = None,
    time_limit: Optional[float] = None,
    limit: Optional[int] = None,
) -> List[Tuple[str, SuggestionScore]]:
    """
    Score every guess in guess_pool against candidates, best first.

    Ties go to the word that comes first in the dictionary, then to pool order
    for words the dictionary does not hold. With a single candidate left,
    that candidate is the only suggestion. With a time_limit (seconds) the
    ranking may cover only part of the pool; it is never an error.

    Raises NoCandidatesRemain when candidates is empty.
    """
    weights = weights or ScoringWeights()
    candidates = tuple(candidates)
    if not candidates:
        raise NoCandidatesRemain("No word is consistent with the feedback given so far")

    letter_frequency = {c: dictionary.letter_frequency(c) for c in ALPHABET}

    if len(candidates) == 1:
        only = candidates[0]
        return [(only, score_word(only, candidates, frozenset(candidates), letter_frequency, weights))]

    pool = _normalise_pool(guess_pool, dictionary.word_length)
    deadline = None if time_limit is None else time.monotonic() + time_limit
    workers = _resolve_workers(workers)

    if workers > 1 and len(pool) * len(candidates) >= PARALLEL_THRESHOLD:
        scores = _score_in_pool(pool, candidates, letter_frequency, weights, deadline, workers)
    else:
        scores = _score_in_process(pool, candidates, letter_frequency, weights, deadline)

    position = {w: i for i, w in enumerate(pool)}
    offset = len(dictionary)

    def order(s: SuggestionScore):
        index = dictionary.index_of(s.word)
        return (-s.total, index if index >= 0 else offset + position[s.word])

    scores.sort(key=order)
    if limit is not None:
        scores = scores[:limit]
    return [(s.word, s) for s in scores]
