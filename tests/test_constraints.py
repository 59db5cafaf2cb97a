import pytest

from wordlehelper.classes.Constraints import Constraints, filter_candidates
from wordlehelper.classes.Feedback import Feedback, simulate
from wordlehelper.classes.InputRow import Guess
from wordlehelper.errors import MalformedGuess
from wordlehelper.words import WORDS

C, P, A = Feedback.correct, Feedback.present, Feedback.absent


def fold(*pairs):
    constraints = Constraints()
    for guess, target in pairs:
        constraints.update(Guess.from_word(guess, simulate(guess, target)))
    return constraints


def test_present_and_absent_copies_of_one_letter():
    c = fold(("speed", "abide"))

    assert c.fixed == {}
    assert c.excluded_at == {0: {"s"}, 1: {"p"}, 2: {"e"}, 3: {"e"}, 4: {"d"}}
    assert c.required_min_count == {"e": 1, "d": 1}
    assert c.globally_excluded == {"s", "p"}
    assert c.max_count == {"e": 1}

    assert c.matches("abide")
    assert c.matches("medic")
    assert not c.matches("eerie")   # too many e
    assert not c.matches("olden")   # e where it was grey
    assert not c.matches("crane")   # no d


def test_correct_copies_count_towards_minimum():
    c = fold(("geese", "these"))

    assert c.fixed == {2: "e", 3: "s", 4: "e"}
    assert c.required_min_count == {"e": 2, "s": 1}
    assert c.max_count == {"e": 2}
    assert c.globally_excluded == {"g"}
    assert c.matches("these")
    assert not c.matches("there")


def test_required_letter_overrides_earlier_exclusion():
    c = Constraints()
    c.update(Guess.from_word("crane", [A, A, A, A, A]))
    c.update(Guess.from_word("about", [P, A, A, A, A]))

    assert "a" in c.globally_excluded
    assert c.required_min_count["a"] == 1
    assert c.matches("salsa")
    assert not c.matches("llama")   # a where crane showed it grey


def test_wrong_length_guess_is_rejected_without_change():
    c = Constraints()
    with pytest.raises(MalformedGuess):
        c.update(Guess.from_word("spee", [A, A, A, A]))
    assert c.is_empty


def test_reset_clears_everything():
    c = fold(("speed", "abide"))
    c.reset()
    assert c.is_empty
    assert c == Constraints()


def test_filter_keeps_dictionary_order(dictionary):
    c = fold(("slate", "erase"))
    result = filter_candidates(dictionary, c)
    kept = set(result)
    assert result == [w for w in dictionary.all_words() if w in kept]
    assert "erase" in result
    assert c.apply(dictionary) == result


@pytest.mark.parametrize("target", WORDS[::37])
def test_candidates_shrink_and_keep_the_answer(dictionary, target):
    c = Constraints()
    candidates = list(dictionary.all_words())
    for guess in ("slate", "crony", "dumpy", "wheel"):
        c.update(Guess.from_word(guess, simulate(guess, target)))
        narrowed = filter_candidates(dictionary, c)
        assert len(narrowed) <= len(candidates)
        assert target in narrowed
        candidates = narrowed


def test_contradictory_feedback_leaves_nothing(dictionary):
    c = Constraints()
    c.update(Guess.from_word("apple", [C, A, A, A, A]))
    c.update(Guess.from_word("apple", [A, A, A, A, A]))
    assert filter_candidates(dictionary, c) == []
