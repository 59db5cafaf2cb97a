import pytest

from wordlehelper.classes.Feedback import Feedback, pattern_code, render, simulate
from wordlehelper.errors import MalformedGuess

C, P, A = Feedback.correct, Feedback.present, Feedback.absent


@pytest.mark.parametrize("guess, target, expected", [
    ("speed", "erase", (P, A, P, P, A)),
    ("speed", "steel", (C, A, C, C, A)),
    ("speed", "abide", (A, A, P, A, P)),
    ("llama", "hello", (P, P, A, A, A)),
    ("geese", "these", (A, A, C, C, C)),
    ("crane", "crane", (C, C, C, C, C)),
])
def test_simulate_handles_repeated_letters(guess, target, expected):
    assert simulate(guess, target) == expected


def test_simulate_ignores_case():
    assert simulate("SPEED", "Erase") == simulate("speed", "erase")


def test_simulate_rejects_length_mismatch():
    with pytest.raises(MalformedGuess):
        simulate("speed", "eras")


def test_pattern_code_is_base_three_of_simulate():
    # present, absent, present, present, absent -> 1 0 1 1 0 in base 3
    assert pattern_code("speed", "erase") == 81 + 9 + 3
    assert pattern_code("crane", "crane") == 3 ** 5 - 1
    assert pattern_code("crane", "moist") == 0


def test_feedback_cycle_returns_to_start():
    fb = Feedback.absent
    seen = []
    for _ in range(3):
        fb = fb.next()
        seen.append(fb)
    assert seen == [Feedback.present, Feedback.correct, Feedback.absent]


def test_render():
    assert render("speed", simulate("speed", "steel")) == "SPEED 🟩⬛🟩🟩⬛"
