import pytest

from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.errors import InvalidDictionary


def test_load_normalises_and_keeps_first_duplicate():
    d = Dictionary.load([" Crane", "slate", "CRANE ", "audio"])
    assert list(d.all_words()) == ["crane", "slate", "audio"]
    assert len(d) == 3
    assert "CRANE" in d
    assert d.index_of("audio") == 2
    assert d.index_of("zzzzz") == -1


def test_all_words_is_lazy():
    d = Dictionary.load(["crane", "slate"])
    words = d.all_words()
    assert next(words) == "crane"
    assert next(words) == "slate"


@pytest.mark.parametrize("words", [
    [],
    ["crane", "cranes"],
    ["crane", "cr4ne"],
    ["crane", "cran-"],
    ["café!"],
])
def test_load_rejects_bad_word_lists(words):
    with pytest.raises(InvalidDictionary):
        Dictionary.load(words)


def test_load_rejects_non_positive_length():
    with pytest.raises(InvalidDictionary):
        Dictionary.load(["a"], word_length=0)


def test_other_word_lengths():
    d = Dictionary.load(["cat", "dog"], word_length=3)
    assert d.word_length == 3


def test_letter_frequency_over_whole_dictionary():
    d = Dictionary.load(["aabbc", "abcde"])
    assert d.letter_frequency("a") == pytest.approx(0.3)
    assert d.letter_frequency("B") == pytest.approx(0.3)
    assert d.letter_frequency("c") == pytest.approx(0.2)
    assert d.letter_frequency("e") == pytest.approx(0.1)
    assert d.letter_frequency("z") == 0.0
    assert sum(d.letter_frequency(c) for c in "abcdefghijklmnopqrstuvwxyz") == pytest.approx(1.0)
