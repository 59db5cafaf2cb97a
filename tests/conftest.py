import pytest

from wordlehelper.classes.Dictionary import Dictionary
from wordlehelper.classes.Session import Session
from wordlehelper.words import WORDS


@pytest.fixture(scope="session")
def dictionary():
    return Dictionary.load(WORDS)


@pytest.fixture
def small_dictionary():
    return Dictionary.load(["crane", "crate", "slate", "speed", "steel", "erase", "abide", "medic"])


@pytest.fixture
def session(dictionary):
    return Session(dictionary, workers=1)
