import pytest

from algokit.trie import Trie

WORDS = ["bear", "bell", "bid", "bull", "buy", "sell", "stock", "stop"]


@pytest.fixture
def trie():
    t = Trie()
    for w in WORDS:
        t.insert(w)
    return t


def test_source_example(trie):
    assert trie.search("bell") is True
    assert trie.search("belly") is False


@pytest.mark.parametrize("word", WORDS)
def test_every_inserted_word_found(trie, word):
    assert trie.search(word) is True
    assert word in trie


def test_prefix_is_not_a_word(trie):
    assert trie.search("be") is False
    assert trie.search("sto") is False


def test_empty_word():
    t = Trie()
    assert t.search("") is False
    t.insert("")
    assert t.search("") is True


def test_invalid_characters():
    t = Trie()
    with pytest.raises(ValueError):
        t.insert("Hello")
    with pytest.raises(ValueError):
        t.search("a1")