import pytest

from structlab.tries import ArrayTrie, MapTrie


@pytest.fixture
def array_trie():
    trie = ArrayTrie()
    for word in ("car", "world", "card", "care"):
        trie.insert(word)
    return trie


@pytest.fixture
def map_trie():
    trie = MapTrie()
    for word in ("apple", "app", "apricot"):
        trie.insert(word)
    return trie


@pytest.mark.parametrize("word", ["car", "world", "card", "care"])
def test_array_trie_finds_inserted_words(array_trie, word):
    assert array_trie.search(word) is True


@pytest.mark.parametrize("word", ["ca", "cards", "wor", "dog", ""])
def test_array_trie_misses_other_words(array_trie, word):
    assert array_trie.search(word) is False


def test_array_trie_remove_keeps_prefix_word(array_trie):
    assert array_trie.remove("card") is True
    assert array_trie.search("card") is False
    assert array_trie.search("car") is True
    assert array_trie.search("care") is True


def test_array_trie_remove_word_with_children(array_trie):
    assert array_trie.remove("car") is True
    assert array_trie.search("car") is False
    assert array_trie.search("card") is True
    assert array_trie.search("care") is True


def test_array_trie_remove_missing_word(array_trie):
    assert array_trie.remove("ca") is False
    assert array_trie.remove("dog") is False
    assert array_trie.search("car") is True


def test_array_trie_remove_twice(array_trie):
    assert array_trie.remove("world") is True
    assert array_trie.remove("world") is False


def test_array_trie_reinsert_after_full_removal():
    trie = ArrayTrie()
    trie.insert("solo")
    assert trie.remove("solo") is True
    assert trie.search("solo") is False
    trie.insert("solo")
    assert trie.search("solo") is True


def test_map_trie_search(map_trie):
    assert map_trie.search("apple") is True
    assert map_trie.search("app") is True
    assert map_trie.search("appl") is False


def test_map_trie_starts_with(map_trie):
    assert map_trie.starts_with("apr") is True
    assert map_trie.starts_with("") is True
    assert map_trie.starts_with("b") is False


def test_map_trie_remove_keeps_prefix(map_trie):
    assert map_trie.remove("apple") is True
    assert map_trie.search("apple") is False
    assert map_trie.search("app") is True
    assert map_trie.starts_with("appl") is False
    assert map_trie.starts_with("apr") is True


def test_map_trie_remove_missing(map_trie):
    assert map_trie.remove("ap") is False
    assert map_trie.remove("banana") is False
    assert map_trie.search("apricot") is True


def test_map_trie_accepts_any_characters():
    trie = MapTrie()
    trie.insert("Hé 1!")
    assert trie.search("Hé 1!") is True
    assert trie.starts_with("Hé") is True
    assert trie.search("Hé") is False