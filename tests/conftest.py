import pytest

from triestore import TrieStore


@pytest.fixture
def store():
    return TrieStore.create()


@pytest.fixture
def siblings(store):
    """Store holding aa=1, ab=2, ac=3."""
    for key, value in (("aa", 1), ("ab", 2), ("ac", 3)):
        store.insert(key, value)
    return store
