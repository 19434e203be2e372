import pytest

from triestore import InvalidKeyError, TrieNode, TrieStore

INVALID_KEYS = ["", "Ab", "a1", "a b", "ab-", "été", "ABC", None, 5, b"ab"]


def test_empty_store():
    store = TrieStore.create()
    assert len(store) == 0
    assert store.node_count == 0
    assert store.is_empty()
    assert store.lookup("a") is None
    store.validate()


def test_insert_and_lookup(store):
    assert store.insert("car", 1)
    assert store.insert("card", 2)
    assert store.insert("cat", 3)

    assert store.lookup("car") == 1
    assert store.lookup("card") == 2
    assert store.lookup("cat") == 3

    assert store.lookup("ca") is None
    assert store.lookup("cars") is None
    assert store.lookup("dog") is None
    assert len(store) == 3
    store.validate()


def test_insert_creates_nodes_lazily(store):
    store.insert("abc", 1)
    assert store.node_count == 3
    store.insert("abd", 2)
    assert store.node_count == 4
    store.insert("ab", 3)
    assert store.node_count == 4

    node = store.root.child("a").child("b")
    assert node.char == "b"
    assert node.has_value and node.value == 3
    assert node.has_multiple_children()


def test_overwrite_keeps_last_value(store):
    store.insert("key", 1)
    store.insert("key", 2)
    assert store.lookup("key") == 2
    assert len(store) == 1
    assert store.node_count == 3


def test_zero_and_negative_values(store):
    store.insert("zero", 0)
    store.insert("neg", -42)
    assert store.lookup("zero") == 0
    assert "zero" in store
    assert store.lookup("neg") == -42


def test_prefix_path_is_not_a_key(store):
    store.insert("abc", 2)
    assert store.lookup("ab") is None
    assert "ab" not in store


@pytest.mark.parametrize("key", INVALID_KEYS)
def test_invalid_key_rejected(store, key):
    store.insert("ab", 1)

    assert store.insert(key, 1) is False
    assert store.lookup(key) is None
    assert store.delete(key) is False

    assert len(store) == 1
    assert store.node_count == 2
    assert store.lookup("ab") == 1
    store.validate()


def test_non_int_value_raises(store):
    with pytest.raises(TypeError):
        store.insert("a", "1")
    with pytest.raises(TypeError):
        store.insert("a", 1.5)
    assert store.is_empty()


def test_mapping_access(store):
    store["ab"] = 1
    assert store["ab"] == 1
    assert "ab" in store
    assert store.get("ab") == 1
    assert store.get("zz") is None
    assert store.get("zz", -1) == -1

    with pytest.raises(KeyError):
        store["a"]
    with pytest.raises(KeyError):
        del store["zz"]

    del store["ab"]
    assert "ab" not in store
    assert store.is_empty()


def test_mapping_access_rejects_invalid_keys(store):
    with pytest.raises(InvalidKeyError):
        store["AB"] = 1
    with pytest.raises(InvalidKeyError):
        store[""]
    with pytest.raises(ValueError):
        del store["a1"]
    assert 5 not in store
    assert store.is_empty()


def test_store_is_not_iterable(siblings):
    with pytest.raises(TypeError):
        list(siblings)


def test_repr_shows_counts_only(siblings):
    assert repr(siblings) == "<TrieStore keys=3 nodes=4>"
    assert repr(TrieNode("a")) == "TrieNode('a')"
