"""Trie Store -- prefix tree mapping lowercase keys to integers."""

from triestore.constants import ALPHABET, NUM_CHILDREN
from triestore.errors import InvalidKeyError, TrieCorruptError, TrieError, TrieNotEmptyError
from triestore.keys import check_key, is_valid_key
from triestore.trie import TrieNode, TrieStore
from triestore.api import create, delete, destroy, insert, lookup

__all__ = [
    "ALPHABET",
    "NUM_CHILDREN",
    "InvalidKeyError",
    "TrieCorruptError",
    "TrieError",
    "TrieNode",
    "TrieNotEmptyError",
    "TrieStore",
    "check_key",
    "create",
    "delete",
    "destroy",
    "insert",
    "is_valid_key",
    "lookup",
]
