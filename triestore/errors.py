"""Exceptions raised by the trie store."""

from __future__ import annotations


class TrieError(Exception):
    """Base class for trie store errors."""


class InvalidKeyError(TrieError, ValueError):
    """Key is empty or contains a character outside 'a'-'z'."""

    def __init__(self, key: object):
        super().__init__(f"invalid key {key!r}: expected one or more of a-z")
        self.key = key


class TrieNotEmptyError(TrieError):
    """Strict teardown of a store that still holds keys."""

    def __init__(self, keys: int, nodes: int):
        super().__init__(f"store still holds {keys} key(s) in {nodes} node(s)")
        self.keys = keys
        self.nodes = nodes


class TrieCorruptError(TrieError):
    """A structural invariant of the tree does not hold."""
