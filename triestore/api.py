"""Function-style access to a TrieStore."""

from __future__ import annotations

from triestore.trie import TrieStore


def create() -> TrieStore:
    """New empty store."""
    return TrieStore.create()


def insert(store: TrieStore, key: str, value: int) -> bool:
    return store.insert(key, value)


def lookup(store: TrieStore, key: str) -> int | None:
    return store.lookup(key)


def delete(store: TrieStore, key: str) -> bool:
    return store.delete(key)


def destroy(store: TrieStore, strict: bool = False) -> None:
    store.destroy(strict=strict)
