"""Prefix trie mapping lowercase keys to integer values."""

from __future__ import annotations

import logging

from triestore.constants import ALPHABET, NUM_CHILDREN
from triestore.errors import TrieCorruptError, TrieNotEmptyError
from triestore.keys import check_key, is_valid_key, slot

log = logging.getLogger("triestore")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("char", "children", "has_value", "value")

    def __init__(self, char: str | None = None):
        self.char = char  # None for the root
        self.children: list[TrieNode | None] = [None] * NUM_CHILDREN
        self.has_value: bool = False
        self.value: int = 0

    def child(self, ch: str) -> TrieNode | None:
        return self.children[slot(ch)]

    def has_children(self) -> bool:
        return any(c is not None for c in self.children)

    def has_multiple_children(self) -> bool:
        seen = 0
        for c in self.children:
            if c is not None:
                seen += 1
                if seen > 1:
                    return True
        return False

    def is_load_bearing(self) -> bool:
        """True if the node holds a value or branches towards two or more keys."""
        return self.has_value or self.has_multiple_children()

    def __repr__(self) -> str:
        val = f"={self.value}" if self.has_value else ""
        return f"TrieNode({self.char!r}{val})"


class TrieStore:
    """Prefix trie storing one integer per lowercase key.

    Keys are non-empty strings over 'a'-'z'. Every operation rejects any
    other key the same way: ``insert``/``delete`` return False and
    ``lookup`` returns None, with nothing changed.
    """

    # no key enumeration
    __iter__ = None

    def __init__(self):
        self.root = TrieNode()
        self._keys = 0
        self._nodes = 0

    @classmethod
    def create(cls) -> TrieStore:
        return cls()

    @property
    def node_count(self) -> int:
        """Number of nodes below the root."""
        return self._nodes

    # Core operations

    def insert(self, key: str, value: int) -> bool:
        """Store value under key, replacing any previous value."""
        if not isinstance(value, int):
            raise TypeError(f"value must be int, not {type(value).__name__}")
        if not is_valid_key(key):
            log.debug("insert rejected: invalid key %r", key)
            return False

        node = self.root
        created = 0
        for ch in key:
            i = slot(ch)
            if node.children[i] is None:
                node.children[i] = TrieNode(ch)
                created += 1
            node = node.children[i]

        if not node.has_value:
            self._keys += 1
        node.has_value = True
        node.value = value
        self._nodes += created
        if created:
            log.debug("insert %r: created %d node(s)", key, created)
        return True

    def lookup(self, key: str) -> int | None:
        """Value stored under key, or None if the key is absent or invalid."""
        if not is_valid_key(key):
            log.debug("lookup rejected: invalid key %r", key)
            return None
        node = self._walk(key)
        if node is None or not node.has_value:
            return None
        return node.value

    def delete(self, key: str) -> bool:
        """Remove key and prune the nodes that only existed to reach it.

        One walk from the root records every node on the key's path. The
        deepest node above the target that holds a value or has two or more
        children is the anchor; when there is none the root is. If the
        target still leads to longer keys only its value is cleared,
        otherwise everything strictly below the anchor is detached.

        Returns False, with nothing changed, if the key is invalid or not
        stored.
        """
        if not is_valid_key(key):
            log.debug("delete rejected: invalid key %r", key)
            return False

        chain: list[TrieNode] = [self.root]
        anchor = 0
        node = self.root
        for depth, ch in enumerate(key, 1):
            node = node.child(ch)
            if node is None:
                log.debug("delete %r: not found", key)
                return False
            chain.append(node)
            if depth < len(key) and node.is_load_bearing():
                anchor = depth

        if not node.has_value:
            log.debug("delete %r: prefix only, no value", key)
            return False

        self._keys -= 1
        if node.has_children():
            node.has_value = False
            node.value = 0
            log.debug("delete %r: cleared value, path kept", key)
            return True

        # chain[anchor + 1] hangs off chain[anchor] under key[anchor]
        chain[anchor].children[slot(key[anchor])] = None
        freed = len(chain) - 1 - anchor
        self._nodes -= freed
        log.debug("delete %r: pruned %d node(s) below depth %d", key, freed, anchor)
        return True

    def destroy(self, strict: bool = False) -> None:
        """Release every node, leaving an empty store.

        With ``strict`` the store must already be empty; otherwise
        TrieNotEmptyError is raised and nothing is released.
        """
        if strict and not self.is_empty():
            raise TrieNotEmptyError(self._keys, self._nodes)
        released = self.clear()
        if released:
            log.info("Destroyed store with %d remaining node(s)", released)

    def clear(self) -> int:
        """Drop every key. Returns the number of nodes released."""
        released = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            for i, child in enumerate(node.children):
                if child is not None:
                    stack.append(child)
                    node.children[i] = None
                    released += 1
        self._keys = 0
        self._nodes = 0
        if released:
            log.debug("clear: released %d node(s)", released)
        return released

    def is_empty(self) -> bool:
        return not self.root.has_children()

    def validate(self) -> None:
        """Check the structural invariants of the whole tree.

        Raises TrieCorruptError on the first violation found.
        """
        if self.root.char is not None or self.root.has_value:
            raise TrieCorruptError("root must hold neither a character nor a value")

        keys = nodes = 0
        seen: set[int] = {id(self.root)}
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            for i, child in enumerate(node.children):
                if child is None:
                    continue
                path = prefix + ALPHABET[i]
                if id(child) in seen:
                    raise TrieCorruptError(f"node at {path!r} has more than one parent")
                seen.add(id(child))
                if child.char != ALPHABET[i]:
                    raise TrieCorruptError(
                        f"node at {path!r} holds {child.char!r}, expected {ALPHABET[i]!r}"
                    )
                if not child.has_value:
                    if not child.has_children():
                        raise TrieCorruptError(f"dead leaf at {path!r}")
                    if child.value != 0:
                        raise TrieCorruptError(f"stale value {child.value} at {path!r}")
                nodes += 1
                keys += child.has_value
                stack.append((child, path))

        if keys != self._keys:
            raise TrieCorruptError(f"{keys} key(s) in tree, {self._keys} recorded")
        if nodes != self._nodes:
            raise TrieCorruptError(f"{nodes} node(s) in tree, {self._nodes} recorded")

    # Mapping-style access

    def get(self, key: str, default: int | None = None) -> int | None:
        value = self.lookup(key)
        return default if value is None else value

    def __getitem__(self, key: str) -> int:
        node = self._walk(check_key(key))
        if node is None or not node.has_value:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: str, value: int) -> None:
        self.insert(check_key(key), value)

    def __delitem__(self, key: str) -> None:
        if not self.delete(check_key(key)):
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return self.lookup(key) is not None

    def __len__(self) -> int:
        return self._keys

    def __repr__(self) -> str:
        return f"<TrieStore keys={self._keys} nodes={self._nodes}>"

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
        return node
