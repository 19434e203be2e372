"""Key validation shared by every store operation."""

from __future__ import annotations

from triestore.constants import ALPHABET
from triestore.errors import InvalidKeyError

_ALLOWED = frozenset(ALPHABET)


def is_valid_key(key: object) -> bool:
    """True if key is a non-empty str made only of 'a'-'z'."""
    return isinstance(key, str) and bool(key) and _ALLOWED.issuperset(key)


def check_key(key: object) -> str:
    """Return key unchanged, or raise InvalidKeyError."""
    if not is_valid_key(key):
        raise InvalidKeyError(key)
    return key


def slot(ch: str) -> int:
    """Child slot index for a letter."""
    return ord(ch) - ord("a")
