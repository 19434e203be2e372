"""Key alphabet for the trie store."""

import string

ALPHABET = string.ascii_lowercase
NUM_CHILDREN = len(ALPHABET)
