#!/usr/bin/env python3
"""
Trie Store demo

Runs the reference insert / lookup / delete walkthrough against a fresh
store, or drops into an interactive shell with --interactive.
"""

from __future__ import annotations

import argparse
import logging

from triestore import TrieStore
from triestore.cli import run_shell, run_walkthrough


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("triestore")


# Entry point

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Trie Store -- lowercase keys to integer values",
    )
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Interactive shell instead of the scripted walkthrough")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("TRIE STORE -- Demo")

    store = TrieStore.create()

    if args.interactive:
        run_shell(store)
        store.destroy()
    else:
        run_walkthrough(store)
        store.destroy(strict=True)
        log.debug("Store torn down cleanly")


if __name__ == "__main__":
    main()
