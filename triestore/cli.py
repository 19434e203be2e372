"""Terminal demo for the trie store."""

from __future__ import annotations

from triestore.errors import TrieCorruptError
from triestore.keys import is_valid_key
from triestore.trie import TrieStore

# (operation, key, value) steps of the scripted walkthrough
WALKTHROUGH: list[tuple[str, str, int | None]] = [
    ("insert", "aa", 1),
    ("insert", "ab", 2),
    ("insert", "ac", 3),
    ("lookup", "aa", None),
    ("lookup", "ab", None),
    ("lookup", "ac", None),
    ("lookup", "ad", None),
    ("delete", "ab", None),
    ("insert", "aaak", 10),
    ("lookup", "aaak", None),
    ("delete", "aa", None),
    ("delete", "ac", None),
    ("delete", "ab", None),
    ("delete", "aaak", None),
]


def print_lookup(store: TrieStore, key: str) -> None:
    value = store.lookup(key)
    print(f"Looking up for {key}...")
    if value is not None:
        print(f"\tfound with value - {value}")
    else:
        print("\tdid not find.")


def run_walkthrough(store: TrieStore) -> None:
    """Run the scripted insert / lookup / delete sequence."""
    for op, key, value in WALKTHROUGH:
        if op == "insert":
            store.insert(key, value)
            print(f"Inserted {key} -> {value}")
        elif op == "lookup":
            print_lookup(store, key)
        else:
            ok = store.delete(key)
            print(f"Deleting {key}... {'done' if ok else 'not found'}")
    print(f"\n{len(store)} key(s), {store.node_count} node(s) left.")


def run_shell(store: TrieStore) -> None:
    """Interactive insert / lookup / delete from the terminal."""
    print("\n" + "=" * 60)
    print("  TRIE STORE -- Interactive Shell")
    print("=" * 60)
    print()
    print("Commands:")
    print("  insert KEY VALUE      -- store a value   (e.g. insert abc 7)")
    print("  lookup KEY            -- look a key up   (e.g. lookup abc)")
    print("  delete KEY            -- remove a key")
    print("  stats                 -- key and node counts")
    print("  check                 -- validate the tree structure")
    print("  clear                 -- drop every key")
    print("  done                  -- quit")
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        parts = inp.split()
        if not parts:
            continue
        cmd = parts[0].lower()

        if cmd == "done":
            break
        if cmd == "stats":
            print(f"  {len(store)} key(s), {store.node_count} node(s)")
            continue
        if cmd == "check":
            try:
                store.validate()
                print("  Structure OK.")
            except TrieCorruptError as exc:
                print(f"  Corrupt: {exc}")
            continue
        if cmd == "clear":
            n = store.clear()
            print(f"  Store cleared ({n} node(s) released).")
            continue

        if cmd == "insert" and len(parts) == 3:
            key = parts[1]
            try:
                value = int(parts[2])
            except ValueError:
                print("  Invalid.  VALUE must be an integer")
                continue
            if store.insert(key, value):
                print(f"  Stored {key} -> {value}")
            else:
                print("  Invalid.  KEY must be letters a-z")
        elif cmd in ("lookup", "delete") and len(parts) == 2:
            key = parts[1]
            if not is_valid_key(key):
                print("  Invalid.  KEY must be letters a-z")
            elif cmd == "lookup":
                print_lookup(store, key)
            elif store.delete(key):
                print(f"  Deleted {key}")
            else:
                print(f"  {key} not found")
        else:
            print("  Format: insert KEY VALUE  or  lookup KEY  or  delete KEY")
