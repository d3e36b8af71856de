import logging

logger = logging.getLogger("nameseek.search.name_trie")


class TrieNode:
    """Node in the name trie.

    ``children`` holds fragment continuations keyed by a single uppercase
    character. Full names ending a fragment live in ``full_names``, apart
    from the character map, and are never descended into.
    """

    __slots__ = ("children", "is_name_end", "full_names")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_name_end: bool = False
        self.full_names: set[str] = set()


class NameTrie:
    """Case-insensitive prefix trie over first and last names.

    Each first name and each last name is inserted as a separate fragment
    pointing at the user's full name, so one lookup answers "names starting
    with X" whether X begins a first or a last name. Only the per-character
    lookup key is uppercased; full names keep their display casing.

    The trie does no locking. Build it from a single writer, then share it
    read-only (see ``name_index`` for the rebuild-and-swap holder).
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, name_fragment: str, full_name: str):
        """Insert a first or last name fragment pointing at ``full_name``.

        An empty fragment marks the root itself as a name end.
        """
        node = self.root
        for char in name_fragment:
            key = char.upper()
            if key not in node.children:
                node.children[key] = TrieNode()
            node = node.children[key]
        node.is_name_end = True
        node.full_names.add(full_name)
        self._size += 1

    def search_prefix(self, prefix: str, limit: int | None = None) -> list[str]:
        """Return the sorted, deduplicated full names whose first or last
        name starts with ``prefix`` (case-insensitive).

        An empty prefix returns every full name in the trie. A prefix that
        leaves the trie returns an empty list.
        """
        node = self._find_node(prefix)
        if node is None:
            return []

        results = sorted(self._collect(node))
        if limit is not None:
            results = results[:limit]
        return results

    def _find_node(self, prefix: str) -> TrieNode | None:
        node = self.root
        for char in prefix:
            node = node.children.get(char.upper())
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(start: TrieNode) -> set[str]:
        names: set[str] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_name_end:
                names.update(node.full_names)
            stack.extend(node.children.values())
        return names

    def copy(self) -> "NameTrie":
        """Return an independent copy of the trie for copy-on-write updates."""
        clone = NameTrie()
        clone._size = self._size
        pending = [(self.root, clone.root)]
        while pending:
            src, dst = pending.pop()
            dst.is_name_end = src.is_name_end
            dst.full_names = set(src.full_names)
            for key, child in src.children.items():
                dst.children[key] = TrieNode()
                pending.append((child, dst.children[key]))
        logger.debug("Copied name trie with %d entries", clone._size)
        return clone

    @property
    def children(self) -> dict[str, TrieNode]:
        return self.root.children

    @property
    def is_name_end(self) -> bool:
        return self.root.is_name_end

    @property
    def size(self) -> int:
        return self._size
