"""
Character trie for longest-prefix dictionary lookups.

Keys are walked one Unicode character at a time, so a match can never end
in the middle of a character.
"""

from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

V = TypeVar('V')

# Marks a node that no key terminates at (values may legitimately be None)
_EMPTY = object()


class TrieNode(Generic[V]):
    """A trie node: an optional value plus children keyed by character."""

    __slots__ = ('value', 'children')

    def __init__(self) -> None:
        self.value = _EMPTY
        self.children: Dict[str, 'TrieNode[V]'] = {}

    @property
    def has_value(self) -> bool:
        return self.value is not _EMPTY

    def find_closest_value(self, key: str, start: int = 0) -> Optional[Tuple[int, 'TrieNode[V]']]:
        """
        Walk key[start:] from this node and stop at the first child holding a value.

        Returns:
            (end, node) where key[start:end] leads from this node to the
            value-bearing node, or None if the walk runs out first
        """
        node = self
        for end in range(start, len(key)):
            child = node.children.get(key[end])
            if child is None:
                break
            if child.has_value:
                return end + 1, child
            node = child
        return None


class Trie(Generic[V]):
    """
    A map from strings to values supporting prefix queries.

    Example:
        >>> trie = Trie()
        >>> trie.insert("학교", "school")
        >>> trie.insert("학", "learning")
        >>> trie.find_longest_match("학교에")
        ('학교', 'school')
        >>> trie.find_shortest_match("학교에")
        ('학', 'learning')
    """

    def __init__(self) -> None:
        self._root: TrieNode[V] = TrieNode()

    def insert(self, key: str, value: V) -> None:
        """Insert a key, replacing any value already stored under it."""
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child
        node.value = value

    def find_closest_value(self, key: str, start: int = 0) -> Optional[Tuple[str, TrieNode[V]]]:
        """Return the shortest non-empty stored prefix of key[start:], with its node."""
        found = self._root.find_closest_value(key, start)
        if found is None:
            return None
        end, node = found
        return key[start:end], node

    def find_shortest_match(self, key: str, start: int = 0) -> Optional[Tuple[str, V]]:
        """
        Find the shortest stored key that is a prefix of key[start:].

        Returns:
            (matched_prefix, value), or None if no non-empty prefix matches
        """
        found = self.find_closest_value(key, start)
        if found is None:
            return None
        prefix, node = found
        return prefix, node.value

    def find_longest_match(self, key: str, start: int = 0) -> Optional[Tuple[str, V]]:
        """
        Find the longest stored key that is a prefix of key[start:].

        Each step resumes the closest-value walk from the last match, so keys
        whose intermediate nodes hold no value are still reached.

        Returns:
            (matched_prefix, value), or None if no non-empty prefix matches
        """
        node = self._root
        end = start
        while True:
            found = node.find_closest_value(key, end)
            if found is None:
                break
            end, node = found
        if end == start:
            return None
        return key[start:end], node.value

    def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        node = self._find_node(key)
        if node is None or not node.has_value:
            return default
        return node.value

    def remove(self, key: str) -> Optional[V]:
        """
        Clear the value stored under key.

        Nodes are left in place even when they become empty.

        Returns:
            The previous value, or None if key was not stored
        """
        node = self._find_node(key)
        if node is None or not node.has_value:
            return None
        value = node.value
        node.value = _EMPTY
        return value

    def items(self) -> Iterator[Tuple[str, V]]:
        """Iterate over all (key, value) pairs, depth first."""
        stack = [('', self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.has_value:
                yield prefix, node.value
            for char, child in node.children.items():
                stack.append((prefix + char, child))

    def _find_node(self, key: str) -> Optional[TrieNode[V]]:
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, key: str) -> bool:
        node = self._find_node(key)
        return node is not None and node.has_value

    def __len__(self) -> int:
        return sum(1 for _ in self.items())
