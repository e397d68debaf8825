"""
Unit tests for the character trie.
"""

import pytest

from kor_gloss.trie import Trie


@pytest.fixture
def trie() -> Trie:
    t = Trie()
    t.insert("ab", 1)
    t.insert("abcd", 2)
    return t


class TestInsert:
    """Test inserting keys."""

    def test_insert_and_get(self) -> None:
        t = Trie()
        t.insert("학교", "school")
        assert t.get("학교") == "school"
        assert "학교" in t
        assert "학" not in t

    def test_reinsert_keeps_latest_value(self) -> None:
        """Inserting a key twice leaves only the newer value."""
        t = Trie()
        t.insert("가", "old")
        t.insert("가", "new")
        assert t.get("가") == "new"
        assert t.find_longest_match("가") == ("가", "new")
        assert len(t) == 1

    def test_empty_key_is_stored_but_never_matched(self) -> None:
        t = Trie()
        t.insert("", "root")
        assert "" in t
        assert t.find_longest_match("abc") is None
        assert t.find_shortest_match("abc") is None

    def test_none_value_is_a_value(self) -> None:
        t = Trie()
        t.insert("a", None)
        assert "a" in t
        assert t.find_longest_match("ab") == ("a", None)


class TestLongestMatch:
    """Test longest-prefix lookups."""

    def test_longer_key_wins_over_prefix_key(self, trie: Trie) -> None:
        """A key that is a prefix of another must not shadow it."""
        assert trie.find_longest_match("abcdef") == ("abcd", 2)

    def test_falls_back_to_shorter_key(self, trie: Trie) -> None:
        """Intermediate nodes without values are not matches."""
        assert trie.find_longest_match("abcx") == ("ab", 1)
        assert trie.find_longest_match("abc") == ("ab", 1)

    def test_no_match(self, trie: Trie) -> None:
        assert trie.find_longest_match("a") is None
        assert trie.find_longest_match("xyz") is None
        assert trie.find_longest_match("") is None

    def test_matches_only_at_start(self, trie: Trie) -> None:
        assert trie.find_longest_match("xab") is None

    def test_hangul_keys(self) -> None:
        t = Trie()
        t.insert("가", "go")
        t.insert("간", "went")
        t.insert("학교", "school")
        assert t.find_longest_match("간다") == ("간", "went")
        assert t.find_longest_match("학교에") == ("학교", "school")
        assert t.find_longest_match("학생") is None


class TestOffsetMatch:
    """Test lookups that start part way into the key."""

    def test_longest_from_offset(self, trie: Trie) -> None:
        assert trie.find_longest_match("xxabcde", 2) == ("abcd", 2)
        assert trie.find_longest_match("xxabx", 2) == ("ab", 1)
        assert trie.find_longest_match("xxabcde", 1) is None

    def test_shortest_from_offset(self, trie: Trie) -> None:
        assert trie.find_shortest_match("-abcd", 1) == ("ab", 1)

    def test_offset_at_end(self, trie: Trie) -> None:
        assert trie.find_longest_match("ab", 2) is None


class TestShortestMatch:
    """Test shortest-prefix lookups."""

    def test_prefix_key_wins(self, trie: Trie) -> None:
        assert trie.find_shortest_match("abcdef") == ("ab", 1)

    def test_only_long_key(self) -> None:
        t = Trie()
        t.insert("abcd", 2)
        assert t.find_shortest_match("abcde") == ("abcd", 2)
        assert t.find_shortest_match("abc") is None

    def test_closest_value_returns_node(self, trie: Trie) -> None:
        prefix, node = trie.find_closest_value("abcd")
        assert prefix == "ab"
        assert node.value == 1


class TestRemove:
    """Test removing keys."""

    def test_remove_returns_previous_value(self, trie: Trie) -> None:
        assert trie.remove("ab") == 1
        assert "ab" not in trie
        assert trie.find_shortest_match("abcd") == ("abcd", 2)

    def test_remove_keeps_longer_keys(self, trie: Trie) -> None:
        trie.remove("ab")
        assert trie.find_longest_match("abcd") == ("abcd", 2)

    def test_remove_absent_key(self, trie: Trie) -> None:
        assert trie.remove("xyz") is None
        assert trie.remove("abc") is None
        assert trie.remove("ab") == 1
        assert trie.remove("ab") is None


class TestItems:
    """Test iterating over stored keys."""

    def test_items(self, trie: Trie) -> None:
        assert dict(trie.items()) == {"ab": 1, "abcd": 2}
        assert len(trie) == 2

    def test_removed_keys_are_skipped(self, trie: Trie) -> None:
        trie.remove("abcd")
        assert dict(trie.items()) == {"ab": 1}
        assert len(trie) == 1
