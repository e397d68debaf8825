"""
Translation dictionary for kor-gloss.

A Dictionary maps surface forms to word-list definitions. Verbs and
adjectives are indexed under every conjugated form generated from their
stem, so a single Def is usually reachable from many keys. Defs are kept
once in an arena and the trie stores integer handles into it.

A built dictionary can be compiled to disk. The compiled form is a
marisa_trie.RecordTrie (key -> handle) plus a sidecar file holding the
definitions, and is memory-mapped when loaded.
"""

import logging
import struct
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import marisa_trie

from kor_gloss.conjugation import conjugate
from kor_gloss.raw_types import Def
from kor_gloss.trie import Trie
from kor_gloss.wordlist import load_exclusions, load_word_lists

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Citation-form endings
HADA = '하다'
DA = '다'


# ============================================================================
# Key Expansion
# ============================================================================

def expand_key(key: str) -> List[str]:
    """
    Expand one citation form into the trie keys it is indexed under.

    - "공부하다" -> ["공부"]
    - "가다" -> conjugated forms of "가"
    - anything else is used verbatim

    Example:
        >>> expand_key("공부하다")
        ['공부']
        >>> expand_key("학교")
        ['학교']
    """
    if key.endswith(HADA):
        return [key[:-len(HADA)]]
    if key.endswith(DA):
        return conjugate(key[:-len(DA)])
    return [key]


# ============================================================================
# Dictionary
# ============================================================================

class Dictionary:
    """
    A mutable translation dictionary.

    Example:
        >>> d = Dictionary()
        >>> d.add_definitions([Def("가다", meanings=["go"])])
        >>> len(d)
        6
        >>> text, definition = d.find_longest_match("간다")
        >>> text, definition.meanings[0]
        ('간', 'go')
    """

    def __init__(self) -> None:
        self._defs: List[Def] = []
        self._trie: Trie[int] = Trie()

    def _store(self, definition: Def) -> int:
        self._defs.append(definition)
        return len(self._defs) - 1

    def add_definitions(self, defs: Iterable[Def]) -> None:
        """
        Index definitions under their citation forms, aliases and conjugations.

        Newer definitions of a key replace older ones.
        """
        for definition in defs:
            handle = self._store(definition)
            for key in definition.keys:
                for expanded in expand_key(key):
                    self._trie.insert(expanded, handle)

    def insert(self, key: str, definition: Def) -> None:
        """Index a definition under exactly one key, without expansion."""
        self._trie.insert(key, self._store(definition))

    def remove(self, key: str) -> Optional[Def]:
        """
        Remove one exact key.

        Returns:
            The definition the key pointed to, or None if it was absent
        """
        handle = self._trie.remove(key)
        if handle is None:
            return None
        return self._defs[handle]

    def remove_all(self, keys: Iterable[str]) -> int:
        """Remove every key in an exclusion list. Returns how many were present."""
        removed = 0
        for key in keys:
            if self.remove(key) is not None:
                removed += 1
        return removed

    def find_longest_match(self, text: str, start: int = 0) -> Optional[Tuple[str, Def]]:
        """Find the definition matching as many characters of text from start as possible."""
        found = self._trie.find_longest_match(text, start)
        if found is None:
            return None
        prefix, handle = found
        return prefix, self._defs[handle]

    def find_shortest_match(self, text: str, start: int = 0) -> Optional[Tuple[str, Def]]:
        """Find the definition matching as few characters of text from start as possible."""
        found = self._trie.find_shortest_match(text, start)
        if found is None:
            return None
        prefix, handle = found
        return prefix, self._defs[handle]

    def items(self) -> Iterator[Tuple[str, Def]]:
        """Iterate over live (key, Def) pairs."""
        for key, handle in self._trie.items():
            yield key, self._defs[handle]

    def __contains__(self, key: str) -> bool:
        return key in self._trie

    def __len__(self) -> int:
        return len(self._trie)


def build_dictionary(
    word_list_paths: Iterable[PathLike],
    exclusion_paths: Iterable[PathLike] = (),
) -> Dictionary:
    """
    Build a dictionary from word-list files, then apply exclusion lists.

    Args:
        word_list_paths: Word lists, later files overriding earlier ones
        exclusion_paths: Files with one key per line to remove

    Raises:
        FileNotFoundError: If a file doesn't exist
    """
    dictionary = Dictionary()
    dictionary.add_definitions(load_word_lists(word_list_paths))

    exclusions = load_exclusions(exclusion_paths)
    if exclusions:
        removed = dictionary.remove_all(exclusions)
        logger.info(f"Excluded {removed} of {len(exclusions)} keys")

    logger.info(f"Dictionary has {len(dictionary)} keys")
    return dictionary


# ============================================================================
# Compiled Dictionary
# ============================================================================
# The trie stores one record per key:
#   - handle: uint32 (4 bytes) - index into the definitions sidecar
#
# Sidecar layout (little-endian):
#   count: uint32, then per definition:
#     hangeul, hanja ('' = none): text
#     alias count: uint16, aliases: text
#     meaning count: uint16, meanings: text
#   where text is uint32 byte length + UTF-8 bytes

RECORD_FORMAT = "<I"
DEFS_SUFFIX = ".defs"


def get_default_dictionary_path() -> Path:
    """Get the default compiled dictionary path."""
    return Path(__file__).parent / "data" / "kor_gloss.dic"


def _defs_path(path: Path) -> Path:
    return path.with_name(path.name + DEFS_SUFFIX)


def _write_text(f: BinaryIO, text: str) -> None:
    data = text.encode('utf-8')
    f.write(struct.pack('<I', len(data)))
    f.write(data)


def _read_text(f: BinaryIO) -> str:
    size = struct.unpack('<I', f.read(4))[0]
    return f.read(size).decode('utf-8')


def _write_defs(defs: List[Def], path: Path) -> None:
    with open(path, 'wb') as f:
        f.write(struct.pack('<I', len(defs)))
        for definition in defs:
            _write_text(f, definition.hangeul)
            _write_text(f, definition.hanja or '')
            f.write(struct.pack('<H', len(definition.aliases)))
            for alias in definition.aliases:
                _write_text(f, alias)
            f.write(struct.pack('<H', len(definition.meanings)))
            for meaning in definition.meanings:
                _write_text(f, meaning)


def _read_defs(path: Path) -> List[Def]:
    defs = []
    with open(path, 'rb') as f:
        count = struct.unpack('<I', f.read(4))[0]
        for _ in range(count):
            hangeul = _read_text(f)
            hanja = _read_text(f) or None
            alias_count = struct.unpack('<H', f.read(2))[0]
            aliases = [_read_text(f) for _ in range(alias_count)]
            meaning_count = struct.unpack('<H', f.read(2))[0]
            meanings = [_read_text(f) for _ in range(meaning_count)]
            defs.append(Def(hangeul=hangeul, aliases=aliases, hanja=hanja, meanings=meanings))
    return defs


def save_dictionary(dictionary: Dictionary, path: PathLike) -> Path:
    """
    Compile a dictionary to disk.

    Only live keys and the definitions they reference are written. Empty
    keys are skipped since they can never be matched.

    Returns:
        The path of the trie file
    """
    path = Path(path)
    handles: Dict[int, int] = {}  # id(Def) -> compiled handle
    defs: List[Def] = []

    def generate_items():
        for key, definition in dictionary.items():
            if not key:
                continue
            handle = handles.get(id(definition))
            if handle is None:
                handle = handles[id(definition)] = len(defs)
                defs.append(definition)
            yield key, (handle,)

    trie = marisa_trie.RecordTrie(RECORD_FORMAT, generate_items())

    path.parent.mkdir(parents=True, exist_ok=True)
    trie.save(str(path))
    _write_defs(defs, _defs_path(path))

    logger.info(f"Saved {len(trie)} keys and {len(defs)} definitions to {path}")
    return path


class CompiledDictionary:
    """
    A read-only dictionary loaded from disk.

    Provides the same lookups as Dictionary, so it can be passed to the
    translator directly.
    """

    def __init__(self, trie: marisa_trie.RecordTrie, defs: List[Def]) -> None:
        self._trie = trie
        self._defs = defs

    def _lookup(self, key: str) -> Optional[Def]:
        records = self._trie.get(key)
        if not records:
            return None
        handle, = records[0]
        return self._defs[handle]

    def _has_prefix(self, prefix: str) -> bool:
        try:
            next(iter(self._trie.iterkeys(prefix)))
            return True
        except StopIteration:
            return False

    def _iter_matches(self, text: str, start: int) -> Iterator[Tuple[str, Def]]:
        """Yield every stored key that is a prefix of text[start:], shortest first."""
        for end in range(start + 1, len(text) + 1):
            prefix = text[start:end]
            if not self._has_prefix(prefix):
                break
            definition = self._lookup(prefix)
            if definition is not None:
                yield prefix, definition

    def find_longest_match(self, text: str, start: int = 0) -> Optional[Tuple[str, Def]]:
        longest = None
        for match in self._iter_matches(text, start):
            longest = match
        return longest

    def find_shortest_match(self, text: str, start: int = 0) -> Optional[Tuple[str, Def]]:
        return next(self._iter_matches(text, start), None)

    def __contains__(self, key: str) -> bool:
        return bool(key) and key in self._trie

    def __len__(self) -> int:
        return len(self._trie)


def load_dictionary(path: Optional[PathLike] = None) -> CompiledDictionary:
    """
    Load a compiled dictionary.

    The trie is memory-mapped; definitions are read into memory.

    Args:
        path: Path to the .dic file. Uses default if not specified.

    Raises:
        FileNotFoundError: If the trie or its definitions file doesn't exist
    """
    path = get_default_dictionary_path() if path is None else Path(path)
    defs_path = _defs_path(path)

    for required in (path, defs_path):
        if not required.exists():
            raise FileNotFoundError(
                f"Compiled dictionary not found at {required}. "
                "Run 'python scripts/build_dictionary.py' to build it."
            )

    trie = marisa_trie.RecordTrie(RECORD_FORMAT)
    trie.mmap(str(path))

    return CompiledDictionary(trie, _read_defs(defs_path))
