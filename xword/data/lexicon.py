"""Length-bucketed word index with pattern lookups."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.constants import Alphabet
from ..utils.logger import get_logger
from .loader import read_word_list
from .normalization import normalize_word

if TYPE_CHECKING:
    from ..engine.puzzle import Slot


LOGGER = get_logger(__name__)

Pattern = Sequence[Optional[str]]


@dataclass(frozen=True)
class LexiconConfig:
    """Configuration for lexicon construction and queries."""

    alphabet: Alphabet = Alphabet.ASCII
    min_length: int = 1
    max_length: Optional[int] = None
    use_position_index: bool = True


class Lexicon:
    """Immutable word list bucketed by length.

    Words are uppercased on the way in, so queries are case-insensitive.
    Words outside the configured alphabet or length range are dropped and
    counted in :attr:`skipped`.
    """

    def __init__(self, words: Iterable[str] = (), config: Optional[LexiconConfig] = None) -> None:
        self.config = config or LexiconConfig()
        self.skipped = 0
        buckets: Dict[int, Set[str]] = defaultdict(set)
        # Positional index: length -> (position, letter) -> set of words
        position_index: Dict[int, Dict[Tuple[int, str], Set[str]]] = defaultdict(
            lambda: defaultdict(set)
        )
        for raw in words:
            word = self._accept(raw)
            if word is None:
                self.skipped += 1
                LOGGER.debug("Skipping unsupported word %r", raw)
                continue
            buckets[len(word)].add(word)
            if self.config.use_position_index:
                length_index = position_index[len(word)]
                for pos, char in enumerate(word):
                    length_index[(pos, char)].add(word)

        self._words_by_length: Dict[int, FrozenSet[str]] = {
            length: frozenset(bucket) for length, bucket in buckets.items()
        }
        self._position_index: Dict[int, Dict[Tuple[int, str], FrozenSet[str]]] = {
            length: {key: frozenset(group) for key, group in index.items()}
            for length, index in position_index.items()
        }
        LOGGER.info(
            "Lexicon holds %s words in %s length buckets (%s skipped)",
            len(self),
            len(self._words_by_length),
            self.skipped,
        )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls, config: Optional[LexiconConfig] = None) -> "Lexicon":
        return cls((), config)

    @classmethod
    def from_words(cls, words: Iterable[str], config: Optional[LexiconConfig] = None) -> "Lexicon":
        """Build a lexicon from ``words``; unsupported words are skipped."""

        return cls(words, config)

    @classmethod
    def from_file(cls, path: Path | str, config: Optional[LexiconConfig] = None) -> "Lexicon":
        """Build a lexicon from a file holding one word per line."""

        return cls(read_word_list(path), config)

    def _accept(self, raw: str) -> Optional[str]:
        word = normalize_word(raw, self.config.alphabet)
        if word is None:
            return None
        if len(word) < self.config.min_length:
            return None
        if self.config.max_length is not None and len(word) > self.config.max_length:
            return None
        return word

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._words_by_length.values())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def contains(self, word: str) -> bool:
        normalized = normalize_word(word, self.config.alphabet)
        if normalized is None:
            return False
        return normalized in self._words_by_length.get(len(normalized), frozenset())

    def lengths(self) -> List[int]:
        return sorted(self._words_by_length)

    def iter_length(self, length: int) -> Iterable[str]:
        return self._words_by_length.get(length, frozenset())

    def possible_answers(self, slot: "Slot") -> List[str]:
        """Return every word agreeing with the filled squares of ``slot``.

        Blank squares match any letter. Results are sorted.
        """

        return self.find_candidates(len(slot), slot.pattern)

    def find_candidates(self, length: int, pattern: Optional[Pattern] = None) -> List[str]:
        """Return sorted words of ``length`` matching ``pattern``.

        ``pattern`` is a sequence describing each position (letter or
        ``None``); ``None`` or an omitted pattern leaves positions open.
        """

        if pattern is not None and len(pattern) != length:
            raise ValueError(f"pattern has {len(pattern)} positions, expected {length}")
        pattern = self._normalize_pattern(pattern)
        if self.config.use_position_index:
            matching = self._index_lookup(length, pattern)
        else:
            matching = self._scan_lookup(length, pattern)
        return sorted(matching)

    def count_candidates(self, length: int, pattern: Optional[Pattern] = None) -> int:
        """Return the number of candidates matching the constraints."""

        return len(self.find_candidates(length, pattern))

    @staticmethod
    def _normalize_pattern(pattern: Optional[Pattern]) -> Optional[Tuple[Optional[str], ...]]:
        if pattern is None:
            return None
        return tuple(None if letter is None else letter.upper() for letter in pattern)

    def _scan_lookup(self, length: int, pattern: Optional[Pattern]) -> Set[str]:
        bucket = self._words_by_length.get(length, frozenset())
        if not pattern:
            return set(bucket)
        return {
            word
            for word in bucket
            if all(letter is None or letter == char for letter, char in zip(pattern, word))
        }

    def _index_lookup(self, length: int, pattern: Optional[Pattern]) -> Set[str]:
        """Use positional index to find matching words via set intersection."""
        bucket = self._words_by_length.get(length)
        if not bucket:
            return set()
        length_index = self._position_index.get(length, {})

        constraints: List[FrozenSet[str]] = []
        if pattern:
            for pos, letter in enumerate(pattern):
                if letter is not None:
                    match_set = length_index.get((pos, letter))
                    if match_set is None:
                        return set()
                    constraints.append(match_set)

        if not constraints:
            return set(bucket)

        # Intersect smallest sets first for speed
        constraints.sort(key=len)
        result = set(constraints[0])
        for group in constraints[1:]:
            result &= group
            if not result:
                return set()
        return result
