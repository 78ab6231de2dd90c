"""In-memory word lookup over the ECDICT dictionary and lemma rules."""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import replace
from types import MappingProxyType

from ecdict_lookup.assets import load_dictionary_bytes, load_lemma_bytes
from ecdict_lookup.models import DictEntry
from ecdict_lookup.parsers import ParseStats, parse_dictionary, parse_lemma

logger = logging.getLogger(__name__)

AssetLoader = Callable[[], bytes]


class DictionaryIndex:
    """Word -> DictEntry lookup with lemma fallback.

    Both maps are built on first use and then only read. Building is
    serialized by a lock; a map that came out empty is rebuilt on the next
    call, so a failed or empty load can be retried.

    Example:
        index = DictionaryIndex()
        entry = index.look_up("running")  # resolves via "run"
        if entry is not None:
            print(entry.phonetic)
    """

    def __init__(
        self,
        dictionary_loader: AssetLoader = load_dictionary_bytes,
        lemma_loader: AssetLoader = load_lemma_bytes,
    ) -> None:
        self._dictionary_loader = dictionary_loader
        self._lemma_loader = lemma_loader
        self._entries: Mapping[str, DictEntry] = MappingProxyType({})
        self._lemmas: Mapping[str, str] = MappingProxyType({})
        self._stats = ParseStats()
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        """Return True once both maps are populated."""
        return bool(self._entries) and bool(self._lemmas)

    @property
    def entries(self) -> Mapping[str, DictEntry]:
        """Read-only view of the word -> entry map."""
        self.ensure_loaded()
        return self._entries

    @property
    def lemmas(self) -> Mapping[str, str]:
        """Read-only view of the inflected form -> base word map."""
        self.ensure_loaded()
        return self._lemmas

    @property
    def stats(self) -> ParseStats:
        """Diagnostics from the most recent build."""
        return self._stats

    def ensure_loaded(self) -> None:
        """Build whichever map is still empty.

        Safe to call before every query; once both maps are populated this
        returns without taking the lock.
        """
        if self.is_loaded:
            return

        with self._lock:
            if not self._entries:
                self._build_entries()
            if not self._lemmas:
                self._build_lemmas()

    def _build_entries(self) -> None:
        stats = ParseStats()
        entries = parse_dictionary(self._dictionary_loader(), stats)
        self._entries = MappingProxyType(entries)
        self._stats = replace(
            self._stats,
            rows_read=stats.rows_read,
            entries=stats.entries,
            skipped_field_count=stats.skipped_field_count,
            skipped_empty_word=stats.skipped_empty_word,
            skipped_header=stats.skipped_header,
        )

        logger.info(
            "Loaded %d dictionary entries (%d keys) from %d rows",
            stats.entries,
            len(entries),
            stats.rows_read,
        )
        if stats.skipped_rows:
            logger.debug(
                "Skipped %d rows: %d wrong field count, %d empty word, %d header",
                stats.skipped_rows,
                stats.skipped_field_count,
                stats.skipped_empty_word,
                stats.skipped_header,
            )

    def _build_lemmas(self) -> None:
        stats = ParseStats()
        lemmas = parse_lemma(self._lemma_loader(), stats)
        self._lemmas = MappingProxyType(lemmas)
        self._stats = replace(
            self._stats,
            lemma_lines=stats.lemma_lines,
            lemma_rules=stats.lemma_rules,
            skipped_comments=stats.skipped_comments,
            skipped_malformed=stats.skipped_malformed,
        )

        logger.info("Loaded %d lemma forms from %d rules", len(lemmas), stats.lemma_rules)
        if stats.skipped_malformed:
            logger.debug("Skipped %d malformed lemma lines", stats.skipped_malformed)

    def resolve(self, word: str) -> str:
        """Return the dictionary key a query word is looked up under.

        The word is trimmed, then replaced by its base form when a lemma
        rule covers it. A lemma rule wins even if the trimmed word is itself
        a dictionary headword.
        """
        self.ensure_loaded()
        word = word.strip()
        return self._lemmas.get(word, word)

    def look_up(self, word: str) -> DictEntry | None:
        """Find the entry for a word, following lemma rules.

        No case folding happens here: "CAT" only matches if "CAT" itself
        (or a lemma rule for it) is in the index. Returns None when nothing
        matches.
        """
        key = self.resolve(word)
        return self._entries.get(key)


_default_index: DictionaryIndex | None = None
_default_index_lock = threading.Lock()


def get_index() -> DictionaryIndex:
    """Return the process-wide index over the bundled assets."""
    global _default_index
    if _default_index is None:
        with _default_index_lock:
            if _default_index is None:
                _default_index = DictionaryIndex()
    return _default_index


def look_up(word: str) -> DictEntry | None:
    """Look up a word in the process-wide index."""
    return get_index().look_up(word)
