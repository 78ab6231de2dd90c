"""Parse diagnostics for the ECDICT asset parsers."""

from dataclasses import dataclass


@dataclass
class ParseStats:
    """Counters collected while parsing the dictionary and lemma assets.

    Parsing never fails on a bad row; these counts are the only record of
    what was dropped.
    """

    rows_read: int = 0
    entries: int = 0
    skipped_field_count: int = 0
    skipped_empty_word: int = 0
    skipped_header: int = 0
    lemma_lines: int = 0
    lemma_rules: int = 0
    skipped_comments: int = 0
    skipped_malformed: int = 0

    @property
    def skipped_rows(self) -> int:
        """Return the number of dictionary rows that produced no entry."""
        return self.skipped_field_count + self.skipped_empty_word + self.skipped_header
