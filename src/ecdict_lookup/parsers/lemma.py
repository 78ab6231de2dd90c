"""Parse the ECDICT lemma rule file (lemma.en.txt)."""

import io
import logging

from ecdict_lookup.parsers.stats import ParseStats

logger = logging.getLogger(__name__)

RULE_SEPARATOR = " -> "
COMMENT_PREFIX = ";"


def parse_lemma(data: bytes, stats: ParseStats | None = None) -> dict[str, str]:
    """Parse lemma rules into an inflected form -> base word mapping.

    Format: one rule per line, ";" starts a comment.
    Example: "run/1234 -> ran,running,runs" maps "ran", "running" and
    "runs" to "run". Only the first "/" token on the left is used; the
    rest is frequency or variant data.

    Later rules overwrite earlier ones for the same form.
    """
    if stats is None:
        stats = ParseStats()

    result: dict[str, str] = {}
    text = data.decode("utf-8-sig", errors="replace")
    for line in io.StringIO(text):
        line = line.strip()
        if not line:
            continue
        stats.lemma_lines += 1

        if line.startswith(COMMENT_PREFIX):
            stats.skipped_comments += 1
            continue

        parts = line.split(RULE_SEPARATOR)
        if len(parts) != 2:
            stats.skipped_malformed += 1
            continue

        left, right = parts
        base = left.split("/")[0].strip()
        if not base:
            stats.skipped_malformed += 1
            logger.debug("Skipping lemma rule with empty base word: %r", line)
            continue

        stats.lemma_rules += 1
        for form in right.split(","):
            form = form.strip()
            if form:
                result[form] = base

    return result
