"""Command-line interface for ECDICT word lookup."""

import argparse
import json
import logging
import sys
from pathlib import Path

from ecdict_lookup.assets import file_loader, load_dictionary_bytes, load_lemma_bytes
from ecdict_lookup.download import download_all
from ecdict_lookup.index import AssetLoader, DictionaryIndex
from ecdict_lookup.models import DictEntry
from ecdict_lookup.parsers import DictionaryLoadError


def _resolve_loader(path: str | None, default: AssetLoader) -> AssetLoader | None:
    """Return a loader for an override file, the default loader, or None if missing."""
    if path is None:
        return default

    file_path = Path(path)
    if not file_path.exists():
        print(f"Error: Input file not found: {file_path}", file=sys.stderr)
        return None
    return file_loader(file_path)


def _build_index(args: argparse.Namespace) -> DictionaryIndex | None:
    dictionary_loader = _resolve_loader(args.dictionary, load_dictionary_bytes)
    lemma_loader = _resolve_loader(args.lemma, load_lemma_bytes)
    if dictionary_loader is None or lemma_loader is None:
        return None

    index = DictionaryIndex(dictionary_loader, lemma_loader)
    try:
        index.ensure_loaded()
    except DictionaryLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None
    return index


def _format_entry(entry: DictEntry) -> str:
    """Render an entry for the terminal."""
    lines = [entry.word]
    if entry.phonetic:
        lines[0] += f" [{entry.phonetic}]"
    if entry.definition:
        lines.extend(f"  {line}" for line in entry.definition.splitlines())
    if entry.translation:
        lines.extend(f"  {line}" for line in entry.translation.splitlines())

    extras = [
        ("pos", entry.pos),
        ("collins", entry.collins),
        ("oxford", entry.oxford),
        ("tag", entry.tag),
        ("bnc", entry.bnc),
        ("frq", entry.frq),
        ("exchange", entry.exchange),
    ]
    for label, value in extras:
        if value:
            lines.append(f"  {label}: {value}")
    return "\n".join(lines)


def cmd_lookup(args: argparse.Namespace) -> int:
    """Look up one or more words."""
    index = _build_index(args)
    if index is None:
        return 1

    missing = 0
    found: list[dict[str, str]] = []
    for word in args.words:
        entry = index.look_up(word)
        if entry is None:
            print(f"Not found: {word}", file=sys.stderr)
            missing += 1
            continue

        if args.json:
            found.append(entry.to_dict())
        else:
            print(_format_entry(entry))
            print()

    if args.json:
        print(json.dumps(found, ensure_ascii=False, indent=2))

    return 1 if missing else 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Show index statistics."""
    index = _build_index(args)
    if index is None:
        return 1

    stats = index.stats
    print("Dictionary:")
    print(f"  Rows read:          {stats.rows_read:,}")
    print(f"  Entries:            {stats.entries:,}")
    print(f"  Lookup keys:        {len(index.entries):,}")
    print(f"  Skipped (fields):   {stats.skipped_field_count:,}")
    print(f"  Skipped (no word):  {stats.skipped_empty_word:,}")
    print(f"  Skipped (header):   {stats.skipped_header:,}")
    print()
    print("Lemma rules:")
    print(f"  Lines read:         {stats.lemma_lines:,}")
    print(f"  Rules:              {stats.lemma_rules:,}")
    print(f"  Inflected forms:    {len(index.lemmas):,}")
    print(f"  Skipped (comment):  {stats.skipped_comments:,}")
    print(f"  Skipped (invalid):  {stats.skipped_malformed:,}")
    return 0


def cmd_download(args: argparse.Namespace) -> int:
    """Fetch the full upstream assets."""
    dest_dir = Path(args.output_dir) if args.output_dir else None
    download_all(force=args.force, dest_dir=dest_dir)
    return 0


def _add_asset_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Path to an ecdict.csv to use instead of the bundled one",
    )
    parser.add_argument(
        "--lemma",
        type=str,
        default=None,
        help="Path to a lemma.en.txt to use instead of the bundled one",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Look up English words in ECDICT",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # lookup subcommand
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up words, resolving inflected forms to their base word",
    )
    lookup_parser.add_argument("words", nargs="+", help="Words to look up")
    lookup_parser.add_argument(
        "--json",
        action="store_true",
        help="Print entries as JSON",
    )
    _add_asset_arguments(lookup_parser)
    lookup_parser.set_defaults(func=cmd_lookup)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show dictionary and lemma statistics",
    )
    _add_asset_arguments(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # download subcommand
    download_parser = subparsers.add_parser(
        "download",
        help="Download the full ECDICT dictionary and lemma rules",
    )
    download_parser.add_argument(
        "--force",
        action="store_true",
        help="Re-download even if files already exist (needed to replace the bundled samples)",
    )
    download_parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write to (default: the package data directory)",
    )
    download_parser.set_defaults(func=cmd_download)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
