"""lexitrie CLI - Lexical dictionary for word games.

Usage:
    python -m lexitrie.main --data-dir ./data --masked "c?t" --synonyms finally
    python -m lexitrie.main --data-dir ./data --rebuild --workers 8
"""

import argparse
import sys
from pathlib import Path

from tqdm import tqdm

from . import config as cfg
from .lexicon import Lexicon


class ProgressBars:
    """tqdm bar per build stage."""

    def __init__(self, disable: bool = False):
        self.disable = disable
        self._bars: list[tqdm] = []

    def __call__(self, title: str, total: int):
        bar = tqdm(total=total, desc=title, unit="word", disable=self.disable)
        self._bars.append(bar)
        return bar.update

    def close(self) -> None:
        for bar in self._bars:
            bar.close()
        self._bars.clear()


def print_words(title: str, words: list[str], limit: int) -> None:
    print(f"\n{title} ({len(words):,})")
    for word in words[:limit]:
        print(f"  {word}")
    if len(words) > limit:
        print(f"  ... {len(words) - limit:,} more")


def main() -> int:
    """Main entry point."""
    # Load defaults from config.json
    defaults = cfg.load()["defaults"]

    parser = argparse.ArgumentParser(
        description="lexitrie - Lexical dictionary for word games"
    )
    parser.add_argument(
        "--data-dir",
        "-d",
        type=Path,
        default=Path(defaults.get("data_dir", "data")),
        help="Directory holding the source files and snapshot",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        help="Snapshot file (default: <data-dir>/lexicon.pickle)",
    )
    parser.add_argument(
        "--rebuild",
        "-r",
        action="store_true",
        help="Ignore the snapshot and rebuild from source files",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=defaults.get("workers", 0),
        help=f"Threads for linking and curation (default: {defaults.get('workers', 0)})",
    )
    parser.add_argument(
        "--no-wordnet-words",
        action="store_true",
        help="Don't add WordNet lemmas to the word list",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=defaults.get("quiet", False),
        help="Only print query results",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=50,
        help="Maximum results printed per query (default: 50)",
    )
    parser.add_argument("--find", help="Exact word lookup")
    parser.add_argument("--masked", help="Fixed-length pattern, '?' matches any letter")
    parser.add_argument("--starts-with", help="Words beginning with a prefix")
    parser.add_argument("--ends-with", help="Words ending with a suffix")
    parser.add_argument("--synonyms", help="Curated synonyms of a word")
    parser.add_argument("--lemma", help="Lemma and inflections of a word")

    args = parser.parse_args()

    overrides = {
        "workers": args.workers,
        "verbose": not args.quiet,
    }
    if args.snapshot:
        overrides["snapshot"] = args.snapshot
    if args.no_wordnet_words:
        overrides["include_wordnet_words"] = False
    config = cfg.LexiconConfig.from_defaults(args.data_dir, **overrides)

    if not args.quiet:
        print("=" * 60)
        print("lexitrie - Lexical Dictionary")
        print("=" * 60)
        print(f"Data: {args.data_dir}")
        print(f"Snapshot: {config.snapshot}")
        print()

    bars = ProgressBars(disable=args.quiet)
    try:
        lexicon = Lexicon.open(config, rebuild=args.rebuild, progress=bars)
    except FileNotFoundError as e:
        print(f"ERROR - missing source file: {e.filename}", file=sys.stderr)
        return 1
    finally:
        bars.close()

    if not args.quiet:
        print(f"\n{lexicon!r}")
        if lexicon.report:
            link = lexicon.report.link
            curation = lexicon.report.curation
            print(f"  Lemmas: {link.lemmas:,}  Inflections: {link.inflections:,}")
            print(
                f"  Words with synonyms: {curation.with_synonyms:,}  "
                f"Synonyms: {curation.synonyms:,}  Rejected: {curation.rejected:,}"
            )

    if args.find:
        print_words(f"find {args.find!r}", lexicon.find(args.find), args.limit)
    if args.masked:
        print_words(f"masked {args.masked!r}", lexicon.find_masked(args.masked), args.limit)
    if args.starts_with is not None:
        print_words(
            f"starting with {args.starts_with!r}",
            lexicon.find_starting_with(args.starts_with),
            args.limit,
        )
    if args.ends_with is not None:
        print_words(
            f"ending with {args.ends_with!r}",
            lexicon.find_ending_with(args.ends_with),
            args.limit,
        )
    if args.synonyms:
        print_words(f"synonyms of {args.synonyms!r}", lexicon.synonyms(args.synonyms), args.limit)
    if args.lemma:
        lemma = lexicon.lemma(args.lemma)
        print(f"\nlemma of {args.lemma!r}: {lemma}")
        for name, form in sorted(lexicon.inflections(lemma or args.lemma).items()):
            print(f"  {name}: {form}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
