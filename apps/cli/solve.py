# apps/cli/solve.py
"""
CLI entry point for filtering a dictionary with Wordle feedback.

Two modes:
  1) Batch: one or more --guess/--pattern pairs on the command line; prints the
     matching words and exits.
  2) Interactive: reads guesses and patterns from the terminal, narrowing the
     candidate list after each one. Commands:
       show  - print the current candidates
       new   - reset to the full dictionary
       exit  - quit (an empty line quits too)

Interactive mode is used when no guess is given.

Usage:
    python -m apps.cli.solve -d wordle-La.txt -g crate -p ybbgy
    python -m apps.cli.solve -d wordle-La.txt -g crate -p ybbgy -g lousy -p bbbbg
    python -m apps.cli.solve -d wordle-La.txt            # interactive
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from tqdm import tqdm

from packages.datasets import load_dictionary, pretty_summary, summarize_dictionary, write_lines
from packages.engine import InvalidObservation, filter_candidates, score, validate_observation
from packages.session import Session

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "wordle-La.txt"

BANNER = (
    "Wordle solver: filters the word list by the hints you got.\n"
    "Enter your guess, then the pattern Wordle showed for it.\n"
    "Pattern: one symbol per letter, g (green), y (yellow), b (black), e.g. ybbgy.\n"
    "Commands:\n"
    "  show  - print the current list of matching words\n"
    "  new   - reset the filter to the full dictionary\n"
    "  exit  - quit\n"
)
GUESS_PROMPT = "Enter guess (or command show/new/exit): "
PATTERN_PROMPT = "Enter pattern (e.g. ybbgy): "


def _print_words(words: List[str], write: Callable[[str], None] = print) -> None:
    write(f"Matching words: {len(words)}:")
    for w in words:
        write(w)


def interactive_loop(
        session: Session,
        *,
        answer: Optional[str] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
) -> None:
    """
    Read-eval-print loop over one Session.

    If `answer` is given, patterns are not read but computed with
    score(guess, answer). End of input behaves like `exit`.
    """
    write(BANNER)
    while True:
        try:
            cmd = read(GUESS_PROMPT).strip()
        except EOFError:
            break

        if not cmd or cmd.lower() == "exit":
            break
        if cmd.lower() == "show":
            _print_words(session.list(), write)
            continue
        if cmd.lower() == "new":
            session.reset()
            write(f"Word list reset. {len(session)} words in total.")
            continue

        guess = cmd
        if answer is not None:
            try:
                pattern = score(guess, answer)
            except ValueError as e:
                write(f"Error: {e}")
                continue
            write(f"Pattern: {pattern}")
        else:
            try:
                pattern = read(PATTERN_PROMPT).strip()
            except EOFError:
                break
            if not pattern:
                break

        try:
            session.apply(guess, pattern)
        except InvalidObservation as e:
            write(f"Error: {e}")
            continue

        write(f"Matching words: {len(session)}.")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordle-filter",
        description="Wordle solver: filter a word list by guess/pattern hints.",
        epilog="Pattern format: one of g (green), y (yellow), b (black) per letter, e.g. ybbgy.",
    )
    ap.add_argument("-d", "--dictionary", default=DEFAULT_DICTIONARY,
                    help="word list, one word per line (default: %(default)s)")
    ap.add_argument("-g", "--guess", action="append",
                    help="a guess, e.g. crate (repeat with --pattern for several turns)")
    ap.add_argument("-p", "--pattern", action="append",
                    help="result pattern for the matching --guess, e.g. ybbgy")
    ap.add_argument("-i", "--interactive", action="store_true",
                    help="interactive mode (default when no guess is given)")
    ap.add_argument("--answer",
                    help="known answer; patterns are computed from it instead of typed")
    ap.add_argument("--lenient", action="store_true",
                    help="do not validate patterns (unknown symbols match anything)")
    ap.add_argument("--out", help="also write the matching words to this file (batch mode)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar while filtering in batch mode (auto=bar on a terminal)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parse CLI args, load the dictionary, then run batch or interactive mode.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    guesses: List[str] = args.guess or []
    patterns: List[str] = args.pattern or []
    if args.answer and guesses and not patterns:
        try:
            patterns = [score(g, args.answer) for g in guesses]
        except ValueError as e:
            ap.error(str(e))
    if len(guesses) != len(patterns):
        ap.error("every --guess needs a matching --pattern")

    # 1) Load the dictionary (fatal if missing)
    try:
        dictionary = load_dictionary(args.dictionary)
    except FileNotFoundError:
        raise SystemExit(f"Dictionary not found: {args.dictionary}")
    except OSError as e:
        raise SystemExit(f"Cannot read dictionary {args.dictionary}: {e}")
    if log.isEnabledFor(logging.INFO):
        log.info(pretty_summary(summarize_dictionary(args.dictionary)))

    observations = list(zip(guesses, patterns))
    if not args.lenient:
        try:
            observations = [validate_observation(g, p) for g, p in observations]
        except InvalidObservation as e:
            ap.error(str(e))

    # 2) Interactive mode, starting from any observations given as flags
    if args.interactive or not guesses:
        session = Session(dictionary, strict=not args.lenient)
        for g, p in observations:
            session.apply(g, p)
        interactive_loop(session, answer=args.answer)
        return

    # 3) Batch mode
    log.debug("applying %d observation(s) to %d words", len(observations), len(dictionary))

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    words = tqdm(dictionary, ncols=80, desc="Filtering", unit="word") if mode == "bar" else dictionary

    result = filter_candidates(words, observations)
    _print_words(result)

    if args.out:
        print(f"Wrote: {write_lines(result, args.out)}")


if __name__ == "__main__":
    main()
