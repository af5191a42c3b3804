"""
Download a word list and write it as a wordle-filter dictionary.

What it does:
- Downloads the page (HTML or plain text).
- Takes its visible text and extracts every standalone N-letter word.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_wordlist --out wordle-La.txt
    # a different page or word length, alphabetically sorted:
    python -m script.fetch_wordlist --url https://example.org/words.txt --N 6 --sort --out words6.txt
"""

import argparse
import re

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

from packages.datasets import write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, N: int = 5, upper_only: bool = False) -> list[str]:
    """
    Standalone alphabetic tokens of exactly N letters, lowercased, first occurrence kept.
    With upper_only, only tokens written in capitals count (the default page
    lists answers that way, surrounded by ordinary prose).
    """
    letters = "A-Z" if upper_only else "A-Za-z"
    word_re = re.compile(rf"\b[{letters}]{{{N}}}\b")
    return unique_preserve_order(m.group(0).lower() for m in word_re.finditer(text))


def fetch_words(url: str = URL, N: int = 5, upper_only: bool = False) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    else:
        text = r.text
    return extract_words(text, N, upper_only)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for wordle-filter")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", default="wordle-La.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    ap.add_argument("--upper-only", action="store_true",
                    help="keep only words written in capitals on the page")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N, args.upper_only)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
