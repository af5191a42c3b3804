"""
Dictionary summary for wordle-filter.

What this module does:
- Describe a word list file: how many words, how many unique, which lengths.
- Compute SHA-256 of the raw file so runs can be tied to an exact list.
- Return a machine-readable dict and provide a pretty one-line summary.

Nothing here rejects words: a dictionary with mixed lengths is legal, words
whose length differs from a guess simply never match it.

Typical use:
    from packages.datasets import summarize_dictionary, pretty_summary
    rep = summarize_dictionary("wordle-La.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict
import hashlib

from .io import load_dictionary


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of words after dropping blank lines
    unique_count: int    # distinct words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> count


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def summarize_dictionary(path: str | Path) -> Dict:
    """
    Summarize the word list at `path`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256 and a word-length histogram. A missing file yields
        exists=False and zero counts rather than an exception.
    """
    p = Path(path)
    if not p.exists():
        return asdict(DictionaryReport(str(path), False, 0, 0, ""))

    words = load_dictionary(p)
    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        sha256=_sha256_file(p),
        lengths=dict(sorted(Counter(len(w) for w in words).items())),
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        wordle-La.txt | words=2315 (uniq=2315, sha=abc123def456) | lengths={5: 2315}
    """
    if not report["exists"]:
        return f"{report['path']} | MISSING"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | lengths={report['lengths']}"
    )
