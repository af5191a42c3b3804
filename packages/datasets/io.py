from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def load_dictionary(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list, one word per line, keeping file order.
    Trailing whitespace (including CR/LF) is stripped and blank lines dropped;
    words are otherwise kept as written (matching is case-sensitive).
    Lines that are not valid UTF-8 are skipped, the rest of the file is kept.
    Raises FileNotFoundError if the path doesn't exist, OSError if it can't be read.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    words: List[str] = []
    for raw in p.read_bytes().splitlines():
        try:
            w = raw.decode("utf-8").rstrip()
        except UnicodeDecodeError:
            continue
        if w:
            words.append(w)
    return words


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)
