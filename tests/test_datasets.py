from pathlib import Path

import pytest
from packages.datasets import load_dictionary, pretty_summary, summarize_dictionary, write_lines


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_dictionary_keeps_order_and_case(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\r\nStare\n\n  \nraise  \n")
    assert load_dictionary(p) == ["crane", "Stare", "raise"]


def test_load_dictionary_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")


def test_write_lines_roundtrip(tmp_path: Path):
    p = tmp_path / "out" / "words.txt"
    written = write_lines(["crane", "trace"], p)
    assert written == str(p)
    assert p.read_text(encoding="utf-8") == "crane\ntrace\n"
    assert load_dictionary(p) == ["crane", "trace"]


def test_summarize_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "crane", "letter"])
    rep = summarize_dictionary(p)
    assert rep["exists"] is True
    assert rep["count"] == 4
    assert rep["unique_count"] == 3
    assert rep["lengths"] == {5: 3, 6: 1}
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and "uniq=3" in s


def test_summarize_missing_dictionary(tmp_path: Path):
    rep = summarize_dictionary(tmp_path / "nope.txt")
    assert rep["exists"] is False and rep["count"] == 0
    assert pretty_summary(rep).endswith("MISSING")


def test_load_dictionary_skips_undecodable_lines(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\n\xff\xfeab\ntrace\n")
    assert load_dictionary(p) == ["crane", "trace"]


def test_load_dictionary_directory_is_an_os_error(tmp_path: Path):
    with pytest.raises(OSError):
        load_dictionary(tmp_path)
