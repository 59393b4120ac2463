from pathlib import Path
from wordscramble.datasets import (
    pretty_summary,
    read_lines,
    unique_preserve_order,
    validate_start_words,
    write_lines,
)
from wordscramble.oracles import WordListDictionary, bundled_start_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_start_words_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["listen", "pineapple", "scramble"])

    rep = validate_start_words(str(p))
    assert rep["passed"] is True
    assert rep["file"]["count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "start=3" in s and s.endswith("| OK")


def test_validate_start_words_flags_format_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    # uppercase, embedded space, digits and a blank line are all invalid
    p.write_text("listen\nPineapple\nice cream\nabc123\n\nsilent\n", encoding="utf-8")

    rep = validate_start_words(str(p))
    assert rep["passed"] is False
    assert rep["file"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_start_words_short_and_duplicates(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["listen", "cab", "listen"])

    rep = validate_start_words(str(p), min_length=4)
    assert rep["passed"] is False
    assert rep["short_words"] == ["cab"]
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("shorter than 4" in msg for msg in rep["issues"])


def test_validate_start_words_with_dictionary(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["listen", "qwzxlmnop"])
    d = WordListDictionary(["listen"])

    rep = validate_start_words(str(p), dictionary=d)
    assert rep["dictionary_checked"] is True
    assert rep["unknown_words"] == ["qwzxlmnop"]
    assert "dict=yes unknown=1" in pretty_summary(rep)


def test_validate_start_words_missing_file(tmp_path: Path):
    rep = validate_start_words(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["file"]["exists"] is False
    assert "not found" in rep["issues"][0]


def test_bundled_start_words_pass_validation():
    rep = validate_start_words(str(bundled_start_words()))
    assert rep["passed"] is True, rep["issues"]


def test_read_write_lines_roundtrip_keeps_unicode(tmp_path: Path):
    p = write_lines(["ключница", "café"], tmp_path / "sub" / "words.txt")
    assert read_lines(p) == ["ключница", "café"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique_preserve_order(["Tin", "tin", "TIN"], key=str.lower) == ["Tin"]
