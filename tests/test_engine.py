import itertools
from collections import Counter

import pytest
from wordscramble.engine import Accepted, Reason, Rejected, graphemes, normalize, validate
from wordscramble.engine.validation import RULES


def always_true(word):
    return True


def always_false(word):
    return False


# --- normalize ---
@pytest.mark.parametrize("raw,expected", [
    ("Listen", "listen"),
    ("  silent  ", "silent"),
    ("s i\tl\nent", "silent"),
    ("TIN\r\n", "tin"),
    ("don't", "don't"),
    ("ÉCLAIR", "éclair"),
    ("ПРИВЕТ", "привет"),
    ("　word ", "word"),
    ("   ", ""),
])
def test_normalize_golden(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["Listen", " A b C ", "ÉCLAIR", "straße", "x y", ""])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_composes_accents():
    assert normalize("CAFE\u0301") == "caf\u00e9" == normalize("caf\u00e9")
    assert normalize("Cafe\u0301S") == normalize("caf\u00e9s")


def test_graphemes_glue_combining_marks():
    decomposed = "cafe\u0301"
    assert graphemes(decomposed) == ["c", "a", "f", "\u00e9"]
    assert graphemes("\u0301ab") == ["\u0301", "a", "b"]
    assert len(graphemes("naïve")) == 5


# --- validate: golden cases ---
def test_validate_anagram_accepted():
    d = validate("listen", [], "silent", always_true)
    assert d == Accepted("silent")
    assert d.accepted is True


def test_validate_three_letters_is_minimum():
    assert validate("listen", [], "tin", always_true) == Accepted("tin")


def test_validate_two_letters_too_short():
    d = validate("listen", [], "ti", always_true)
    assert isinstance(d, Rejected) and d.reason is Reason.TOO_SHORT


def test_validate_root_itself_rejected():
    d = validate("listen", [], "listen", always_true)
    assert d == Rejected(Reason.SAME_AS_ROOT, "listen")


def test_validate_root_compared_normalized():
    d = validate("Listen", [], "listen", always_true)
    assert d == Rejected(Reason.SAME_AS_ROOT, "Listen")


def test_letters_come_from_normalized_root():
    assert validate("LISTEN", [], "silent", always_true) == Accepted("silent")
    assert validate(" Li sten", [], "tin", always_true) == Accepted("tin")
    d = validate("Cab", [], "bb", always_true)
    assert d.reason is Reason.NOT_POSSIBLE
    assert d.message == "You can't spell that word from Cab!"


def test_validate_letters_used_once_each():
    d = validate("cab", [], "bb", always_true)
    assert d.reason is Reason.NOT_POSSIBLE


def test_validate_already_used():
    d = validate("listen", ["silent"], "silent", always_true)
    assert d.reason is Reason.ALREADY_USED


def test_validate_not_real():
    d = validate("listen", [], "lint", always_false)
    assert d.reason is Reason.NOT_A_REAL_WORD


def test_validate_accepts_precomputed_bool():
    assert validate("listen", [], "tins", True) == Accepted("tins")
    assert validate("listen", [], "tins", False).reason is Reason.NOT_A_REAL_WORD


def test_validate_oracle_failure_fails_closed(caplog):
    def broken(word):
        raise RuntimeError("spell checker offline")

    with caplog.at_level("WARNING"):
        d = validate("listen", [], "silent", broken)
    assert d.reason is Reason.NOT_A_REAL_WORD
    assert "treating as not real" in caplog.text


def test_validate_empty_candidate_is_a_precondition():
    with pytest.raises(ValueError):
        validate("listen", [], "", always_true)


def test_validate_does_not_mutate_used():
    used = ["tin"]
    validate("listen", used, "silent", always_true)
    assert used == ["tin"]


# --- rule precedence ---
def test_rule_order():
    assert [name for name, _, _ in RULES] == ["original", "possible", "real", "length", "not_root"]


@pytest.mark.parametrize("root,used,word,lookup,expected", [
    # used AND impossible -> used wins
    ("listen", ["zzz"], "zzz", always_false, Reason.ALREADY_USED),
    # impossible AND not real AND short -> impossible wins
    ("listen", [], "zq", always_false, Reason.NOT_POSSIBLE),
    # not real AND short -> not real wins
    ("listen", [], "ti", always_false, Reason.NOT_A_REAL_WORD),
    # root word that the dictionary doesn't know -> not real wins over same-as-root
    ("listen", [], "listen", always_false, Reason.NOT_A_REAL_WORD),
    # two-letter root submitted as itself -> short wins over same-as-root
    ("ox", [], "ox", always_true, Reason.TOO_SHORT),
])
def test_first_failing_rule_decides(root, used, word, lookup, expected):
    assert validate(root, used, word, lookup).reason is expected


# --- possibility matches multiset containment ---
def _is_sub_multiset(word, root):
    need, have = Counter(word), Counter(root)
    return all(have[c] >= n for c, n in need.items())


@pytest.mark.parametrize("root", ["cab", "listen", "banana", "aab"])
def test_not_possible_iff_not_sub_multiset(root):
    letters = sorted(set(root)) + ["z"]
    for n in range(1, 4):
        for combo in itertools.product(letters, repeat=n):
            word = "".join(combo)
            d = validate(root, [], word, always_true)
            impossible = isinstance(d, Rejected) and d.reason is Reason.NOT_POSSIBLE
            assert impossible == (not _is_sub_multiset(word, root)), (root, word)


def test_possible_with_unicode_letters():
    assert validate("ключница", [], "ключ", always_true) == Accepted("ключ")
    assert validate("café", [], "face", always_true).reason is Reason.NOT_POSSIBLE
    # composed root, decomposed input
    assert validate("caf\u00e9s", [], normalize("e\u0301cas"), always_true) == Accepted("\u00e9cas")


# --- user-facing texts ---
@pytest.mark.parametrize("reason,title,message", [
    (Reason.ALREADY_USED, "Word used already", "Be more original"),
    (Reason.NOT_POSSIBLE, "Word not possible", "You can't spell that word from listen!"),
    (Reason.NOT_A_REAL_WORD, "Word not recognized", "You can't just make them up, you know!"),
    (Reason.TOO_SHORT, "Word is too short", "Add some more letters"),
    (Reason.SAME_AS_ROOT, "Start word repeated", "You can't use the word we started with!"),
])
def test_rejection_texts(reason, title, message):
    r = Rejected(reason, "listen")
    assert r.title == title
    assert r.message == message
    assert r.accepted is False
