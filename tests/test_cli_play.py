from apps.cli.play import render, repl
from wordscramble.game import GameSession
from wordscramble.oracles import WordListDictionary, fixed_source


def _session():
    return GameSession(WordListDictionary(["silent", "tin", "listen", "tinsel"]),
                       word_source=fixed_source("listen"))


def test_render_lists_newest_first_with_counts():
    s = _session()
    s.new_game()
    s.submit("tin")
    s.submit("silent")
    assert render(s) == "== listen ==\n  6  silent\n  3  tin"


def test_repl_plays_a_game():
    out = []
    found = repl(_session(), ["tin", "", "tin", "zz", "silent", ":quit", "tinsel"], out=out.append)
    assert found == 2
    assert out[0] == "== listen =="
    assert "Word used already: Be more original" in out
    assert "Word not possible: You can't spell that word from listen!" in out
    assert out[-1].startswith("== listen ==\n  6  silent")


def test_repl_new_game_clears_words():
    out = []
    repl(_session(), ["tin", ":new"], out=out.append)
    assert out[-1] == "== listen =="
