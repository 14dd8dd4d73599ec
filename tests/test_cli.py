# tests/test_cli.py - CLI command loop and one-shot commands
import io

import pytest

from trie_dictionary.cli import CLI, main
from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.config_manager import Config


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("hello\nhelp\n\nworld\nword\n", encoding="utf8")
    return str(path)


def run_session(lines, store=None):
    out = io.StringIO()
    cli = CLI(store=store or Trie(), cfg=Config(), stdin=io.StringIO(lines), stdout=out)
    cli.start()
    return cli, out.getvalue()


def test_session_insert_search_delete():
    cli, out = run_session("cat car\n/search cat\n/delete cat\n/search cat\n/quit\n")
    assert "cat\tadded" in out
    assert "cat\tfound" in out
    assert "cat\tdeleted" in out
    assert "cat\tnot found" in out
    assert out.rstrip().endswith("bye.")
    assert cli.store.get_all_words() == ["car"]


def test_session_suggest_and_spell():
    _, out = run_session("/insert hello world\n/suggest he\n/spell worl\n/spell jello\n")
    # each result follows the ">> " prompt of its command
    assert ">> hello\n" in out
    assert ">> world\n" in out
    assert ">> (none)\n" in out


def test_session_reports_invalid_word():
    _, out = run_session('/spell ""\n')
    assert "error: word must be a non-empty string" in out


def test_session_unknown_command():
    _, out = run_session("/frobnicate\n")
    assert "unknown cmd" in out


def test_session_tree_and_stats():
    _, out = run_session("/insert ab\n/tree\n/stats\n")
    assert "root\n└─ a\n   └─ b *\n" in out
    assert "words      1" in out


def test_session_config_changes_limit():
    _, out = run_session("/insert aa ab ac\n/config max_suggestions 1\n/suggest a\n")
    assert "max_suggestions = 1" in out
    assert "... (2 more)" in out


def test_main_one_shot_with_words_file(words_file):
    out = io.StringIO()
    assert main(["--words", words_file, "suggest", "hel"], stdout=out) == 0
    assert out.getvalue().splitlines() == ["hello", "help"]


def test_main_one_shot_unknown_command(words_file):
    out = io.StringIO()
    assert main(["--words", words_file, "bogus"], stdout=out) == 1


def test_main_missing_words_file(tmp_path):
    out = io.StringIO()
    assert main(["--words", str(tmp_path / "missing.txt"), "words"], stdout=out) == 1
    assert "cannot read" in out.getvalue()


def test_main_interactive_until_eof(words_file):
    out = io.StringIO()
    assert main(["--words", words_file], stdin=io.StringIO("/words\n"), stdout=out) == 0
    text = out.getvalue()
    assert text.startswith("Trie Dictionary")
    assert ">> hello\nhelp\nword\nworld\n" in text
    assert text.rstrip().endswith("bye.")


def test_session_negative_edit_distance_is_rejected():
    cli, out = run_session("/insert world\n/config max_edit_distance -1\n/spell worl\n/search world\n")
    assert "bad val: max_edit_distance must be >= 0" in out
    assert cli.cfg.get("max_edit_distance") == 2
    # the loop keeps going after the rejected setting
    assert ">> world\n" in out
    assert "world\tfound" in out


def test_session_spell_value_error_is_reported():
    cfg = Config()
    # bypass Config.set to simulate a bad value reaching the trie
    cfg.data["max_edit_distance"] = -1
    out = io.StringIO()
    cli = CLI(store=Trie(["world"]), cfg=cfg, stdin=io.StringIO("/spell worl\n/search world\n"), stdout=out)
    cli.start()
    text = out.getvalue()
    assert "error: max_distance must be >= 0" in text
    assert "world\tfound" in text


@pytest.mark.parametrize("cmd,usage", [
    ("/insert", "usage: /insert <word> [word ...]"),
    ("/delete", "usage: /delete <word> [word ...]"),
    ("/search", "usage: /search <word>"),
    ("/spell", "usage: /spell <word>"),
])
def test_session_missing_arguments_prints_usage(cmd, usage):
    _, out = run_session(cmd + "\n")
    assert usage in out
    assert "unknown cmd" not in out
