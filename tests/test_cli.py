import io

import pytest

from tudien.cli import (
    ADDED_MESSAGE,
    HISTORY_CLEARED_MESSAGE,
    NOT_FOUND_PLAIN,
    REMOVED_MESSAGE,
    main,
)
from tudien.dictionary import (
    SUGGESTION_HEADER,
    Dictionary,
    DuplicateWordError,
    EmptyMeaningError,
    EmptyWordError,
    WordNotFoundError,
)
from tudien.history import SearchHistory


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "Tudien", tmp_path / "history"


def run(paths, *args):
    dict_path, history_path = paths
    return main(["--dict", str(dict_path), "--history", str(history_path), *args])


def test_add_then_search(paths, capsys):
    assert run(paths, "add", "cat", "con mèo") == 0
    assert ADDED_MESSAGE in capsys.readouterr().out
    assert run(paths, "search", "cat") == 0
    assert capsys.readouterr().out.strip() == "con mèo"


def test_search_records_history(paths, capsys):
    run(paths, "add", "cat", "con mèo")
    run(paths, "search", "cat")
    run(paths, "search", "dog")
    assert SearchHistory(paths[1]).entries() == ["cat", "dog"]


def test_search_missing_word(paths, capsys):
    assert run(paths, "search", "ghost") == 1
    assert WordNotFoundError.message in capsys.readouterr().err


def test_search_empty_word_not_recorded(paths, capsys):
    assert run(paths, "search", "") == 1
    assert EmptyWordError.message in capsys.readouterr().err
    assert SearchHistory(paths[1]).entries() == []


def test_add_duplicate_and_empty_meaning(paths, capsys):
    run(paths, "add", "cat", "con mèo")
    capsys.readouterr()
    assert run(paths, "add", "cat", "khác") == 1
    assert DuplicateWordError.message in capsys.readouterr().err
    assert run(paths, "add", "dog", "") == 1
    assert EmptyMeaningError.message in capsys.readouterr().err
    assert Dictionary(paths[0]).lookup("cat") == "con mèo"


def test_delete(paths, capsys):
    run(paths, "add", "cat", "con mèo")
    assert run(paths, "delete", "cat") == 0
    assert REMOVED_MESSAGE in capsys.readouterr().out
    assert "cat" not in Dictionary(paths[0])
    assert run(paths, "delete", "cat") == 1
    assert WordNotFoundError.message in capsys.readouterr().err


def test_complete(paths, capsys):
    for word in ["car", "card", "care", "dog"]:
        run(paths, "add", word, "nghĩa")
    capsys.readouterr()
    assert run(paths, "complete", "car") == 0
    assert capsys.readouterr().out.split() == Dictionary(paths[0]).complete("car")


def test_suggest_missing_word(paths, capsys):
    for word in ["bat", "bed", "bit"]:
        run(paths, "add", word, "nghĩa")
    capsys.readouterr()
    assert run(paths, "suggest", "bax") == 0
    out = capsys.readouterr().out
    assert out.startswith(SUGGESTION_HEADER)
    assert out[len(SUGGESTION_HEADER):].split() == Dictionary(paths[0]).suggest("bax")


def test_history_show_and_clear(paths, capsys):
    run(paths, "add", "cat", "con mèo")
    run(paths, "search", "cat")
    capsys.readouterr()
    assert run(paths, "history") == 0
    assert capsys.readouterr().out == "cat\n"
    assert run(paths, "history", "--clear") == 0
    assert HISTORY_CLEARED_MESSAGE in capsys.readouterr().out
    assert SearchHistory(paths[1]).entries() == []


def test_load_database(paths, tmp_path, capsys):
    database = tmp_path / "database"
    database.write_text("@cat /kæt/\n con mèo\n@dog /dɔg/\n con chó\n", encoding="utf-8")
    assert run(paths, "load", str(database)) == 0
    stored = Dictionary(paths[0])
    assert sorted(stored) == ["cat", "dog"]
    assert stored.lookup("cat").startswith("/kæt/")


def test_load_then_ask(paths, tmp_path, capsys, monkeypatch):
    database = tmp_path / "database"
    database.write_text("@cat /kæt/\n con mèo\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("ghost\n"))
    assert run(paths, "load", str(database), "--ask") == 0
    assert NOT_FOUND_PLAIN in capsys.readouterr().out


def test_load_missing_database(paths, tmp_path, capsys):
    assert run(paths, "load", str(tmp_path / "absent")) == 1
    assert capsys.readouterr().err != ""
    assert not paths[0].exists()