import pytest

from tudien.dictionary import Dictionary
from tudien.loader import load_database, parse_database

SAMPLE = "@hello /hə'ləʊ/\n* thán từ\n- chào\n@world\n- thế giới\n"


def test_parse_example():
    assert list(parse_database(SAMPLE)) == [
        ("hello", "/hə'ləʊ/\n* thán từ\n- chào\n"),
        ("world", "- thế giới\n"),
    ]


def test_parse_last_record_without_newline():
    assert list(parse_database("@a /x/ b")) == [("a", "/x/ b")]


def test_parse_empty():
    assert list(parse_database("")) == []


def test_load_into_dictionary(tmp_path):
    path = tmp_path / "database"
    path.write_text(SAMPLE, encoding="utf-8")
    d = Dictionary()
    assert load_database(d, path) == 2
    assert list(d) == ["hello", "world"]
    assert d.lookup("world") == "- thế giới\n"


def test_load_merges_repeated_words(tmp_path):
    path = tmp_path / "database"
    path.write_text("@cat /kæt/\n- con mèo\n@cat /kæt/\n- mèo đực\n", encoding="utf-8")
    d = Dictionary()
    load_database(d, path)
    assert len(d) == 1
    assert d.lookup("cat") == "/kæt/\n- con mèo\n/kæt/\n- mèo đực\n"


def test_load_appends_to_existing_entry(tmp_path):
    path = tmp_path / "database"
    path.write_text("@dog\n- con chó\n", encoding="utf-8")
    d = Dictionary()
    d.add("dog", "chó; ")
    load_database(d, path)
    assert d.lookup("dog") == "chó; - con chó\n"


def test_load_keeps_empty_meaning(tmp_path):
    path = tmp_path / "database"
    path.write_text("@lonely\n@next\n- tiếp\n", encoding="utf-8")
    d = Dictionary()
    load_database(d, path)
    assert d.lookup("lonely") == ""
    assert d.lookup("next") == "- tiếp\n"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_database(Dictionary(), tmp_path / "absent")