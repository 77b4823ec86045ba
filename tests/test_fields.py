import io

import pytest

from tudien.fields import MAXLEN, InputStruct, new_inputstruct, pipe_inputstruct


def test_fields_split_on_whitespace():
    reader = InputStruct(io.StringIO("  one\ttwo   three\n"), "mem")
    fields = reader.get_line()
    assert fields == ["one", "two", "three"]
    assert reader.nf == 3
    assert reader.line == 1
    assert reader.text == "  one\ttwo   three\n"


def test_end_of_input_sets_negative_count():
    reader = InputStruct(io.StringIO("a\n"), "mem")
    reader.get_line()
    assert reader.get_line() is None
    assert reader.nf == -1
    assert reader.line == 1


def test_blank_line_has_no_fields():
    reader = InputStruct(io.StringIO("\n  \nx\n"), "mem")
    assert reader.get_line() == []
    assert reader.get_line() == []
    assert reader.get_line() == ["x"]
    assert reader.line == 3


def test_iteration_yields_every_line():
    reader = InputStruct(io.StringIO("a b\nc\n\nd e f"), "mem")
    assert list(reader) == [["a", "b"], ["c"], [], ["d", "e", "f"]]


def test_long_line_is_split():
    text = "x" * 1500 + "\n"
    reader = InputStruct(io.StringIO(text), "mem")
    first = reader.get_line()
    second = reader.get_line()
    assert len(first[0]) == MAXLEN - 2
    assert first[0] + second[0] == "x" * 1500
    assert reader.line == 2


def test_new_inputstruct_reads_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("hello world\nsecond line here\n", encoding="utf-8")
    with new_inputstruct(str(path)) as reader:
        assert reader.name == str(path)
        rows = list(reader)
    assert rows == [["hello", "world"], ["second", "line", "here"]]
    assert reader.stream.closed


def test_new_inputstruct_missing_file(tmp_path):
    with pytest.raises(OSError):
        new_inputstruct(str(tmp_path / "absent.txt"))


def test_pipe_inputstruct_reads_command_output():
    with pipe_inputstruct("echo alpha beta") as reader:
        fields = reader.get_line()
    assert fields == ["alpha", "beta"]
    assert reader.process.returncode == 0