import pytest

from aoc2024.inputs import InputFile, read_input, split_lines


def test_split_lines_with_trailing_newline():
    assert split_lines("a\nb\n") == ["a", "b"]


def test_split_lines_drops_unterminated_last_line():
    assert split_lines("a\nb") == ["a"]


def test_split_lines_empty_text():
    assert split_lines("") == []


def test_split_lines_keeps_blank_lines():
    assert split_lines("a\n\nb\n") == ["a", "", "b"]


def test_read_input(tmp_path):
    path = tmp_path / "input"
    text = "first\nsecond\nthird\n"
    path.write_text(text)
    result = read_input(path)
    assert result.content == text
    assert result.lines == ("first", "second", "third")
    assert result.line_count == len(result.lines)


def test_from_text_matches_split_lines():
    text = "x\ny\n"
    assert InputFile.from_text(text).lines == tuple(split_lines(text))


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "missing")