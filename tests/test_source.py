import pytest

from clexkit.source import EOF, SourceReader, open_source


def test_reads_characters_in_order_then_eof():
    reader = SourceReader("ab")
    assert reader.next_char() == "a"
    assert reader.next_char() == "b"
    assert reader.next_char() == EOF
    assert reader.next_char() == EOF


def test_peek_does_not_consume():
    reader = SourceReader("xy")
    assert reader.peek_char() == "x"
    assert reader.peek_char() == "x"
    assert reader.next_char() == "x"
    assert reader.peek_char() == "y"


def test_peek_at_end_is_eof():
    reader = SourceReader("")
    assert reader.peek_char() == EOF


def test_push_char_is_read_next_in_lifo_order():
    reader = SourceReader("c")
    reader.push_char("a")
    reader.push_char("b")
    assert reader.peek_char() == "b"
    assert reader.next_char() == "b"
    assert reader.next_char() == "a"
    assert reader.next_char() == "c"


def test_push_eof_is_ignored():
    reader = SourceReader("z")
    reader.push_char(EOF)
    assert reader.next_char() == "z"


def test_newline_advances_line_and_resets_column():
    reader = SourceReader("ab\ncd")
    start = reader.position
    reader.next_char()
    reader.next_char()
    assert reader.position.col == start.col + 2
    assert reader.position.line == start.line
    reader.next_char()
    assert reader.position.line == start.line + 1
    assert reader.position.col == start.col


def test_position_carries_filename():
    reader = SourceReader("", "main.c")
    assert reader.position.filename == "main.c"


def test_open_source_reads_file(tmp_path):
    path = tmp_path / "prog.c"
    path.write_text("int a;\n", encoding="utf-8")
    reader = open_source(path)
    text = []
    while (c := reader.next_char()) != EOF:
        text.append(c)
    assert "".join(text) == "int a;\n"
    assert reader.filename == str(path)


def test_open_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "absent.c")