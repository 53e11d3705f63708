"""Unit tests for the CSV tokenizer."""

from __future__ import annotations

from ingest.csv_tokenizer import serialize_csv, tokenize_csv


def test_tokenize_csv_splits_fields_and_records() -> None:
    """Delimiters and newlines should split cells and rows."""
    grid = tokenize_csv("a,b,c\nd,e,f\n")

    assert grid == [["a", "b", "c"], ["d", "e", "f"]]


def test_tokenize_csv_keeps_delimiter_and_newline_inside_quotes() -> None:
    """Quoted fields should keep commas and line breaks literally."""
    grid = tokenize_csv('"Hall, Block A","line one\nline two",x\n')

    assert grid == [["Hall, Block A", "line one\nline two", "x"]]


def test_tokenize_csv_unescapes_doubled_quotes() -> None:
    """A doubled quote inside quotes should become one quote."""
    grid = tokenize_csv('"a""b",c\n')

    assert grid == [['a"b', "c"]]


def test_tokenize_csv_drops_carriage_returns_everywhere() -> None:
    """Carriage returns should vanish, including inside quoted fields."""
    grid = tokenize_csv('a,"b\r\nc"\r\nd,e\r\n')

    assert grid == [["a", "b\nc"], ["d", "e"]]


def test_tokenize_csv_trims_fields_after_unquoting() -> None:
    """Whitespace around and inside quote boundaries should be trimmed."""
    grid = tokenize_csv('  a , " b "  ,c\n')

    assert grid == [["a", "b", "c"]]


def test_tokenize_csv_emits_unterminated_trailing_record() -> None:
    """A final record without newline should still be emitted."""
    grid = tokenize_csv("a,b\nc,d")

    assert grid == [["a", "b"], ["c", "d"]]


def test_tokenize_csv_emits_trailing_record_of_empty_fields() -> None:
    """A trailing record with collected empty values should be kept."""
    grid = tokenize_csv("a\n,")

    assert grid == [["a"], ["", ""]]


def test_tokenize_csv_does_not_emit_record_after_final_newline() -> None:
    """A terminating newline should not create an extra empty row."""
    assert tokenize_csv("a,b\n") == [["a", "b"]]


def test_tokenize_csv_absorbs_remainder_for_unbalanced_quote() -> None:
    """An unclosed quote should swallow the rest of the text into one field."""
    grid = tokenize_csv('a,"b,c\nd,e\n')

    assert grid == [["a", "b,c\nd,e"]]


def test_tokenize_csv_supports_custom_delimiter() -> None:
    """A non-comma delimiter should split fields instead of commas."""
    grid = tokenize_csv("a;b,c\n", delimiter=";")

    assert grid == [["a", "b,c"]]


def test_tokenize_csv_empty_text_returns_empty_grid() -> None:
    """Empty input should produce no rows."""
    assert tokenize_csv("") == []


def test_serialize_then_tokenize_reproduces_plain_grid() -> None:
    """Grids without special characters should survive a round trip."""
    grid = [
        ["大埔墟體育館", "⚠️ 尚需 Still Need", ""],
        ["", "✅ 充足 Enough", "x"],
    ]

    assert tokenize_csv(serialize_csv(grid)) == grid


def test_serialize_csv_escapes_embedded_quote() -> None:
    """A field holding a quote should be quoted with the quote doubled."""
    text = serialize_csv([['a"b']])

    assert text == '"a""b"\n' and tokenize_csv(text) == [['a"b']]
