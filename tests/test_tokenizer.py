# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_relations.core.exceptions import SourceRetrievalError
from gedcom_relations.loader import GedcomSyntaxError, tokenize_file, tokenize_line, tokenize_text
from gedcom_relations.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_value_is_trimmed() -> None:
    line = "1 NAME   John /Doe/   "
    token = tokenize_line(line, lineno=10)
    assert token.level == 1
    assert token.pointer is None
    assert token.tag == "NAME"
    assert token.value == "John /Doe/"
    assert token.raw == line


def test_tokenize_line_pointer_value_is_not_a_pointer() -> None:
    # Only the slot between level and tag holds a pointer.
    token = tokenize_line("1 FAMS @F1@", lineno=3)
    assert token.pointer is None
    assert token.tag == "FAMS"
    assert token.value == "@F1@"


def test_tokenize_line_odd_pointer_becomes_tag() -> None:
    token = tokenize_line("0 @I-1@ INDI", lineno=1)
    assert token.pointer is None
    assert token.tag == "@I-1@"
    assert token.value == "INDI"


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_text_handles_all_line_endings() -> None:
    text = "0 HEAD\r\n0 @I1@ INDI\r1 NAME A /B/\n1 SEX M"
    tokens = list(tokenize_text(text))

    assert [t.tag for t in tokens] == ["HEAD", "INDI", "NAME", "SEX"]
    assert [t.lineno for t in tokens] == [1, 2, 3, 4]


def test_tokenize_text_skips_blank_and_malformed_lines() -> None:
    text = "0 HEAD\n\n   \nnot a gedcom line\n1 CHAR UTF-8\n"
    tokens = list(tokenize_text(text))

    assert [t.tag for t in tokens] == ["HEAD", "CHAR"]


def test_tokenize_text_strict_raises_on_malformed_line() -> None:
    with pytest.raises(GedcomSyntaxError):
        list(tokenize_text("0 HEAD\nnot a gedcom line\n", strict=True))


def test_tokenize_file_reads_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("family.ged")))

    assert tokens, "Expected at least one token from mock GEDCOM file"
    assert tokens[0].level == 0
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"


def test_tokenize_file_missing_file_raises(tmp_path) -> None:
    with pytest.raises(SourceRetrievalError):
        list(tokenize_file(tmp_path / "missing.ged"))
