"""Tests for the statement CSV record reader."""

import io
import pytest

from spendtracker.domain.csv_reader import read_statement, STATEMENT_COLUMNS
from spendtracker.domain.errors import StreamError


def _stream(text: str, encoding: str = "utf-8") -> io.BytesIO:
    return io.BytesIO(text.encode(encoding))


def test_reads_rows_in_order():
    """Rows are yielded in source order keyed by column name."""
    rows = list(
        read_statement(
            _stream(
                "Transaction Date,Description,Debits,Credits,Balance\n"
                "2024-01-15,Groceries,10.00,,100.00\n"
                "2024-01-16,Salary,,500.00,600.00\n"
            )
        )
    )

    assert rows == [
        {
            "Transaction Date": "2024-01-15",
            "Description": "Groceries",
            "Debits": "10.00",
            "Credits": "",
            "Balance": "100.00",
        },
        {
            "Transaction Date": "2024-01-16",
            "Description": "Salary",
            "Debits": "",
            "Credits": "500.00",
            "Balance": "600.00",
        },
    ]


def test_reader_is_lazy():
    """Nothing is read before iteration starts."""
    stream = _stream("Transaction Date,Description\n2024-01-15,A\n")
    rows = read_statement(stream)

    assert stream.tell() == 0
    assert next(rows)["Description"] == "A"


def test_short_row_fills_missing_trailing_fields():
    """A row with fewer fields than the header does not raise."""
    rows = list(
        read_statement(_stream("Transaction Date,Description,Debits,Credits,Balance\n2024-01-15,Coffee\n"))
    )

    assert rows[0]["Debits"] == ""
    assert rows[0]["Credits"] == ""
    assert rows[0]["Balance"] == ""


def test_missing_optional_columns_are_absent_keys():
    """Columns missing from the header are missing from each row."""
    rows = list(read_statement(_stream("Transaction Date,Debits\n2024-01-15,3.00\n")))

    assert rows == [{"Transaction Date": "2024-01-15", "Debits": "3.00"}]


def test_reordered_and_extra_columns():
    """Extra columns are ignored and order does not matter."""
    rows = list(
        read_statement(
            _stream("Memo,Balance,Description,Transaction Date\nnote,5.00,Shop,2024-01-15\n")
        )
    )

    assert rows == [{"Balance": "5.00", "Description": "Shop", "Transaction Date": "2024-01-15"}]


def test_header_match_is_case_and_whitespace_sensitive():
    """Near-miss header names are not recognized."""
    rows = list(
        read_statement(_stream("transaction date, Description,Debits\n2024-01-15,Shop,1.00\n"))
    )

    assert rows == [{"Debits": "1.00"}]


def test_quoted_fields_with_commas():
    """Quoted amounts keep their thousands separators."""
    rows = list(
        read_statement(_stream('Transaction Date,Description,Balance\n2024-01-15,"Rent, January","$1,200.00"\n'))
    )

    assert rows[0]["Description"] == "Rent, January"
    assert rows[0]["Balance"] == "$1,200.00"


def test_blank_lines_are_skipped():
    """Blank lines do not produce rows."""
    rows = list(read_statement(_stream("Transaction Date,Description\n\n2024-01-15,A\n\n")))

    assert len(rows) == 1


def test_utf8_bom_is_dropped():
    """A leading byte order mark does not corrupt the first header."""
    rows = list(read_statement(_stream("Transaction Date,Description\n2024-01-15,Café\n", "utf-8-sig")))

    assert rows == [{"Transaction Date": "2024-01-15", "Description": "Café"}]


def test_text_stream_is_accepted():
    """Text streams are read without re-decoding."""
    rows = list(read_statement(io.StringIO("Transaction Date,Description\n2024-01-15,A\n")))

    assert rows[0]["Description"] == "A"


def test_binary_stream_left_open():
    """The caller's stream is not closed by reading."""
    stream = _stream("Transaction Date\n2024-01-15\n")
    list(read_statement(stream))

    assert not stream.closed


def test_empty_stream_raises():
    """A stream without a header row is a stream error."""
    with pytest.raises(StreamError) as excinfo:
        list(read_statement(_stream("")))

    assert "no header" in str(excinfo.value).lower()


def test_undecodable_stream_raises():
    """Bytes that are not UTF-8 text are a stream error."""
    with pytest.raises(StreamError):
        list(read_statement(io.BytesIO(b"Transaction Date\n\xff\xfe\xfa\n")))


def test_statement_columns():
    """The recognized header names."""
    assert STATEMENT_COLUMNS == ("Transaction Date", "Description", "Debits", "Credits", "Balance")
