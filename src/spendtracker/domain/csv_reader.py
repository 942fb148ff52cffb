"""Bank statement CSV record reader."""

import csv
import io
from typing import IO, Iterator

from spendtracker.domain.errors import StreamError

TRANSACTION_DATE = "Transaction Date"
DESCRIPTION = "Description"
DEBITS = "Debits"
CREDITS = "Credits"
BALANCE = "Balance"

# Header names are matched exactly (case and whitespace sensitive)
STATEMENT_COLUMNS = (TRANSACTION_DATE, DESCRIPTION, DEBITS, CREDITS, BALANCE)


def _text_stream(stream: IO) -> tuple[IO[str], bool]:
    """Return a text view of the stream and whether it was wrapped here."""
    if isinstance(stream, io.TextIOBase):
        return stream, False
    return io.TextIOWrapper(stream, encoding="utf-8-sig", newline=""), True


def read_statement(stream: IO, delimiter: str = ",") -> Iterator[dict[str, str]]:
    """Lazily read statement rows from a CSV stream.

    The first record is the header. Each following non-blank record is
    yielded as a mapping from the known statement columns present in the
    header to their raw string values. Unknown columns are ignored, and
    fields missing at the end of a short record are returned as "".

    The stream is consumed in a single pass; the iterator cannot be
    restarted.

    Args:
        stream: Binary stream of UTF-8 text (a BOM is tolerated) or a text stream
        delimiter: Field delimiter

    Yields:
        Row mapping (column name -> raw value) in source order

    Raises:
        StreamError: If the stream cannot be decoded or tokenized, or has no header
    """
    try:
        text, wrapped = _text_stream(stream)
    except (OSError, ValueError) as e:
        raise StreamError(f"Cannot open statement: {e}")

    try:
        reader = csv.reader(text, delimiter=delimiter)

        header = next(reader, None)
        if not header:
            raise StreamError("CSV file has no header row")

        positions: dict[str, int] = {}
        for index, name in enumerate(header):
            if name in STATEMENT_COLUMNS and name not in positions:
                positions[name] = index

        for record in reader:
            if not record:
                continue
            yield {
                name: record[index] if index < len(record) else ""
                for name, index in positions.items()
            }
    except UnicodeDecodeError as e:
        raise StreamError(f"File is not valid UTF-8 text: {e.reason}")
    except csv.Error as e:
        raise StreamError(f"Malformed CSV: {e}")
    finally:
        if wrapped:
            # Leave the caller's binary stream open
            text.detach()
