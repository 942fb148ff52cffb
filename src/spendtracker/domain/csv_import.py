"""Bank statement import domain service."""

import logging
import uuid
from datetime import datetime, UTC
from pathlib import Path
from typing import IO

from spendtracker.database.base import Database
from spendtracker.domain.csv_reader import read_statement
from spendtracker.domain.entities import (
    ImportOutcome,
    NewTransaction,
    NormalizedTransaction,
    RowError,
)
from spendtracker.domain.errors import PersistenceError, StreamError
from spendtracker.domain.normalizer import normalize_row

logger = logging.getLogger(__name__)


class StatementImportService:
    """Service for importing bank statement CSV files as one batch."""

    def __init__(self, db: Database):
        """Initialize statement import service.

        Args:
            db: Database instance
        """
        self.db = db

    def import_csv(self, csv_file_path: str) -> ImportOutcome:
        """Import transactions from a CSV file on disk.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            ImportOutcome for the upload

        Raises:
            PersistenceError: If the accepted rows could not be stored
        """
        try:
            stream = open(Path(csv_file_path), "rb")
        except OSError as e:
            error = StreamError(f"Cannot open statement '{csv_file_path}': {e.strerror}")
            return self._failed_outcome(str(uuid.uuid4()), 0, [], error)

        with stream:
            return self.import_stream(stream)

    def import_stream(self, stream: IO) -> ImportOutcome:
        """Import transactions from a CSV stream.

        Every row is normalized independently; malformed rows are reported in
        the outcome and never abort the batch. Accepted rows share one new
        upload batch ID and creation timestamp and are written in a single
        commit. Nothing is written when no row is accepted or when the stream
        itself cannot be read.

        Args:
            stream: Binary or text stream with a header row

        Returns:
            ImportOutcome with totals, the batch ID and row error messages

        Raises:
            PersistenceError: If the accepted rows could not be stored
        """
        upload_batch_id = str(uuid.uuid4())
        created_date = datetime.now(UTC)
        accepted: list[NormalizedTransaction] = []
        errors: list[str] = []
        total_records = 0

        logger.info("Starting statement import for batch %s", upload_batch_id)

        try:
            # Line numbers start at 2 (header is line 1)
            for line_number, row in enumerate(read_statement(stream), start=2):
                total_records += 1
                try:
                    result = normalize_row(row, line_number)
                except Exception as e:
                    result = RowError(line_number=line_number, reason=str(e))

                if isinstance(result, RowError):
                    logger.debug("Skipping row: %s", result)
                    errors.append(str(result))
                else:
                    accepted.append(result)
        except StreamError as e:
            return self._failed_outcome(upload_batch_id, total_records, errors, e)

        if not accepted:
            logger.info(
                "Batch %s: no importable rows out of %d", upload_batch_id, total_records
            )
            return ImportOutcome(
                total_records=total_records,
                successful_imports=0,
                failed_imports=total_records,
                upload_batch_id=upload_batch_id,
                errors=errors,
            )

        new_transactions = [
            NewTransaction(
                date=record.date,
                description=record.description,
                debit=record.debit,
                credit=record.credit,
                balance=record.balance,
                upload_batch_id=upload_batch_id,
                created_date=created_date,
            )
            for record in accepted
        ]

        try:
            self.db.add_transactions(new_transactions)
        except PersistenceError:
            logger.error(
                "Batch %s: failed to store %d transactions", upload_batch_id, len(new_transactions)
            )
            raise

        logger.info(
            "Batch %s: imported %d of %d rows", upload_batch_id, len(accepted), total_records
        )
        return ImportOutcome(
            total_records=total_records,
            successful_imports=len(accepted),
            failed_imports=total_records - len(accepted),
            upload_batch_id=upload_batch_id,
            errors=errors,
        )

    def _failed_outcome(
        self, upload_batch_id: str, total_records: int, errors: list[str], error: StreamError
    ) -> ImportOutcome:
        """Build the outcome of an import whose input could not be read."""
        logger.warning("Batch %s: statement could not be read: %s", upload_batch_id, error)
        return ImportOutcome(
            total_records=total_records,
            successful_imports=0,
            failed_imports=total_records,
            upload_batch_id=upload_batch_id,
            errors=errors + [f"Failed to parse CSV file: {error}"],
        )
