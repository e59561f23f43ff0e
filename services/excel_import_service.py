"""
Excel Import Service - Framework-agnostic business logic.

This module reads channel/frequency rows from the first worksheet of a
workbook and runs the full import job: extract, synchronize, report.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import openpyxl
from sqlalchemy.orm import sessionmaker

from backend.database import session_scope
from backend.models.records import ChannelFrequencyRecord
from services.channel_format import (
    DEFAULT_CHANNEL_MARKER, VALIDATION_LEGACY, VALIDATION_MODES,
    is_empty_cell, is_valid_channel_label, is_valid_frequency,
    parse_channel, parse_frequency
)
from services.report_service import ChannelReportService
from services.sync_service import ChannelSyncService

logger = logging.getLogger(__name__)


class ChannelExtractor:
    """Extract channel/frequency records from a workbook's first sheet."""

    def __init__(self, marker: str = DEFAULT_CHANNEL_MARKER,
                 validation_mode: str = VALIDATION_LEGACY,
                 skip_header: bool = False):
        if len(marker) != 1:
            raise ValueError(f"Channel marker must be a single character, got {marker!r}")
        if validation_mode not in VALIDATION_MODES:
            raise ValueError(f"Unsupported validation mode: {validation_mode}")

        self.marker = marker
        self.validation_mode = validation_mode
        self.skip_header = skip_header
        self.skipped: List[Dict[str, Any]] = []

    def _skip(self, row_num: int, reason: str, message: str):
        logger.error(f"Error: {message} at row {row_num}. Skipping this row.")
        self.skipped.append({'row_num': row_num, 'reason': reason})

    def extract_row(self, row_num: int, values: tuple) -> Optional[ChannelFrequencyRecord]:
        """
        Validate a single row and convert it to a record.

        Args:
            row_num: 1-based sheet row number
            values: Cell values of the row (column 1 first)

        Returns:
            Record, or None if the row was skipped
        """
        channel_value = values[0] if len(values) > 0 else None
        frequency_value = values[1] if len(values) > 1 else None

        if not is_valid_channel_label(channel_value, self.marker, self.validation_mode):
            self._skip(row_num, 'invalid_channel', 'Invalid channel value')
            return None

        channel = parse_channel(channel_value, self.marker)

        if is_empty_cell(frequency_value):
            self._skip(row_num, 'empty_frequency', 'Empty frequency cell')
            return None

        frequency = parse_frequency(frequency_value)
        if not is_valid_frequency(frequency):
            self._skip(row_num, 'invalid_frequency', 'Invalid frequency value')
            return None

        return ChannelFrequencyRecord(channel=channel, frequency=frequency, row_num=row_num)

    def read_channel_file(self, file_path: str) -> List[ChannelFrequencyRecord]:
        """
        Read all valid records from the workbook's first worksheet.

        Returns an empty list if the file can't be read or has no sheet.
        """
        logger.info(f"Reading workbook: {file_path}")
        self.skipped = []

        try:
            workbook = openpyxl.load_workbook(file_path, data_only=True)
        except Exception as e:
            logger.error(f"Error reading the Excel file: {e}")
            return []

        try:
            if not workbook.worksheets:
                logger.error("Error: Worksheet is undefined.")
                return []

            worksheet = workbook.worksheets[0]
            records = []

            for row_num, values in enumerate(worksheet.iter_rows(values_only=True), 1):
                if row_num == 1 and self.skip_header:
                    logger.debug("Skipping header row")
                    continue
                # Rows with no values at all are not part of the data
                if all(value is None for value in values):
                    continue

                record = self.extract_row(row_num, values)
                if record is not None:
                    records.append(record)

            logger.info(f"Extracted {len(records)} records, skipped {len(self.skipped)} rows")
            return records
        except Exception as e:
            logger.error(f"Error reading the Excel file: {e}")
            return []
        finally:
            workbook.close()


class ChannelImportService:
    """
    Framework-agnostic channel import service.

    This service handles the complete import workflow with progress tracking.
    Stages run one after another; a failing stage is logged and does not
    prevent the next one from running.
    """

    def __init__(
        self,
        db_session,
        progress_callback: Optional[Callable[[str, float, str], None]] = None,
        marker: str = DEFAULT_CHANNEL_MARKER,
        validation_mode: str = VALIDATION_LEGACY,
        skip_header: bool = False
    ):
        """
        Initialize channel import service.

        Args:
            db_session: SQLAlchemy database session
            progress_callback: Optional callback for progress updates
                              Signature: callback(stage: str, percent: float, message: str)
            marker: Channel label prefix character
            validation_mode: 'legacy' or 'strict' channel label validation
            skip_header: Ignore the first worksheet row
        """
        self.session = db_session
        self.progress_callback = progress_callback or (lambda *args: None)

        self.extractor = ChannelExtractor(marker, validation_mode, skip_header)
        self.sync_service = ChannelSyncService(db_session)
        self.report_service = ChannelReportService(db_session)

    def _emit_progress(self, stage: str, percent: float, message: str):
        """Emit progress update via callback."""
        self.progress_callback(stage, percent, message)
        logger.info(f"Progress: {stage} ({percent:.1f}%) - {message}")

    def import_file(self, file_path: str) -> Dict[str, Any]:
        """
        Main import workflow.

        Returns:
            Dictionary with import results:
            {
                'extracted': int,
                'skipped': list of {'row_num', 'reason'},
                'stats': dict from the sync stage,
                'rows': list of stored rows,
                'errors': list
            }
        """
        logger.info(f"Starting channel import of {file_path}")
        errors = []

        self._emit_progress('extracting', 0, f'Reading {file_path}')
        records = self.extractor.read_channel_file(file_path)

        self._emit_progress('syncing', 40, f'Synchronizing {len(records)} records')
        stats = self.sync_service.upload(records)
        if stats.get('error'):
            errors.append(f"Sync failed: {stats['error']}")

        self._emit_progress('reporting', 80, 'Fetching stored rows')
        rows = self.report_service.fetch_all()
        if self.report_service.last_error:
            errors.append(f"Report failed: {self.report_service.last_error}")

        self._emit_progress('complete', 100, 'Import complete')

        return {
            'extracted': len(records),
            'skipped': list(self.extractor.skipped),
            'stats': stats,
            'rows': rows,
            'errors': errors
        }


def run_channel_import(
    session_factory: sessionmaker,
    file_path: str,
    progress_callback: Optional[Callable[[str, float, str], None]] = None,
    marker: str = DEFAULT_CHANNEL_MARKER,
    validation_mode: str = VALIDATION_LEGACY,
    skip_header: bool = False
) -> Dict[str, Any]:
    """
    Run one import job with a scoped database session.

    The session is always closed, and no exception escapes: failures end
    up in the log and in the result's 'errors' list.
    """
    result: Dict[str, Any] = {
        'extracted': 0,
        'skipped': [],
        'stats': {},
        'rows': [],
        'errors': []
    }

    try:
        with session_scope(session_factory) as session:
            service = ChannelImportService(
                session,
                progress_callback=progress_callback,
                marker=marker,
                validation_mode=validation_mode,
                skip_header=skip_header
            )
            result = service.import_file(file_path)
            logger.info("The program successfully completed.")
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        result['errors'].append(str(e))

    return result
