"""
Sync Service - Upsert extracted records into the store.

Records are written one at a time, each committed before the next is
looked up. A store failure stops the loop; earlier commits stay.
"""

import logging
from typing import Any, Dict, Iterable

from sqlalchemy.orm import Session

from backend.models.records import ChannelFrequencyRecord
from backend.models.schema import ChannelFrequency

logger = logging.getLogger(__name__)


class ChannelSyncService:
    """Update-or-insert channel frequencies keyed by channel."""

    def __init__(self, db_session: Session):
        self.session = db_session

    def upsert(self, record: ChannelFrequencyRecord) -> bool:
        """
        Write a single record and commit.

        Returns:
            True if an existing row was updated, False if a row was inserted
        """
        existing = self.session.query(ChannelFrequency).filter_by(
            channel=record.channel
        ).first()

        if existing:
            existing.frequency = record.frequency
            updated = True
        else:
            self.session.add(ChannelFrequency(
                channel=record.channel,
                frequency=record.frequency
            ))
            updated = False

        self.session.commit()
        return updated

    def upload(self, records: Iterable[ChannelFrequencyRecord]) -> Dict[str, Any]:
        """
        Upsert every record in order.

        Returns:
            Statistics: processed, inserted, updated, error (None on success)
        """
        stats = {
            'processed': 0,
            'inserted': 0,
            'updated': 0,
            'error': None
        }

        try:
            for record in records:
                if self.upsert(record):
                    stats['updated'] += 1
                    logger.debug(f"Updated channel {record.channel} -> {record.frequency}")
                else:
                    stats['inserted'] += 1
                    logger.debug(f"Inserted channel {record.channel} -> {record.frequency}")
                stats['processed'] += 1

            logger.info(f"Data uploaded to the database: {stats['inserted']} inserted, "
                        f"{stats['updated']} updated")
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error updating data after {stats['processed']} records: {e}",
                         exc_info=True)
            stats['error'] = str(e)

        return stats
