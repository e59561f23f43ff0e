"""
Report Service - Read back stored channel frequencies.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.models.records import ChannelFrequencyResponse
from backend.models.schema import ChannelFrequency

logger = logging.getLogger(__name__)


class ChannelReportService:
    """Fetch every stored channel frequency row."""

    def __init__(self, db_session: Session):
        self.session = db_session
        self.last_error: Optional[str] = None

    def fetch_all(self) -> List[ChannelFrequencyResponse]:
        """
        Return all rows in the store's default order.

        Returns an empty list (and sets last_error) if the query fails.
        """
        self.last_error = None

        try:
            rows = self.session.query(ChannelFrequency).all()
        except Exception as e:
            logger.error(f"Error fetching data: {e}", exc_info=True)
            self.last_error = str(e)
            return []

        data = [ChannelFrequencyResponse.model_validate(row) for row in rows]
        logger.info(f"Fetched {len(data)} rows")
        return data
