"""
SQLAlchemy models for the channel frequency importer.

This module defines the database schema using SQLAlchemy ORM.
"""

from sqlalchemy import Column, Integer, Float, TIMESTAMP, Index, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ChannelFrequency(Base):
    """A channel and the frequency last imported for it."""

    __tablename__ = 'excel_data'
    __table_args__ = (
        Index('idx_excel_data_channel', 'channel', unique=True),
        {'comment': 'Channel frequencies imported from Excel'}
    )

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False
    )
    channel = Column(
        Integer,
        nullable=False,
        comment='Channel number parsed from the marker-prefixed label'
    )
    frequency = Column(
        Float,
        nullable=False,
        comment='Frequency value from column 2'
    )
    updated_at = Column(
        TIMESTAMP,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
        comment='Last insert/update timestamp'
    )

    def __repr__(self):
        return f"<ChannelFrequency(channel={self.channel}, frequency={self.frequency})>"
