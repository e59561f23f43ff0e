"""Models package for the channel frequency importer."""
from backend.models.schema import Base, ChannelFrequency
from backend.models.records import ChannelFrequencyRecord, ChannelFrequencyResponse

__all__ = ['Base', 'ChannelFrequency', 'ChannelFrequencyRecord', 'ChannelFrequencyResponse']
