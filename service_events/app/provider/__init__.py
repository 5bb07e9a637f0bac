"""
Provider package for the Events Service.
"""

from .data_provider import EventDataProvider

__all__ = ["EventDataProvider"]
