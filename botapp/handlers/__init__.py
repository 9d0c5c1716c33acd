"""
Handlers package for telegram bot
"""

from .court_status_handler import CourtStatusHandler
from .router import CallbackRouter

__all__ = ['CourtStatusHandler', 'CallbackRouter']
