"""
Error handling module for Hotel Browser.

Provides the exception hierarchy and diagnostic error logging.
"""

from .error_handler import (
    HotelBrowserError,
    DataUnavailableError,
    HotelFetchError,
    log_error,
)

__all__ = ['HotelBrowserError', 'DataUnavailableError', 'HotelFetchError', 'log_error']
