"""
Error types and diagnostic logging for Hotel Browser.

Store failures are logged with full context on the server and reported to
callers as a single "data unavailable" condition. Nothing is retried.
"""

import logging
from datetime import datetime
from typing import Any, Dict


# Configure logging
logger = logging.getLogger(__name__)


class HotelBrowserError(Exception):
    """Base class for all Hotel Browser errors."""


class DataUnavailableError(HotelBrowserError):
    """
    The hotel record store could not be reached or the query failed.

    Raised server-side; the original exception is chained as ``__cause__``.
    """


class HotelFetchError(HotelBrowserError):
    """
    The client could not obtain a hotel result set.

    Covers network errors, timeouts, non-success status codes and
    payloads that are not a list of hotel records.
    """


def log_error(operation: str, error: BaseException, **context: Any) -> Dict[str, Any]:
    """
    Log error with timestamp, context, and diagnostic data.

    Args:
        operation: Name of the operation that failed
        error: The exception that occurred
        **context: Extra values describing the failed call

    Returns:
        The context dictionary that was logged
    """
    cause = error.__cause__
    details = {
        'timestamp': datetime.now().isoformat(),
        'operation': operation,
        'error_type': type(error).__name__,
        'error_message': str(error),
        'cause': f"{type(cause).__name__}: {cause}" if cause else 'None',
        'context': {k: str(v) for k, v in context.items()},
    }

    logger.error(
        f"Operation failed: {operation} | "
        f"Error: {type(error).__name__}: {str(error)} | "
        f"Cause: {details['cause']}"
    )
    logger.debug(f"Full error context: {details}")

    return details
