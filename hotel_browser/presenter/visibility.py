"""
Visibility trigger for the reveal sentinel.

The sentinel is an invisible anchor placed after the last revealed item.
Whatever renders the list reports how much of the sentinel is in view;
the trigger calls back when that reaches the threshold.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class VisibilityTrigger:
    """Signals when the sentinel becomes visible.

    The subscription survives each callback, so the same sentinel keeps
    triggering after every reveal without re-subscribing. ``disconnect``
    releases it for good.
    """

    def __init__(self, threshold: float = 1.0):
        """Initialize the trigger.

        Args:
            threshold: Fraction of the sentinel (0, 1] that must be visible
        """
        if not 0.0 < threshold <= 1.0:
            raise ValueError(f"threshold must be in (0, 1], got {threshold}")
        self.threshold = threshold
        self._callback: Optional[Callable[[], object]] = None

    @property
    def is_observing(self) -> bool:
        return self._callback is not None

    def observe(self, callback: Callable[[], object]) -> None:
        """Start calling ``callback`` when the sentinel becomes visible."""
        self._callback = callback

    def report_visibility(self, ratio: float) -> bool:
        """Report the visible fraction of the sentinel.

        Returns:
            True if the callback fired
        """
        if self._callback is None:
            logger.debug("Visibility reported after disconnect; ignoring")
            return False
        if ratio < self.threshold:
            return False
        self._callback()
        return True

    def disconnect(self) -> None:
        """Stop observing; later reports are ignored."""
        self._callback = None
