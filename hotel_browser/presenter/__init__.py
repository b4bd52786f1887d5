"""
Incremental presentation of hotel result sets.

The presenter fetches a full result set once per search and reveals it in
fixed-size batches whenever the visibility trigger fires.
"""

from .visibility import VisibilityTrigger
from .list_presenter import IncrementalListPresenter, PresenterState, PresenterStatus

__all__ = [
    'VisibilityTrigger',
    'IncrementalListPresenter',
    'PresenterState',
    'PresenterStatus',
]
