from abc import ABC, abstractmethod
from enum import Enum


class FilterDecision(Enum):
    """ What the scanner should do with the cell a filter has just seen """
    INCLUDE = 'include'
    SKIP = 'skip'
    NEXT_COL = 'next_col'
    NEXT_ROW = 'next_row'
    SEEK_NEXT_USING_HINT = 'seek_next_using_hint'


class Filter(ABC):
    """
    Server side predicate attached to a scan or a point lookup.

    Scans only rely on two capabilities: evaluating a single cell and telling
    whether the filter needs to see every cell of a row before deciding.
    Filters are shared by reference when a scan is copied, so a filter that
    keeps state should not be reused between scans.
    """

    @abstractmethod
    def evaluate(self, row: bytes, column: bytes, timestamp: int, value: bytes) -> FilterDecision:
        ...

    def has_filter_row(self) -> bool:
        """ True if the filter has to look at whole rows, which rules out batching """
        return False

    def __str__(self):
        return type(self).__name__
