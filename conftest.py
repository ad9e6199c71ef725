import pytest

from rockserver_scan import Filter, FilterDecision


class PassAllFilter(Filter):
    """ Cell level filter, compatible with batching """

    def evaluate(self, row, column, timestamp, value):
        return FilterDecision.INCLUDE


class WholeRowFilter(Filter):
    """ Filter that drops rows missing a column, so it needs to see whole rows """

    def __init__(self, required_column: bytes):
        self.required_column = required_column

    def evaluate(self, row, column, timestamp, value):
        return FilterDecision.INCLUDE

    def has_filter_row(self):
        return True

    def __str__(self):
        return f"WholeRowFilter({self.required_column.decode()})"


@pytest.fixture
def cell_filter():
    return PassAllFilter()


@pytest.fixture
def row_filter():
    return WholeRowFilter(b'name')
