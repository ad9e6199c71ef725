class ScanSpecError(Exception):
    """ Base class for errors raised while building a scan or point lookup """


class InvalidRangeError(ScanSpecError, ValueError):
    """ Raised when a time range has a min stamp greater than its max stamp """

    def __init__(self, min_stamp: int, max_stamp: int):
        self.min_stamp = min_stamp
        self.max_stamp = max_stamp
        super().__init__(f"maxStamp is smaller than minStamp: [{min_stamp}, {max_stamp})")


class IncompatibleFilterError(ScanSpecError):
    """ Raised when batching is requested together with a filter that needs to see whole rows """
