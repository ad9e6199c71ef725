import logging
from dataclasses import dataclass

from rockserver_scan.exceptions import InvalidRangeError

log = logging.getLogger(__name__)

MIN_TIMESTAMP = 0
MAX_TIMESTAMP = 2 ** 63 - 1


@dataclass(frozen=True)
class TimeRange:
    """
    Timestamp window [min_stamp, max_stamp) used to select cell versions.

    The default instance covers all time.
    """
    min_stamp: int = MIN_TIMESTAMP
    max_stamp: int = MAX_TIMESTAMP

    def __post_init__(self):
        if self.max_stamp < self.min_stamp:
            log.warning(f"Rejecting time range [{self.min_stamp}, {self.max_stamp})")
            raise InvalidRangeError(self.min_stamp, self.max_stamp)

    @classmethod
    def at(cls, timestamp: int) -> "TimeRange":
        """ Window that matches exactly one timestamp """
        return cls(timestamp, timestamp + 1)

    @property
    def all_time(self) -> bool:
        return self.min_stamp == MIN_TIMESTAMP and self.max_stamp == MAX_TIMESTAMP

    def within(self, timestamp: int) -> bool:
        return self.min_stamp <= timestamp < self.max_stamp

    def to_list(self):
        return [self.min_stamp, self.max_stamp]
