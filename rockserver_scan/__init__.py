__author__ = 'Andrea Cavalli'
__version__ = '0.1'

import logging
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from typing_extensions import Self

from rockserver_scan.bytes_util import EMPTY_BYTES, MAX_INT, decode_bool, encode_bool, to_string_binary
from rockserver_scan.exceptions import IncompatibleFilterError, InvalidRangeError, ScanSpecError
from rockserver_scan.families import (
    FamilyMap,
    copy_family_map,
    describe_families,
    family_fingerprint,
    select_column,
    select_family,
    sorted_families,
)
from rockserver_scan.filters import Filter, FilterDecision
from rockserver_scan.operation import DEFAULT_MAX_COLS, Operation, OperationWithAttributes
from rockserver_scan.point_lookup import PointLookupSpec
from rockserver_scan.time_range import TimeRange

log = logging.getLogger(__name__)

RAW_ATTR = "_raw_"
ISOLATION_LEVEL_ATTR = "_isolationlevel_"

# Set SCAN_ATTRIBUTES_METRICS_ENABLE to have the server collect scan metrics,
# they are sent back under SCAN_ATTRIBUTES_METRICS_DATA
SCAN_ATTRIBUTES_METRICS_ENABLE = "scan.attributes.metrics.enable"
SCAN_ATTRIBUTES_METRICS_DATA = "scan.attributes.metrics.data"


class WireVersion(IntEnum):
    """ Scan wire versions, each one can carry every field of the previous ones """
    BASE = 1
    ATTRIBUTES = 2
    RESULT_SIZE = 3
    PAGINATION = 4


SCAN_VERSION = WireVersion.PAGINATION


class IsolationLevel(Enum):
    """ Visibility of data written concurrently with a scan """
    READ_COMMITTED = 1
    READ_UNCOMMITTED = 2

    def to_bytes(self) -> bytes:
        return bytes([self.value])

    @classmethod
    def from_bytes(cls, value: bytes) -> "IsolationLevel":
        if len(value) != 1:
            raise ValueError(f"Invalid isolation level encoding: {value!r}")
        try:
            return cls(value[0])
        except ValueError:
            raise ValueError(f"Unknown isolation level: {value[0]}")


class ScanSpec(OperationWithAttributes):
    """
    Description of a scan over a range of rows.

    Rows are scanned from start_row (inclusive) to stop_row (exclusive), an
    empty row means no bound. With no families selected every family is
    returned. To make a bound exclusive or inclusive, append a trailing zero
    byte to the row key.

    Example usage:

    >>> scan = (ScanSpec(b'user:0001', b'user:0100')
    ...         .select_family(b'info')
    ...         .select_column(b'stats', b'logins')
    ...         .set_time_range(0, 1700000000000)
    ...         .set_caching(500))
    >>> scan.wire_version()
    <WireVersion.BASE: 1>

    When both caching and max_result_size are set, each round-trip ends on
    whichever limit is hit first.
    """

    def __init__(self,
                 start_row: bytes = EMPTY_BYTES,
                 stop_row: bytes = EMPTY_BYTES,
                 filter: Optional[Filter] = None):
        """
        :param start_row: first row of the scan, included
        :param stop_row: row where the scan ends, excluded
        :param filter: server side filter
        """
        super().__init__()
        self._start_row = start_row
        self._stop_row = stop_row
        self._max_versions = 1
        self._batch = -1
        self._store_limit = -1
        self._store_offset = 0
        # -1 uses the caching configured on the host table
        self._caching = -1
        self._max_result_size = -1
        self._cache_blocks = True
        self._filter = filter
        self._time_range = TimeRange()
        self._family_map: FamilyMap = {}

    def copy(self) -> "ScanSpec":
        """
        Copies the scan.

        Row bounds and scalar settings are copied by value, the family map and
        the attributes are rebuilt entry by entry, the filter instance and the
        attribute values are shared with this scan.
        """
        scan = ScanSpec(self._start_row, self._stop_row, self._filter)
        scan._max_versions = self._max_versions
        scan._batch = self._batch
        scan._store_limit = self._store_limit
        scan._store_offset = self._store_offset
        scan._caching = self._caching
        scan._max_result_size = self._max_result_size
        scan._cache_blocks = self._cache_blocks
        scan._time_range = TimeRange(self._time_range.min_stamp, self._time_range.max_stamp)
        scan._family_map = copy_family_map(self._family_map)
        for name, value in self._attributes.items():
            scan.set_attribute(name, value)
        return scan

    __copy__ = copy

    @classmethod
    def from_point_lookup(cls, get: PointLookupSpec) -> "ScanSpec":
        """ Builds a scan over the single row of the lookup, sharing its family map """
        scan = cls(get.row, get.row, get.filter)
        scan._cache_blocks = get.cache_blocks
        scan._max_versions = get.max_versions
        scan._store_limit = get.max_results_per_column_family
        scan._store_offset = get.row_offset_per_column_family
        scan._time_range = get.time_range
        scan._family_map = get.family_map
        log.debug(f"Lifted point lookup of row {to_string_binary(get.row)} into a scan")
        return scan

    def wire_version(self) -> WireVersion:
        """ Oldest wire version able to carry every field this scan uses """
        if self._store_limit != -1 or self._store_offset != 0:
            return WireVersion.PAGINATION
        if self._max_result_size != -1:
            return WireVersion.RESULT_SIZE
        if self.attribute_size() != 0:
            return WireVersion.ATTRIBUTES
        return WireVersion.BASE

    def is_point_lookup(self) -> bool:
        """ True if the scan addresses exactly one row """
        return bool(self._start_row) and self._start_row == self._stop_row

    # Row range

    @property
    def start_row(self) -> bytes:
        return self._start_row

    @property
    def stop_row(self) -> bytes:
        return self._stop_row

    def set_start_row(self, start_row: bytes) -> Self:
        self._start_row = start_row
        return self

    def set_stop_row(self, stop_row: bytes) -> Self:
        self._stop_row = stop_row
        return self

    # Families

    @property
    def family_map(self) -> FamilyMap:
        return self._family_map

    def select_family(self, family: bytes) -> Self:
        """ Returns every column of the family, replacing columns selected before """
        select_family(self._family_map, family)
        return self

    def select_column(self, family: bytes, qualifier: Optional[bytes]) -> Self:
        """ Returns the column, narrowing the family down if it was fully selected """
        select_column(self._family_map, family, qualifier)
        return self

    def set_family_map(self, family_map: FamilyMap) -> Self:
        self._family_map = family_map
        return self

    def num_families(self) -> int:
        return len(self._family_map)

    def has_families(self) -> bool:
        return bool(self._family_map)

    def list_families(self) -> Optional[List[bytes]]:
        if not self.has_families():
            return None
        return sorted_families(self._family_map)

    # Versions and time

    @property
    def max_versions(self) -> int:
        return self._max_versions

    @property
    def time_range(self) -> TimeRange:
        return self._time_range

    def set_max_versions(self, max_versions: int = MAX_INT) -> Self:
        """ Caps the versions returned per column, all of them when called without arguments """
        self._max_versions = max_versions
        return self

    def set_time_range(self, min_stamp: int, max_stamp: int) -> Self:
        """
        Only returns versions with a timestamp in [min_stamp, max_stamp).

        :raises InvalidRangeError: if min_stamp is greater than max_stamp
        """
        self._time_range = TimeRange(min_stamp, max_stamp)
        return self

    def set_time_stamp(self, timestamp: int) -> Self:
        self._time_range = TimeRange.at(timestamp)
        return self

    # Paging and sizing

    @property
    def batch(self) -> int:
        return self._batch

    @property
    def max_results_per_column_family(self) -> int:
        return self._store_limit

    @property
    def row_offset_per_column_family(self) -> int:
        return self._store_offset

    @property
    def caching(self) -> int:
        return self._caching

    @property
    def max_result_size(self) -> int:
        return self._max_result_size

    @property
    def cache_blocks(self) -> bool:
        return self._cache_blocks

    def set_batch(self, batch: int) -> Self:
        """
        Caps the values returned by each call to next.

        Batching may split a row over several calls, so it cannot be combined
        with a filter that needs to see whole rows.
        """
        if self.has_filter() and self._filter.has_filter_row():
            log.warning(f"Refusing to set batch {batch} on a scan filtered by {self._filter}")
            raise IncompatibleFilterError(
                "Cannot set batch on a scan using a filter that returns true for filter.has_filter_row")
        self._batch = batch
        return self

    def set_max_results_per_column_family(self, limit: int) -> Self:
        """ Returns at most limit cells per row and column family """
        self._store_limit = limit
        return self

    def set_row_offset_per_column_family(self, offset: int) -> Self:
        """ Skips the first offset cells of every row and column family """
        self._store_offset = offset
        return self

    def set_caching(self, caching: int) -> Self:
        """ Rows fetched per round-trip, -1 uses the host default """
        self._caching = caching
        return self

    def set_max_result_size(self, max_result_size: int) -> Self:
        """ Bytes fetched per round-trip, -1 for no limit """
        self._max_result_size = max_result_size
        return self

    def set_cache_blocks(self, cache_blocks: bool) -> Self:
        self._cache_blocks = cache_blocks
        return self

    # Filter

    @property
    def filter(self) -> Optional[Filter]:
        return self._filter

    def set_filter(self, filter: Optional[Filter]) -> Self:
        self._filter = filter
        return self

    def has_filter(self) -> bool:
        return self._filter is not None

    # Reserved attributes

    def set_raw(self, raw: bool) -> Self:
        """
        Raw scans also return delete markers and deleted rows that have not been
        collected yet. Only meaningful for families keeping deleted cells.
        """
        return self.set_attribute(RAW_ATTR, encode_bool(raw))

    def is_raw(self) -> bool:
        attr = self.get_attribute(RAW_ATTR)
        return decode_bool(attr) if attr is not None else False

    def set_isolation_level(self, level: IsolationLevel) -> Self:
        return self.set_attribute(ISOLATION_LEVEL_ATTR, level.to_bytes())

    def get_isolation_level(self) -> IsolationLevel:
        attr = self.get_attribute(ISOLATION_LEVEL_ATTR)
        return IsolationLevel.from_bytes(attr) if attr is not None else IsolationLevel.READ_COMMITTED

    def set_scan_metrics_enabled(self, enabled: bool) -> Self:
        return self.set_attribute(SCAN_ATTRIBUTES_METRICS_ENABLE, encode_bool(enabled))

    def is_scan_metrics_enabled(self) -> bool:
        attr = self.get_attribute(SCAN_ATTRIBUTES_METRICS_ENABLE)
        return decode_bool(attr) if attr is not None else False

    # Diagnostics

    def fingerprint(self) -> Dict[str, Any]:
        return {"families": family_fingerprint(self._family_map)}

    def describe(self, max_cols: int = DEFAULT_MAX_COLS) -> Dict[str, Any]:
        """
        Fingerprint plus every scalar setting and the selected columns.

        At most max_cols columns are listed, counting across all families,
        while totalColumns always reports the full count.
        """
        result = self.fingerprint()
        family_columns, total_columns = describe_families(self._family_map, max_cols)
        result["families"] = family_columns
        result["startRow"] = to_string_binary(self._start_row)
        result["stopRow"] = to_string_binary(self._stop_row)
        result["maxVersions"] = self._max_versions
        result["batch"] = self._batch
        result["caching"] = self._caching
        result["maxResultSize"] = self._max_result_size
        result["cacheBlocks"] = self._cache_blocks
        result["timeRange"] = self._time_range.to_list()
        result["totalColumns"] = total_columns
        if self._filter is not None:
            result["filter"] = str(self._filter)
        operation_id = self.get_id()
        if operation_id is not None:
            result["id"] = operation_id
        return result


__all__ = [
    'DEFAULT_MAX_COLS',
    'Filter',
    'FilterDecision',
    'IncompatibleFilterError',
    'InvalidRangeError',
    'ISOLATION_LEVEL_ATTR',
    'IsolationLevel',
    'Operation',
    'OperationWithAttributes',
    'PointLookupSpec',
    'RAW_ATTR',
    'SCAN_ATTRIBUTES_METRICS_DATA',
    'SCAN_ATTRIBUTES_METRICS_ENABLE',
    'SCAN_VERSION',
    'ScanSpec',
    'ScanSpecError',
    'TimeRange',
    'WireVersion',
]
