from typing import Any, Dict, Optional

from typing_extensions import Self

from rockserver_scan.bytes_util import MAX_INT, to_string_binary
from rockserver_scan.families import FamilyMap, describe_families, family_fingerprint, select_column, select_family
from rockserver_scan.filters import Filter
from rockserver_scan.operation import DEFAULT_MAX_COLS, OperationWithAttributes
from rockserver_scan.time_range import TimeRange


class PointLookupSpec(OperationWithAttributes):
    """
    Read of a single row.

    Example usage:

    >>> from rockserver_scan import ScanSpec
    >>> get = PointLookupSpec(b'row-1').select_family(b'cf').set_max_versions(3)
    >>> scan = ScanSpec.from_point_lookup(get)
    >>> scan.is_point_lookup()
    True

    """

    def __init__(self, row: bytes, filter: Optional[Filter] = None):
        super().__init__()
        self._row = row
        self._filter = filter
        self._cache_blocks = True
        self._max_versions = 1
        self._store_limit = -1
        self._store_offset = 0
        self._time_range = TimeRange()
        self._family_map: FamilyMap = {}

    @property
    def row(self) -> bytes:
        return self._row

    @property
    def filter(self) -> Optional[Filter]:
        return self._filter

    @property
    def cache_blocks(self) -> bool:
        return self._cache_blocks

    @property
    def max_versions(self) -> int:
        return self._max_versions

    @property
    def max_results_per_column_family(self) -> int:
        return self._store_limit

    @property
    def row_offset_per_column_family(self) -> int:
        return self._store_offset

    @property
    def time_range(self) -> TimeRange:
        return self._time_range

    @property
    def family_map(self) -> FamilyMap:
        return self._family_map

    def select_family(self, family: bytes) -> Self:
        select_family(self._family_map, family)
        return self

    def select_column(self, family: bytes, qualifier: Optional[bytes]) -> Self:
        select_column(self._family_map, family, qualifier)
        return self

    def set_family_map(self, family_map: FamilyMap) -> Self:
        self._family_map = family_map
        return self

    def set_filter(self, filter: Optional[Filter]) -> Self:
        self._filter = filter
        return self

    def set_cache_blocks(self, cache_blocks: bool) -> Self:
        self._cache_blocks = cache_blocks
        return self

    def set_max_versions(self, max_versions: int = MAX_INT) -> Self:
        self._max_versions = max_versions
        return self

    def set_max_results_per_column_family(self, limit: int) -> Self:
        self._store_limit = limit
        return self

    def set_row_offset_per_column_family(self, offset: int) -> Self:
        self._store_offset = offset
        return self

    def set_time_range(self, min_stamp: int, max_stamp: int) -> Self:
        self._time_range = TimeRange(min_stamp, max_stamp)
        return self

    def set_time_stamp(self, timestamp: int) -> Self:
        self._time_range = TimeRange.at(timestamp)
        return self

    def fingerprint(self) -> Dict[str, Any]:
        return {"families": family_fingerprint(self._family_map)}

    def describe(self, max_cols: int = DEFAULT_MAX_COLS) -> Dict[str, Any]:
        result = self.fingerprint()
        family_columns, total_columns = describe_families(self._family_map, max_cols)
        result["families"] = family_columns
        result["row"] = to_string_binary(self._row)
        result["maxVersions"] = self._max_versions
        result["cacheBlocks"] = self._cache_blocks
        result["timeRange"] = self._time_range.to_list()
        result["totalColumns"] = total_columns
        if self._filter is not None:
            result["filter"] = str(self._filter)
        operation_id = self.get_id()
        if operation_id is not None:
            result["id"] = operation_id
        return result
