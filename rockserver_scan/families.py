"""
Family and qualifier selection shared by scans and point lookups.

A family map associates a column family with either None, meaning every
qualifier of the family, or a set of the qualifiers to return.
"""
from typing import Dict, List, Optional, Set

from rockserver_scan.bytes_util import to_string_binary

FamilyMap = Dict[bytes, Optional[Set[bytes]]]

ALL_COLUMNS = "ALL"


def select_family(family_map: FamilyMap, family: bytes) -> None:
    """ Selects every qualifier of the family, dropping columns selected before """
    family_map.pop(family, None)
    family_map[family] = None


def select_column(family_map: FamilyMap, family: bytes, qualifier: Optional[bytes]) -> None:
    """ Adds a qualifier to the family, narrowing it down if it was fully selected """
    qualifiers = family_map.get(family)
    if qualifiers is None:
        qualifiers = set()
    if qualifier is not None:
        qualifiers.add(qualifier)
    family_map[family] = qualifiers


def copy_family_map(source: FamilyMap) -> FamilyMap:
    """ Rebuilds a family map entry by entry, so the copy owns its qualifier sets """
    family_map: FamilyMap = {}
    for family, qualifiers in source.items():
        if qualifiers:
            for qualifier in qualifiers:
                select_column(family_map, family, qualifier)
        else:
            select_family(family_map, family)
    return family_map


def sorted_families(family_map: FamilyMap) -> List[bytes]:
    return sorted(family_map)


def family_fingerprint(family_map: FamilyMap):
    if not family_map:
        return ALL_COLUMNS
    return [to_string_binary(family) for family in sorted_families(family_map)]


def describe_families(family_map: FamilyMap, max_cols: int):
    """
    Lists the selected columns of every family, at most max_cols of them overall.

    A fully selected family is listed as a single "ALL" entry. Returns the
    listing and the total number of columns, which is never capped.
    """
    family_columns: Dict[str, List[str]] = {}
    total_columns = 0
    remaining = max_cols
    for family in sorted_families(family_map):
        columns: List[str] = []
        family_columns[to_string_binary(family)] = columns
        qualifiers = family_map[family]
        if qualifiers is None:
            total_columns += 1
            if remaining > 0:
                columns.append(ALL_COLUMNS)
            remaining -= 1
            continue
        total_columns += len(qualifiers)
        for qualifier in sorted(qualifiers):
            if remaining <= 0:
                break
            columns.append(to_string_binary(qualifier))
            remaining -= 1
    return family_columns, total_columns
