import logging

from rockserver_scan import IsolationLevel, PointLookupSpec, ScanSpec


def main():
    scan = (ScanSpec(b'user:0001', b'user:0100')
            .select_family(b'info')
            .select_column(b'stats', b'logins')
            .select_column(b'stats', b'last_seen')
            .set_time_range(0, 1700000000000)
            .set_isolation_level(IsolationLevel.READ_UNCOMMITTED))
    scan.set_id("main-scan")
    print("Scan", scan)
    print("Fingerprint", scan.fingerprint())
    print("Wire version", scan.wire_version())

    scan.set_max_results_per_column_family(10)
    print("Wire version with paging", scan.wire_version())

    lookup = ScanSpec.from_point_lookup(PointLookupSpec(b'user:0042').select_family(b'info'))
    print("Point lookup", lookup.is_point_lookup(), lookup.to_json(max_cols=1))


logging.basicConfig(level=logging.DEBUG)
main()
