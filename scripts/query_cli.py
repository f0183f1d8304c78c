#!/usr/bin/env python3
"""
Crime 360 command-line query utility.
Runs incident searches, face searches and analytics against the seed data and prints JSON.

Examples:
    python scripts/query_cli.py search --text theft --status Pending --sort timestamp:desc
    python scripts/query_cli.py faces --features 0.1,0.2,0.3,0.4,0.5 --threshold 0.99
    python scripts/query_cli.py snapshot --from 2025-01-06 --to 2025-01-08
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Add the parent directory to sys.path to import our modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from crime360.core.engine import OperationFailedError, create_engine
from crime360.core.fields import IncidentField
from crime360.core.geo import parse_distance_km
from crime360.core.query import DateRange, GeoRadius, IncidentFilters, QuerySpec, SortOrder, SortSpec
from crime360.core.schema import GeoPoint, SeedDataError, parse_date


def _parse_sort(value: str) -> SortSpec:
    field_name, _, order = value.partition(":")
    return SortSpec(field=IncidentField(field_name), order=SortOrder(order or "asc"))


def _json_default(value):
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if hasattr(value, "value"):
        return value.value
    raise TypeError(f"Not serializable: {type(value).__name__}")


def cmd_search(engine, args):
    geo = None
    if args.near:
        lat, lon = (float(x) for x in args.near.split(","))
        geo = GeoRadius(center=GeoPoint(lat=lat, lon=lon), radius_km=parse_distance_km(args.radius))

    date_range = None
    if args.date_from or args.date_to:
        date_range = DateRange(
            start=parse_date(args.date_from) if args.date_from else None,
            end=parse_date(args.date_to) if args.date_to else None,
        )

    query = QuerySpec(
        text=args.text,
        filters=IncidentFilters(
            statuses=tuple(args.status or ()),
            types=tuple(args.type or ()),
            priorities=tuple(args.priority or ()),
            date_range=date_range,
            geo=geo,
        ),
        sort=tuple(_parse_sort(s) for s in args.sort or ()),
        offset=args.offset,
        size=args.size,
    )
    return engine.search(query).to_dict()


def cmd_faces(engine, args):
    features = [float(x) for x in args.features.split(",")]
    return engine.search_by_similarity(features, args.threshold, args.top_k).to_dict()


def cmd_aggregate(engine, args):
    return asdict(engine.aggregate_by(IncidentField(args.field)))


def cmd_snapshot(engine, args):
    date_range = None
    if args.date_from or args.date_to:
        date_range = DateRange(
            start=parse_date(args.date_from) if args.date_from else None,
            end=parse_date(args.date_to) if args.date_to else None,
        )
    return asdict(engine.aggregate_snapshot(date_range))


def build_parser():
    parser = argparse.ArgumentParser(description="Crime 360 query utility")
    parser.add_argument("--seed", help="JSON seed file (defaults to SEED_DATA_PATH or built-in data)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search incidents")
    search.add_argument("--text")
    search.add_argument("--status", action="append")
    search.add_argument("--type", action="append")
    search.add_argument("--priority", action="append")
    search.add_argument("--from", dest="date_from")
    search.add_argument("--to", dest="date_to")
    search.add_argument("--near", help="lat,lon of the geo filter center")
    search.add_argument("--radius", default="5km")
    search.add_argument("--sort", action="append", help="field[:asc|desc], repeatable")
    search.add_argument("--offset", type=int, default=0)
    search.add_argument("--size", type=int)
    search.set_defaults(handler=cmd_search)

    faces = subparsers.add_parser("faces", help="Search persons by feature vector")
    faces.add_argument("--features", required=True, help="comma separated floats")
    faces.add_argument("--threshold", type=float)
    faces.add_argument("--top-k", dest="top_k", type=int)
    faces.set_defaults(handler=cmd_faces)

    aggregate = subparsers.add_parser("aggregate", help="Frequency table of one incident field")
    aggregate.add_argument("field", choices=[f.value for f in IncidentField])
    aggregate.set_defaults(handler=cmd_aggregate)

    snapshot = subparsers.add_parser("snapshot", help="Dashboard analytics snapshot")
    snapshot.add_argument("--from", dest="date_from")
    snapshot.add_argument("--to", dest="date_to")
    snapshot.set_defaults(handler=cmd_snapshot)

    return parser


def main():
    args = build_parser().parse_args()

    try:
        engine = create_engine(args.seed)
    except SeedDataError as e:
        print(f"ERROR: could not load seed data: {e}")
        sys.exit(1)

    try:
        result = args.handler(engine, args)
    except (OperationFailedError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(json.dumps(result, indent=2, default=_json_default))


if __name__ == "__main__":
    main()
