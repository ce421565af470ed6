#!/usr/bin/env python3
"""
Racing & sporting catalog command line.

Commands:
  init                Create and seed the races and sports databases
  serve               Run one of the servers (racing | sporting | api) under uvicorn
  list                List races or sports with optional filter / ordering
  get                 Fetch a single race or sport by id

Notes:
- Database paths and endpoints come from config.yaml or CATALOG_* env vars.
- `list --format table` prints a pandas table instead of JSON.
"""
from __future__ import annotations

import argparse
import json
import sys

import pandas as pd

from .config import load_settings, split_endpoint
from .db import Store
from .domain.models import KINDS, ListFilter, OrderBy
from .errors import CatalogError, NotFound
from .logs import configure_logging
from .repository.catalog_repo import CatalogRepo


def _repo(settings, kind_name: str) -> CatalogRepo:
    kind = KINDS[kind_name]
    return CatalogRepo(kind, Store(settings.db_path_for(kind.name)))


# ---------------- Commands ----------------

def cmd_init(args, settings) -> int:
    for name in KINDS:
        _repo(settings, name).init()
        print(f"seeded {name} -> {settings.db_path_for(name)}")
    return 0


def cmd_serve(args, settings) -> int:
    import uvicorn

    target = {
        "racing": ("catalog.api:racing_app", settings.racing_endpoint),
        "sporting": ("catalog.api:sporting_app", settings.sporting_endpoint),
        "api": ("catalog.api:app", settings.api_endpoint),
    }[args.server]
    app_path, endpoint = target
    host, port = split_endpoint(endpoint)
    uvicorn.run(app_path, host=args.host or host, port=args.port or port, log_config=None)
    return 0


def cmd_list(args, settings) -> int:
    flt = None
    if args.meeting_id or args.visible:
        flt = ListFilter(meeting_ids=list(args.meeting_id or []), visible=args.visible)
    order = OrderBy(args.order_by, args.direction) if args.order_by is not None else None
    records = [r.to_dict() for r in _repo(settings, args.kind).list(flt, order)]

    if args.format == "table":
        pd.set_option("display.max_rows", 200)
        pd.set_option("display.width", 160)
        df = pd.DataFrame(records, columns=["id", "meetingId", "name", "number", "visible", "advertisedStartTime", "status"])
        print(df.to_string(index=False) if not df.empty else "(empty)")
    else:
        print(json.dumps({args.kind: records}, ensure_ascii=False, indent=2))
    return 0


def cmd_get(args, settings) -> int:
    kind = KINDS[args.kind]
    try:
        record = _repo(settings, args.kind).get(args.id)
    except NotFound as e:
        print(str(e), file=sys.stderr)
        return 1
    print(json.dumps({kind.singular: record.to_dict()}, ensure_ascii=False, indent=2))
    return 0


# ---------------- Entry ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Racing & sporting catalog")
    parser.add_argument("--config", default=None, help="path to config.yaml")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create and seed both databases")
    p_init.set_defaults(func=cmd_init)

    p_serve = sub.add_parser("serve", help="run a server")
    p_serve.add_argument("server", choices=["racing", "sporting", "api"])
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)

    p_list = sub.add_parser("list", help="list races or sports")
    p_list.add_argument("kind", choices=sorted(KINDS))
    p_list.add_argument("--meeting-id", type=int, action="append", help="repeatable")
    p_list.add_argument("--visible", action="store_true", help="visible records only")
    p_list.add_argument("--order-by", default=None, help="meetingId | name | visible | advertisedStartTime")
    p_list.add_argument("--direction", default="ASC", choices=["ASC", "DESC"])
    p_list.add_argument("--format", default="json", choices=["json", "table"])
    p_list.set_defaults(func=cmd_list)

    p_get = sub.add_parser("get", help="fetch one race or sport")
    p_get.add_argument("kind", choices=sorted(KINDS))
    p_get.add_argument("id", type=int)
    p_get.set_defaults(func=cmd_get)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    settings = load_settings(args.config)
    configure_logging(settings.log_level, stream=sys.stderr)
    try:
        return args.func(args, settings)
    except CatalogError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
