import argparse
from typing import List, Optional

import attr

STORES = ('memory', 'postgres')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@attr.s(frozen=True)
class Config:
    store: str = attr.ib(default='memory', validator=attr.validators.in_(STORES))
    db_url: str = attr.ib(default='postgresql://localhost/postgres')
    temp_db: bool = attr.ib(default=False)
    reset_tables: bool = attr.ib(default=False)
    seed: bool = attr.ib(default=True)
    port: int = attr.ib(default=8888)
    log_level: str = attr.ib(default='INFO', validator=attr.validators.in_(LOG_LEVELS))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Parking map backend.')
    parser.add_argument("--store", choices=STORES, default='memory', help="Where parking locations are kept")
    parser.add_argument("--db", default="postgresql://localhost/postgres", help="Database full url")
    parser.add_argument("--temp-db", action='store_true',
                        help="Create and initialise a temporary database (implies --store postgres)")
    parser.add_argument("--reset-tables", action='store_true', help="Drop and recreate database tables")
    parser.add_argument("--no-seed", action='store_true', help="Do not load the sample Sofia locations")
    parser.add_argument("--port", type=int, default=8888, help="Port to listen on")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default='INFO', help="Logging verbosity")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Config:
    args: argparse.Namespace = build_parser().parse_args(argv)
    return Config(store='postgres' if args.temp_db else args.store,
                  db_url=args.db,
                  temp_db=args.temp_db,
                  reset_tables=args.reset_tables,
                  seed=not args.no_seed,
                  port=args.port,
                  log_level=args.log_level)
