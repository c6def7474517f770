"""
Command line entry point: run the server or maintain the module store.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from .config import settings
from .core.database import Database
from .core.logging_config import setup_logging
from .services import ModuleService, SeedService
from .utils import format_datetime


def _print_modules(modules) -> None:
    for module in modules:
        print(f"  [{module.id}] {module.en.name} / {module.kn.name} (created {format_datetime(module.created_at)})")


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "module_studio.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def _cmd_init_db(args: argparse.Namespace) -> int:
    database = Database(args.database_url)
    try:
        database.ensure_schema()
    finally:
        database.dispose()
    print("Database schema ready")
    return 0


def _cmd_seed(args: argparse.Namespace) -> int:
    database = Database(args.database_url)
    try:
        database.ensure_schema()
        with database.session() as db:
            seeder = SeedService(ModuleService(db))
            created = seeder.force_seed() if args.command == "force-seed" else seeder.seed()
    finally:
        database.dispose()
    if created:
        print(f"Created {len(created)} modules:")
        _print_modules(created)
    else:
        print("Database already contains modules, nothing seeded")
    return 0


def _cmd_clear(args: argparse.Namespace) -> int:
    database = Database(args.database_url)
    try:
        database.ensure_schema()
        with database.session() as db:
            removed = ModuleService(db).clear_modules()
    finally:
        database.dispose()
    print(f"Removed {removed} modules")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="module-studio", description="Module Studio backend")
    parser.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=_cmd_serve)

    sub.add_parser("init-db", help="Create the modules table if missing").set_defaults(func=_cmd_init_db)
    sub.add_parser("seed", help="Insert default modules into an empty store").set_defaults(func=_cmd_seed)
    sub.add_parser("force-seed", help="Insert default modules even if the store has data").set_defaults(func=_cmd_seed)
    sub.add_parser("clear", help="Delete every module").set_defaults(func=_cmd_clear)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    return args.func(args)
