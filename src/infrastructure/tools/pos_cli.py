"""
Maute360 POS command line.

Usage:
    pos serve [--host HOST] [--port PORT] [--reload]
    pos migrate [--no-backup | --status | --verify]
    pos repair-schema [--database-url URL | --sqlite PATH]
    pos setup [--base-url URL]
    pos print-receipt SALE_ID [--base-url URL] [--user-id ID]

``serve``, ``migrate`` and ``repair-schema`` run next to the database;
``setup`` and ``print-receipt`` run on a till and talk to the server.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from src.config import configure_logging, get_logger, get_settings
from src.core.exceptions import POSError

logger = get_logger(__name__)


def print_success(msg: str) -> None:
    print(f"[OK] {msg}")


def print_error(msg: str) -> None:
    print(f"[!!] {msg}", file=sys.stderr)


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API under uvicorn; migrations run in the app lifespan."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload,
    )
    return 0


def cmd_migrate(args: argparse.Namespace) -> int:
    from src.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        initialize_database,
        verify_schema_integrity,
    )

    if args.status:
        status = asyncio.run(get_migration_status())
        print(f"Database exists: {status['exists']}")
        print(f"Current version: {status['current_version'] or 'N/A'}")
        print(f"Applied: {', '.join(status['applied_migrations']) or '-'}")
        print(f"Pending: {', '.join(status['pending_migrations']) or '-'}")
        return 0

    if args.verify:
        checks = asyncio.run(verify_schema_integrity())
        for check in checks:
            extra = {k: v for k, v in check.items() if k not in ("check", "status")}
            print(f"[{check['status']}] {check['check']} {extra}")
        return 0 if all(c["status"] == "PASS" for c in checks) else 1

    try:
        results = asyncio.run(initialize_database(create_backup_before=not args.no_backup))
    except Exception as e:
        print_error(f"Migration failed: {e}")
        return 1

    if not results:
        print_success("Database already up to date")
    for result in results:
        if result.success:
            print_success(f"v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        else:
            print_error(f"v{result.version}: {result.name} failed: {result.error}")
    return 0 if all(r.success for r in results) else 1


def cmd_repair_schema(args: argparse.Namespace) -> int:
    from src.infrastructure.storage import schema_repair

    argv: list[str] = []
    if args.database_url:
        argv += ["--database-url", args.database_url]
    if args.sqlite:
        argv += ["--sqlite", args.sqlite]
    return schema_repair.main(argv)


async def _setup(base_url: str | None) -> int:
    from src.application.use_cases import InitializeSystemUseCase
    from src.core.exceptions import SetupError
    from src.infrastructure.client import POSClient

    async with POSClient(base_url=base_url) as client:
        try:
            result = await InitializeSystemUseCase(client).execute()
        except SetupError as e:
            print_error(e.message)
            return 1

        print_success(result.message)
        await asyncio.sleep(result.redirect_after)
        print(f"Continue em {client.base_url}{result.redirect_to}")
    return 0


def cmd_setup(args: argparse.Namespace) -> int:
    return asyncio.run(_setup(args.base_url))


async def _print_receipt(sale_id: str, base_url: str | None, user_id: str | None) -> int:
    from src.application.use_cases import PrintAndSaveReceiptUseCase
    from src.infrastructure.client import POSClient
    from src.infrastructure.printing import CommandPrinter, SpoolPrintSurface

    surface = SpoolPrintSurface(CommandPrinter())
    async with POSClient(base_url=base_url, user_id=user_id) as client:
        try:
            result = await PrintAndSaveReceiptUseCase(client, surface).execute(sale_id)
        except POSError as e:
            print_error(e.message)
            return 1
        finally:
            # The spooler may still be reading the staged file
            await asyncio.sleep(surface.teardown_delay)
            surface.close()

    print_success(f"Recibo impresso e guardado em {result.saved_path}")
    return 0


def cmd_print_receipt(args: argparse.Namespace) -> int:
    return asyncio.run(_print_receipt(args.sale_id, args.base_url, args.user_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pos",
        description="Maute360 POS server and till commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pos serve --port 5000          # Start the API
  pos repair-schema              # Add missing columns (uses DATABASE_URL)
  pos print-receipt 9f1c...      # Print and archive a receipt
        """,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Start the API server")
    serve.add_argument("--host", help="Server host (default from API_HOST)")
    serve.add_argument("--port", type=int, help="Server port (default from API_PORT)")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    serve.set_defaults(func=cmd_serve)

    migrate = sub.add_parser("migrate", help="Apply pending SQLite migrations")
    migrate.add_argument("--no-backup", action="store_true", help="Skip backup before migrations")
    migrate.add_argument("--status", action="store_true", help="Show applied and pending migrations")
    migrate.add_argument("--verify", action="store_true", help="Run schema integrity checks")
    migrate.set_defaults(func=cmd_migrate)

    repair = sub.add_parser("repair-schema", help="Add missing columns to an existing database")
    repair.add_argument("--database-url", help="Postgres URL (default: DATABASE_URL)")
    repair.add_argument("--sqlite", help="Repair a SQLite database file instead")
    repair.set_defaults(func=cmd_repair_schema)

    setup = sub.add_parser("setup", help="Seed an empty server database")
    setup.add_argument("--base-url", help="Server URL (default from POS_BASE_URL)")
    setup.set_defaults(func=cmd_setup)

    receipt = sub.add_parser("print-receipt", help="Print a sale's receipt and archive it")
    receipt.add_argument("sale_id", help="Sale identifier")
    receipt.add_argument("--base-url", help="Server URL (default from POS_BASE_URL)")
    receipt.add_argument("--user-id", help="Acting user (default from POS_USER_ID)")
    receipt.set_defaults(func=cmd_print_receipt)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``pos`` command."""
    configure_logging()
    args = build_parser().parse_args(argv)
    logger.debug("cli_command", command=args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
