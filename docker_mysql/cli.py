"""
docker-mysql - disposable MySQL containers for local development.

Usage:
  docker-mysql prepare 8.0 app -u app -p secret   # Container, database, user
  docker-mysql exec 8.0 -d app "show tables"      # Run SQL in the container
  docker-mysql stop 8.0                           # Stop the container
  docker-mysql rm 8.0 app                         # Drop a database
  docker-mysql down 8.0 -v                        # Remove container and volume
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import structlog
from rich.console import Console
from rich.markup import escape

from .models.errors import CommandError, DockerMySQLError
from .services import ContainerManager, MySQLClient, Provisioner
from .utils.logging import setup_logging

console = Console()
error_console = Console(stderr=True)
logger = structlog.get_logger(__name__)


# ============================================================================
# Commands
# ============================================================================

async def cmd_prepare(args: argparse.Namespace) -> int:
    """Provision container, database and optional user."""
    port = await Provisioner().prepare(
        args.version, args.database_name, user=args.user_name, password=args.password
    )
    console.print(f"[green]Success:[/green] mysql is running on port [bold]{port}[/bold]")
    return 0


async def cmd_exec(args: argparse.Namespace) -> int:
    """Run SQL inside the container, streaming the client's output."""
    await MySQLClient().execute(
        args.version,
        " ".join(args.command),
        user=args.user_name,
        password=args.password,
        database=args.database_name,
        stream=True,
    )
    return 0


async def cmd_stop(args: argparse.Namespace) -> int:
    """Stop the container."""
    await ContainerManager().stop(args.version)
    return 0


async def cmd_rm(args: argparse.Namespace) -> int:
    """Drop a database; failures are ignored."""
    dropped = await MySQLClient().drop_database(
        args.version, args.database_name, user=args.user_name, password=args.password
    )
    if not dropped:
        console.print(f"[yellow]Database {escape(args.database_name)} was not dropped[/yellow]")
    return 0


async def cmd_down(args: argparse.Namespace) -> int:
    """Force-remove the container and optionally its volume."""
    await ContainerManager().down(args.version, remove_volume=args.volume)
    return 0


# ============================================================================
# Argument Parsing
# ============================================================================

def _add_credentials(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-u", "--userName", dest="user_name", help="MySQL user name")
    parser.add_argument("-p", "--password", dest="password", help="MySQL password")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="docker-mysql",
        description="Provision disposable MySQL containers for local development",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1],
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command_name", metavar="command")
    subparsers.required = True

    prepare = subparsers.add_parser(
        "prepare", help="Start the container and create a database (and user)"
    )
    prepare.add_argument("version", help="MySQL image tag, e.g. 8.0 or latest")
    prepare.add_argument("database_name", metavar="databaseName")
    _add_credentials(prepare)
    prepare.set_defaults(handler=cmd_prepare)

    exec_ = subparsers.add_parser("exec", help="Run SQL inside the container")
    exec_.add_argument("version", help="MySQL image tag")
    exec_.add_argument("command", nargs="+", help="SQL to run (words are joined)")
    exec_.add_argument("-d", "--databaseName", dest="database_name", help="Default database")
    _add_credentials(exec_)
    exec_.set_defaults(handler=cmd_exec)

    stop = subparsers.add_parser("stop", help="Stop the container")
    stop.add_argument("version", help="MySQL image tag")
    stop.set_defaults(handler=cmd_stop)

    rm = subparsers.add_parser("rm", help="Drop a database (failures are ignored)")
    rm.add_argument("version", help="MySQL image tag")
    rm.add_argument("database_name", metavar="databaseName")
    _add_credentials(rm)
    rm.set_defaults(handler=cmd_rm)

    down = subparsers.add_parser("down", help="Force-remove the container")
    down.add_argument("version", help="MySQL image tag")
    down.add_argument(
        "-v", "--volume", action="store_true", help="Also remove the data volume"
    )
    down.set_defaults(handler=cmd_down)

    return parser


# ============================================================================
# Main Entry Point
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None)

    try:
        return asyncio.run(args.handler(args))
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Interrupted[/yellow]")
        return 130
    except CommandError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        logger.debug("Command failed", argv=e.argv, returncode=e.returncode)
        return 1
    except DockerMySQLError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
