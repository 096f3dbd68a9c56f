"""Command-line interface for the event backend."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import EventStoreConfig
from .core import StorageAdapter
from .exceptions import ConflictError, EventStoreError
from .models import Announcement, Participant, ScheduleEntry

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Event backend utilities")
    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="serve")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: HOST or 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: PORT or 3001)")

    subparsers.add_parser(
        "create-tables",
        help="Create the participant, announcement and schedule tables",
    )

    return parser.parse_args(list(argv) if argv is not None else sys.argv[1:])


def _configure_logging(config: EventStoreConfig) -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.enable_debug_logging else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _serve(config: EventStoreConfig, host: str | None, port: int | None) -> int:
    from .api import create_app
    import uvicorn

    host = host or config.host
    port = port or config.port

    app = create_app(config=config)
    logger.info("listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level="debug" if config.enable_debug_logging else "info")
    return 0


def _create_tables(config: EventStoreConfig) -> int:
    storage = StorageAdapter(config)
    tables = (
        (config.participant_table, Participant.Meta.partition_key),
        (config.announcement_table, Announcement.Meta.partition_key),
        (config.schedule_table, ScheduleEntry.Meta.partition_key),
    )

    status = 0
    for table_name, key_field in tables:
        try:
            storage.gateway(table_name).create_table(key_field)
            print(f"Created {table_name} (key: {key_field})")
        except ConflictError:
            print(f"{table_name} already exists; skipping")
        except EventStoreError as exc:
            logger.error("Could not create %s: %s", table_name, exc)
            status = 1
    return status


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    config = EventStoreConfig.from_env()
    _configure_logging(config)

    if args.command == "create-tables":
        return _create_tables(config)
    return _serve(config, getattr(args, "host", None), getattr(args, "port", None))


if __name__ == "__main__":
    raise SystemExit(main())
