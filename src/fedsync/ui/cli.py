from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fedsync.adapters.snapshot import DeltaReport
from fedsync.app import DEFAULT_FEDERATION_ID, plan_database_sync, plan_snapshot_sync
from fedsync.config import ConfigurationError, configure_logging
from fedsync.domain.model import from_epoch_millis, parse_iso_datetime

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Federated catalog sync tooling")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level (overrides $FEDSYNC_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    delta = subparsers.add_parser(
        "delta",
        help="Print the insert/update/delete delta between a remote snapshot and the mirror",
    )
    delta.add_argument(
        "--remote",
        type=Path,
        required=True,
        help="JSON snapshot of the remote catalog resources",
    )
    local_source = delta.add_mutually_exclusive_group()
    local_source.add_argument(
        "--local",
        type=Path,
        help="JSON snapshot of the local mirror (defaults to reading the mirror database)",
    )
    local_source.add_argument(
        "--database-uri",
        type=str,
        help="Mirror database URI (defaults to $DATABASE_URI)",
    )
    delta.add_argument(
        "--last-sync",
        type=str,
        help="Last successful sync as ISO-8601 timestamp or epoch milliseconds",
    )
    delta.add_argument(
        "--federation-id",
        type=str,
        default=DEFAULT_FEDERATION_ID,
        help="Federation whose resources are compared (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _parse_last_sync(value: str | None) -> datetime | None:
    if value is None:
        return None
    stripped = value.strip()
    if stripped.isdigit():
        return from_epoch_millis(int(stripped))
    return parse_iso_datetime(stripped)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        last_sync = _parse_last_sync(parsed_args.last_sync)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "delta":
            if parsed_args.local is not None:
                plan = plan_snapshot_sync(
                    remote_path=parsed_args.remote,
                    local_path=parsed_args.local,
                    last_sync_time=last_sync,
                    federation_id=parsed_args.federation_id,
                )
            else:
                plan = plan_database_sync(
                    remote_path=parsed_args.remote,
                    database_uri=parsed_args.database_uri,
                    last_sync_time=last_sync,
                    federation_id=parsed_args.federation_id,
                )
            report = DeltaReport.from_delta(parsed_args.federation_id, plan.delta)
            print(report.model_dump_json(by_alias=True, indent=2))  # noqa: T201
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during delta computation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point: load ``.env`` and handle Ctrl+C before running."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
