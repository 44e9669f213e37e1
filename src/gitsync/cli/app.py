"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from gitsync import AuthenticationError, ConfigError, GitSyncError, HostError, StoreError, SyncError, SyncReport

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CANCELLED = 2
EXIT_CONFIG = 3
EXIT_AUTH = 4
EXIT_OPERATION = 5


def _exit_code_for(report: SyncReport) -> int:
    if report.cancelled:
        return EXIT_CANCELLED
    if report.success:
        return EXIT_OK
    return EXIT_OPERATION


def main(argv: list[str] | None = None) -> int:
    import gitsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "prefs":
            cli._run_prefs(args)
            return EXIT_OK
        if args.command == "setup":
            report = cli.asyncio.run(cli._run_setup(args))
        elif args.command == "export":
            report = cli.asyncio.run(cli._run_export(args))
        elif args.command == "import":
            report = cli.asyncio.run(cli._run_import(args))
        else:
            report = cli.asyncio.run(cli._run_sync(args))
        return _exit_code_for(report)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_AUTH
    except (StoreError, HostError, SyncError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_OPERATION
    except GitSyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED
    except KeyboardInterrupt:
        print("cancelled", file=sys.stderr)
        return EXIT_CANCELLED
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED


__all__ = ["main"]
