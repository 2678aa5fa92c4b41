"""Command line entry point.

    coin-catalog bootstrap
    coin-catalog sync [--coins TS --blockchains TS --tokens TS]
    coin-catalog status
    coin-catalog dump {coins,blockchains,tokens}
"""

import argparse
import asyncio
import sys

from coin_catalog.config.state import ConfigState, get_config
from coin_catalog.dependency_container import CatalogDependencyContainer
from coin_catalog.infrastructure.observability import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coin-catalog",
        description="Keep the local coin/blockchain/token catalog in sync",
    )
    parser.add_argument("--config-dir", default=None, help="Directory with YAML config")
    parser.add_argument("--log-level", default=None, help="Override configured log level")
    parser.add_argument(
        "--plain-logs", action="store_true", help="Human-readable logs instead of JSON"
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("bootstrap", help="Seed storage from the bundled snapshot if needed")

    sync = sub.add_parser("sync", help="Sync with the remote catalog")
    sync.add_argument("--coins", type=int, help="Remote coins timestamp")
    sync.add_argument("--blockchains", type=int, help="Remote blockchains timestamp")
    sync.add_argument("--tokens", type=int, help="Remote tokens timestamp")

    sub.add_parser("status", help="Print stored last-sync timestamps")

    dump = sub.add_parser("dump", help="Print a stored dataset as JSON")
    dump.add_argument("dataset", choices=["coins", "blockchains", "tokens"])
    return parser


async def _sync(container: CatalogDependencyContainer, args: argparse.Namespace) -> int:
    timestamps = (args.coins, args.blockchains, args.tokens)
    syncer = container.create_coin_syncer()
    try:
        if all(ts is None for ts in timestamps):
            outcome = await syncer.sync_from_status()
        else:
            outcome = await syncer.sync(*timestamps)
    finally:
        await container.close()

    print(outcome.value)
    return 0 if outcome.ok else 1


def run(args: argparse.Namespace, settings: ConfigState) -> int:
    container = CatalogDependencyContainer(settings)

    if args.command == "bootstrap":
        applied = container.create_bootstrap_loader().run()
        print("applied" if applied else "skipped")
        return 0

    if args.command == "sync":
        container.create_bootstrap_loader().run()
        return asyncio.run(_sync(container, args))

    if args.command == "status":
        print(container.tracker.sync_info().model_dump_json(indent=2))
        return 0

    syncer = container.create_coin_syncer()
    dumps = {
        "coins": syncer.coins_dump,
        "blockchains": syncer.blockchains_dump,
        "tokens": syncer.tokens_dump,
    }
    print(dumps[args.dataset]())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "sync":
        partial = [args.coins, args.blockchains, args.tokens]
        if any(ts is None for ts in partial) and not all(ts is None for ts in partial):
            parser.error("--coins, --blockchains and --tokens must be given together")

    settings = get_config(args.config_dir)
    setup_logging(
        level=args.log_level or settings.logging.level,
        json_logs=settings.logging.json_logs and not args.plain_logs,
    )
    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
