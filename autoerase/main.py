"""Command line entry point."""

import argparse
import logging

from autoerase.adapters import BaseAdminAdapter, SynapseAdminAdapter
from autoerase.core import ConfigurationError, get_settings
from autoerase.models import Policy
from autoerase.services import DirectoryService, DryRunService, ErasureService, filter_accounts
from autoerase.version import __version__

logger = logging.getLogger("autoerase")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="suae",
        description="Erase Synapse accounts older than the configured TTL.",
    )
    parser.add_argument(
        "--dryrun",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="dry run mode (overrides the SUAE_DRYRUN environment variable)",
    )
    parser.add_argument(
        "--redact",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="redact messages (overrides the SUAE_REDACT environment variable)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run(adapter: BaseAdminAdapter, policy: Policy) -> None:
    """Load, filter and then either preview or erase the eligible accounts."""
    if policy.dry_run:
        logger.info("running in dry run mode")

    logger.info("loading accounts...")
    accounts, error = DirectoryService(adapter).load_accounts()
    if error is not None:
        logger.error("failed to load all accounts, continuing with %d: %s", len(accounts), error)

    logger.info("loaded %d accounts, filtering...", len(accounts))
    eligible = filter_accounts(accounts, policy)
    if not eligible:
        logger.info("no eligible accounts found")
        return

    if policy.dry_run:
        DryRunService(adapter).report(eligible)
        return

    ErasureService(adapter, policy).erase_all(eligible)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        settings = get_settings(DRYRUN=args.dryrun, REDACT=args.redact)
    except ConfigurationError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    logging.getLogger().setLevel(settings.LOG_LEVEL)
    policy = Policy.from_settings(settings)

    with SynapseAdminAdapter(settings.HOST, settings.TOKEN) as adapter:
        run(adapter, policy)
    return EXIT_OK
