#!/usr/bin/env python3
"""
Create a tenant, issue its API key and optionally store GHL credentials.

Usage: DATABASE_URL=postgresql://... create-tenant

The plaintext API key is printed once. Only its SHA-256 hash is stored.
"""

import argparse
import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from tenantkit.auth.keys import generate_api_key, hash_api_key
from tenantkit.cli.prompts import collect_request
from tenantkit.cli.report import render_failure, render_success
from tenantkit.config import LOG_LEVELS, Settings, load_settings
from tenantkit.database import DatabasePool
from tenantkit.errors import ConfigurationError, TenantValidationError
from tenantkit.schemas.tenant import TenantRequest
from tenantkit.services.provisioning import ProvisionResult, provision_tenant

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create a tenant and generate its API key.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL env var or INFO).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def provision(settings: Settings, request: TenantRequest, key_hash: str) -> ProvisionResult:
    """Write the tenant through a fresh pool; the pool is closed on every path."""
    pool = DatabasePool(settings)
    try:
        return await provision_tenant(pool, request, key_hash)
    finally:
        await pool.dispose()


def main(argv: list[str] | None = None, reader=input) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if args.log_level:
        settings.log_level = args.log_level
    configure_logging(settings.log_level)

    try:
        request = collect_request(settings, reader)
    except TenantValidationError as exc:
        print(render_failure(exc), file=sys.stderr)
        return 1

    api_key = generate_api_key()
    key_hash = hash_api_key(api_key)

    try:
        result = asyncio.run(provision(settings, request, key_hash))
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
        result = ProvisionResult.failure(exc)
    if not result.ok:
        print(render_failure(result.error), file=sys.stderr)
        return 1

    for line in render_success(result.tenant, api_key):
        print(line)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
