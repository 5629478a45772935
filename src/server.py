"""Protean Engine runner for Shopfront domains.

Starts Engine workers that process events asynchronously:
- OutboxProcessor: polls outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes event handlers

Notifications only has work to do here: it consumes the events the other
domains publish.

Usage:
    python src/server.py                        # Run every domain engine
    python src/server.py --domain notifications # Run only the notifications engine
"""

import argparse
import asyncio

from protean.server.engine import Engine

from shared.logging import get_logger

logger = get_logger(__name__)

DOMAIN_NAMES = ["identity", "cart", "ordering", "catalogue", "notifications"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "identity":
        from identity.domain import identity as domain
    elif name == "cart":
        from cart.domain import cart as domain
    elif name == "ordering":
        from ordering.domain import ordering as domain
    elif name == "catalogue":
        from catalogue.domain import catalogue as domain
    elif name == "notifications":
        from notifications.domain import notifications as domain
    else:
        raise ValueError(f"Unknown domain: {name}")

    domain.init()
    return domain


async def run(domain_names):
    engines = []
    for name in domain_names:
        domain = _get_domain(name)
        engines.append(Engine(domain))
        logger.info("Engine starting", domain=name)

    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Shopfront Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else DOMAIN_NAMES

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
