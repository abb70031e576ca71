"""Demo command line for memstore.

Usage
-----
::

    python -m memstore repository [--functional]
    python -m memstore fetch [--url URL]
    python -m memstore envelope

Failures are logged to stderr; the exit status is always 0.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from memstore.client import JsonClient
from memstore.config import ClientConfig
from memstore.exceptions import MemstoreError
from memstore.models import Product, User, example_responses
from memstore.repository import InMemoryRepository, Repository, create_in_memory_repository

_logger = logging.getLogger("memstore")


def _dump(value: Any, out: TextIO) -> None:
    out.write(json.dumps(value, indent=2, ensure_ascii=False) + "\n")


def run_repository_demo(*, functional: bool = False, out: TextIO = sys.stdout) -> None:
    """Populate a user store and a product store, then print their contents."""
    user_repository: Repository[User]
    product_repository: Repository[Product]
    if functional:
        user_repository = create_in_memory_repository()
        product_repository = create_in_memory_repository()
    else:
        user_repository = InMemoryRepository[User]()
        product_repository = InMemoryRepository[Product]()

    user_repository.create(User(id="1", name="Putri"))
    user_repository.create(User(id="2", name="Anggit"))
    users = user_repository.find_all()
    product = product_repository.create(Product(id="1", name="Soto", price=1000))

    _dump({"users": [u.model_dump() for u in users], "product": product.model_dump()}, out)


async def run_fetch_demo(config: ClientConfig, *, url: str | None = None, out: TextIO = sys.stdout) -> None:
    """Fetch todos and print them as JSON."""
    async with JsonClient(config) as client:
        if url is not None:
            _dump(await client.fetch_json(url), out)
            return
        todos = await client.fetch_todos()
    _dump([todo.model_dump(by_alias=True) for todo in todos], out)


def run_envelope_demo(*, out: TextIO = sys.stdout) -> None:
    """Print the sample user and string envelopes."""
    user_response, string_response = example_responses()
    _dump(
        {
            "user_response": user_response.model_dump(),
            "string_response": string_response.model_dump(),
        },
        out,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="memstore", description="memstore demos")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    repo = sub.add_parser("repository", help="Run the in-memory repository demo")
    repo.add_argument("--functional", action="store_true", help="Use the closure-based repository")

    fetch = sub.add_parser("fetch", help="Fetch todos and print them")
    fetch.add_argument("--url", default=None, help="Fetch this URL instead of the configured todos endpoint")

    sub.add_parser("envelope", help="Print the example response envelopes")
    return parser


def main(argv: Sequence[str] | None = None, *, out: TextIO = sys.stdout) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        if args.command == "repository":
            run_repository_demo(functional=args.functional, out=out)
        elif args.command == "fetch":
            asyncio.run(run_fetch_demo(ClientConfig.from_env(), url=args.url, out=out))
        else:
            run_envelope_demo(out=out)
    except MemstoreError as exc:
        _logger.error("%s failed: %s", args.command, exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
