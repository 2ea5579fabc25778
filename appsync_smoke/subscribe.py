#!/usr/bin/env python3
"""Watch `onMessage` over AppSync realtime websockets using the gql library."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional
from urllib.parse import urlparse

from gql import Client, gql
from gql.transport.appsync_auth import AppSyncJWTAuthentication
from gql.transport.appsync_websockets import AppSyncWebsocketsTransport
from gql.transport.exceptions import TransportError as GqlTransportError
from websockets.exceptions import WebSocketException

from appsync_smoke.client import (
    AppSyncSmokeError,
    TransportError,
    auth_token,
    render_body,
    require_endpoint,
)
from appsync_smoke.documents import ON_MESSAGE

logger = logging.getLogger(__name__)

SUBSCRIPTION = gql(ON_MESSAGE)


def open_client(endpoint: str, token: str) -> Client:
    # Lambda authorizers read the same Authorization header the JWT mode sends.
    auth = AppSyncJWTAuthentication(host=urlparse(endpoint).netloc, jwt=token)
    transport = AppSyncWebsocketsTransport(url=endpoint, auth=auth)
    return Client(transport=transport, fetch_schema_from_transport=False)


async def watch_messages(
    endpoint: str, share_id: str, count: int, token: Optional[str] = None
) -> int:
    """Print ``onMessage`` events for ``share_id`` until ``count`` have arrived.

    Returns the number of messages received, which is lower than ``count``
    only when the server completes the subscription early.
    """
    received = 0
    logger.debug("Subscribing to onMessage(shareId=%s) at %s", share_id, endpoint)

    try:
        async with open_client(endpoint, token or auth_token()) as session:
            async for result in session.subscribe(
                SUBSCRIPTION, variable_values={"shareId": share_id}
            ):
                message = result.get("onMessage")
                if not message:
                    print(f"⚠️  Subscription for {share_id} returned unexpected payload: {result}")
                    continue

                received += 1
                print(f"📨 Message {received}/{count} on {share_id}:")
                print(render_body(message))
                if received >= count:
                    break
    except (GqlTransportError, WebSocketException, asyncio.TimeoutError, OSError) as exc:
        raise TransportError(f"Subscription to {endpoint} failed: {exc}") from exc

    return received


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--share-id", default="room-1", help="Room to watch (default: room-1).")
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of messages to wait for before exiting (default: 1).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    if args.count <= 0:
        parser.error(f"--count must be > 0, got {args.count}")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        endpoint = require_endpoint()
        print(f"▶️  Subscribing for {args.share_id}")
        received = asyncio.run(watch_messages(endpoint, args.share_id, args.count))
    except AppSyncSmokeError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if received < args.count:
        print(f"❌ Subscription completed after {received} of {args.count} messages")
        return 1

    print(f"✅ Received {received} message(s) on {args.share_id}")
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    run()
