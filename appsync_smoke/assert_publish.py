#!/usr/bin/env python3
"""Quick assertion script verifying client-owner `publishMessage` shareId derivation."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List

from appsync_smoke.client import AppSyncSmokeError, require_endpoint, send
from appsync_smoke.documents import PUBLISH_CLIENT_OWNER


def expected_share_id(tenant_id: int, property_id: int, order_id: int) -> str:
    return f"{tenant_id}:{property_id}:{order_id}"


def publish_client_owner(
    endpoint: str,
    content: str,
    sender: str,
    tenant_id: int,
    property_id: int,
    order_id: int,
) -> Dict[str, Any]:
    status_line, payload = send(
        endpoint,
        PUBLISH_CLIENT_OWNER,
        {
            "content": content,
            "sender": sender,
            "tenantID": tenant_id,
            "propertyID": property_id,
            "orderID": order_id,
        },
    )

    if not isinstance(payload, dict):
        raise AppSyncSmokeError(f"Non-JSON response ({status_line})")

    if payload.get("errors"):
        messages = ", ".join(
            err.get("message", str(err)) if isinstance(err, dict) else str(err)
            for err in payload["errors"]
        )
        raise AppSyncSmokeError(f"GraphQL errors: {messages}")

    result = (payload.get("data") or {}).get("publishMessage")
    if result is None:
        raise AppSyncSmokeError(f"Unexpected response payload: {payload}")

    return result


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--tenant-id", type=int, default=1, help="Tenant ID (default: 1).")
    parser.add_argument("--property-id", type=int, default=2, help="Property ID (default: 2).")
    parser.add_argument("--order-id", type=int, default=3, help="Order ID (default: 3).")
    parser.add_argument(
        "--content",
        default="hello from python (client-owner mode)",
        help="Message content to publish.",
    )
    parser.add_argument("--sender", default="python-assert-sender", help="Sender identifier.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    expected = expected_share_id(args.tenant_id, args.property_id, args.order_id)
    try:
        endpoint = require_endpoint()
        print(f"➕ Publishing as tenant {args.tenant_id}, expecting shareId {expected}")
        message = publish_client_owner(
            endpoint,
            args.content,
            args.sender,
            args.tenant_id,
            args.property_id,
            args.order_id,
        )
    except AppSyncSmokeError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if message.get("shareId") != expected:
        print(f"❌ Expected shareId {expected!r} but got {message}")
        return 1

    if message.get("content") != args.content:
        print(f"❌ Content was not echoed back: {message}")
        return 1

    print("✅ shareId derived from tenantID:propertyID:orderID:", message["shareId"])
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    run()
