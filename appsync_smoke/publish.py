#!/usr/bin/env python3
"""Publish one message per parameter convention and print what AppSync returns."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, NamedTuple

from appsync_smoke.client import (
    AppSyncSmokeError,
    print_banner,
    print_response,
    require_endpoint,
    send,
)
from appsync_smoke.documents import (
    PUBLISH_CLIENT_OWNER,
    PUBLISH_OWNER,
    PUBLISH_OWNER_SIMPLE,
)


class SmokeCase(NamedTuple):
    title: str
    query: str
    variables: Dict[str, Any]


CASES: List[SmokeCase] = [
    SmokeCase(
        "Testing client-owner parameters",
        PUBLISH_CLIENT_OWNER,
        {
            "content": "[client-owner] message from python 🚀",
            "sender": "python-client-owner",
            "tenantID": 1,
            "propertyID": 1,
            "orderID": 1,
        },
    ),
    SmokeCase(
        "Testing owner parameters (with constructionID)",
        PUBLISH_OWNER,
        {
            "content": "[python][owner] message from python (owner) 🚀",
            "sender": "python-owner",
            "shareId": "8ec22adf-42d8-41dc-9f7a-87e7d1990d02",
            "constructionID": "1a9e6d41-1042-410a-acb2-28016bca3354",
        },
    ),
    SmokeCase(
        "Testing owner parameters (shareId only)",
        PUBLISH_OWNER_SIMPLE,
        {
            "content": "[owner] message from python 🚀",
            "sender": "7179984e-bc2b-452b-bdbb-09f4b07b88f2",
            "shareId": "room-1",
        },
    ),
]


def run_case(endpoint: str, case: SmokeCase) -> None:
    print_banner(case.title)
    status_line, body = send(endpoint, case.query, case.variables)
    print_response(status_line, body)


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        endpoint = require_endpoint()
        for case in CASES:
            run_case(endpoint, case)
    except AppSyncSmokeError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    run()
