#!/usr/bin/env python3
"""Hit every read-only route of a running gateway and print the results.

Usage examples:
    # Local instance on the default port
    python scripts/smoke.py

    # Deployed instance
    python scripts/smoke.py --base-url https://api.infinityxoneintelligence.com
"""

import argparse
import sys

import httpx

GET_ROUTES = [
    "/health",
    "/api/status",
    "/api/memory/search?limit=5",
    "/api/storage/files",
    "/api/sheets/investor-data",
    "/api/drive/files",
    "/api/firestore/properties?limit=5",
    "/api/real-estate/overview",
]


def check(client: httpx.Client, path: str) -> bool:
    """GET *path*; True when the route answered 200."""
    try:
        resp = client.get(path)
    except httpx.HTTPError as exc:
        print(f"{'ERR':>4}  {path}  {exc}")
        return False

    detail = ""
    if resp.status_code != 200:
        try:
            detail = resp.json().get("error", "")
        except ValueError:
            detail = resp.text[:80]
    print(f"{resp.status_code:>4}  {path}  {detail}")
    return resp.status_code == 200


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke-test the gateway's GET routes")
    parser.add_argument("--base-url", default="http://localhost:8080", help="Gateway base URL")
    parser.add_argument("--timeout", type=float, default=30.0, help="Per-request timeout (s)")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=args.timeout) as client:
        results = [check(client, path) for path in GET_ROUTES]

    failed = results.count(False)
    print(f"\n--- {len(results) - failed}/{len(results)} routes OK ---")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
