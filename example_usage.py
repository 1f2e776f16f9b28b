#!/usr/bin/env python3
"""
Basic usage examples for the EdgeGrid client library.

This script signs requests for the Akamai edge server locations API and
sends them with requests.

Expects the following environment variables:
    AKAMAI_API_HOST
    CLIENT_TOKEN
    CLIENT_SECRET
    ACCESS_TOKEN
"""

import logging
import sys

import requests

from edgegrid_client import (
    Credentials,
    RequestDescriptor,
    EdgeGridAuth,
    EdgeGridSigner,
    EdgeGridError,
    sign
)

LOCATIONS_PATH = "/diagnostic-tools/v2/ghost-locations/available"


def main():
    """Run basic usage examples."""

    print("=== EdgeGrid Client Basic Usage Examples ===\n")

    # Load credentials
    print("1. Loading credentials from the environment...")
    credentials = Credentials.from_env()
    print(f"   API host: {credentials.host}")
    print(f"   Client token: {credentials.client_token[:8]}...\n")

    # Example 1: sign a request and send it with any HTTP client
    print("2. Signing a GET request...")
    request = RequestDescriptor.new(LOCATIONS_PATH)
    signed = sign(credentials, request, "GET")
    print(f"   Timestamp: {signed.timestamp}")
    print(f"   Nonce: {signed.nonce}")

    response = requests.get(
        f"https://{credentials.host}{LOCATIONS_PATH}",
        headers=signed.headers,
        timeout=30
    )
    if response.status_code == 200:
        locations = response.json().get("locations", [])
        print(f"   ✓ GET request successful: {len(locations)} locations")
    else:
        print(f"   ✗ GET request failed: {response.status_code}")
        print(f"   Response: {response.text}")
    print()

    # Example 2: the same request through a session
    print("3. Using EdgeGridAuth with a requests session...")
    with requests.Session() as session:
        session.auth = EdgeGridAuth(credentials)
        response = session.get(f"https://{credentials.host}{LOCATIONS_PATH}", timeout=30)
        print(f"   Status: {response.status_code}")
    print()

    # Example 3: signing a body with truncation
    print("4. Signing a POST body with max_body...")
    signer = EdgeGridSigner(credentials, max_body=128 * 1024)
    signed = signer.post("/papi/v1/search/find-by-value", body=b'{"hostname": "www.example.com"}')
    print(f"   Body to send: {len(signed.body)} bytes")
    print()

    # Example 4: error handling
    print("5. Demonstrating error handling...")
    try:
        sign(credentials, request.with_body(b"unexpected"), "GET")
    except EdgeGridError as e:
        print(f"   ✓ Rejected: {e}")

    print("\n=== All Examples Completed ===")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    try:
        main()
    except EdgeGridError as e:
        print(f"EdgeGrid Error: {e}")
        sys.exit(1)
    except requests.RequestException as e:
        print(f"HTTP Error: {e}")
        sys.exit(1)
