#!/usr/bin/env python3
"""Client for the sensor graph server - submits readings read from stdin"""
import argparse
import asyncio
import json
import sys
from typing import List, Optional, TextIO

import httpx


class SensorClient:
    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.http = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=5.0)
        self.send_count = 0  # Counter for progress output

    async def submit(self, value: float):
        """Send one reading to the server"""
        response = await self.http.post("/submit", json={"data": value})
        response.raise_for_status()
        self.send_count += 1

    async def reset(self):
        """Reset the server window to its default value"""
        response = await self.http.get("/reset")
        response.raise_for_status()

    async def fetch(self) -> List[dict]:
        """Get the current window, oldest first"""
        response = await self.http.get("/get_data")
        response.raise_for_status()
        return response.json()

    async def run(self, stream: TextIO):
        """Submit every numeric line of stream"""
        for line in stream:
            line = line.strip()
            if not line:
                continue
            try:
                value = float(line)
            except ValueError:
                print(f"⚠️ Skipping non-numeric line: {line!r}")
                continue

            try:
                await self.submit(value)
            except httpx.HTTPError as e:
                print(f"⚠️ Error sending reading {value}: {e}")
                continue

            if self.send_count % 10 == 0:
                print(f"📤 Sent {self.send_count} readings")

    async def close(self):
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


async def _run(args) -> int:
    client = SensorClient(args.url)
    try:
        if args.reset:
            await client.reset()
            print("✅ Window reset")
        elif args.show:
            print(json.dumps(await client.fetch(), indent=2))
        else:
            await client.run(sys.stdin)
            print(f"✅ Sent {client.send_count} readings")
    except httpx.HTTPError as e:
        print(f"❌ Request failed: {type(e).__name__}: {e}")
        return 1
    finally:
        await client.close()
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Client for the sensor graph server - submits one reading per stdin line"
    )
    parser.add_argument(
        "--url", "-u",
        type=str,
        default="http://localhost:8000",
        help="Server base URL (default: http://localhost:8000)"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--reset", action="store_true", help="Reset the window and exit")
    group.add_argument("--show", action="store_true", help="Print the current window and exit")

    args = parser.parse_args(argv)

    # Check URL format
    if not args.url.startswith(("http://", "https://")):
        print("⚠️  URL must start with http:// or https://")
        print(f"   You provided: {args.url}")
        sys.exit(1)

    try:
        code = asyncio.run(_run(args))
    except KeyboardInterrupt:
        print("\n✅ Shutdown complete")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
