#!/usr/bin/env python3
"""
Send one JPEG headshot to a running gateway and save the professional portrait.
Usage:
  python scripts/transform_headshot.py me.jpg -o me_professional.png
  python scripts/transform_headshot.py me.jpg --url http://127.0.0.1:5000
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import httpx

from headshot_gateway.client import HeadshotClient, transform_and_save
from headshot_gateway.core.errors import UploadRejected

GATEWAY_URL = os.environ.get("HEADSHOT_GATEWAY_URL", "http://127.0.0.1:5000")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transform a headshot into a professional portrait")
    parser.add_argument("input", type=Path, help="JPEG/JPG file, max 10MB")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Where to save the PNG result")
    parser.add_argument("--url", default=GATEWAY_URL, help="Gateway base URL")
    parser.add_argument("--timeout", type=float, default=120.0, help="HTTP timeout in seconds")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    output = args.output or args.input.with_name(f"professional-headshot-{args.input.stem}.png")
    if not args.input.is_file():
        print(f"Input not found: {args.input}", file=sys.stderr)
        return 1

    try:
        with HeadshotClient(args.url, timeout=args.timeout) as client:
            result = transform_and_save(client, args.input, output)
    except UploadRejected as e:
        print(e.message, file=sys.stderr)
        return 1
    except httpx.HTTPError as e:
        print(f"Could not reach gateway at {args.url}: {e}", file=sys.stderr)
        return 1

    if not result.success:
        print(f"Transformation failed: {result.error}", file=sys.stderr)
        return 1
    print(f"Saved professional headshot to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
