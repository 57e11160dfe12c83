#!/usr/bin/env python3
"""Call one OPay endpoint from the command line.

Reads credentials from OPAY_* env vars (see OPaySettings.from_env), sends the
given JSON parameters to the named operation and prints the JSON response.

Examples
--------
  python scripts/opay_call.py --list
  python scripts/opay_call.py --operation checkout.initialize \
      --params '{"reference": "TXN123", "amount": "500"}' --dry
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from opay_sdk import ENDPOINTS, ConnectionClient, OPayError, OPaySettings, get_endpoint


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--operation", type=str, choices=sorted(ENDPOINTS), help="Registered endpoint name")
    p.add_argument("--params", type=str, default=None, help="JSON object with request parameters")
    p.add_argument("--params-file", type=str, default=None, help="Path to a JSON file with request parameters")
    p.add_argument("--dry", action="store_true", help="Only print the prepared request")
    p.add_argument("--strict", action="store_true", help="Fail on provider error codes")
    p.add_argument("--list", action="store_true", help="List registered endpoints and exit")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def load_params(args: argparse.Namespace) -> Dict[str, Any]:
    if args.params and args.params_file:
        raise SystemExit("Use either --params or --params-file, not both.")
    if args.params_file:
        raw = Path(args.params_file).read_text(encoding="utf-8")
    else:
        raw = args.params or "{}"
    obj = json.loads(raw)
    if not isinstance(obj, dict):
        raise SystemExit("Parameters must be a JSON object.")
    return obj


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list:
        for name in sorted(ENDPOINTS):
            spec = ENDPOINTS[name]
            print(f"{name:<32} {spec.method.value:<5} {spec.path}")
        return 0

    if not args.operation:
        print("--operation is required (see --list)", file=sys.stderr)
        return 2

    try:
        params = load_params(args)
    except ValueError as e:
        print(f"invalid parameters: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"cannot read parameters: {e}", file=sys.stderr)
        return 2

    spec = get_endpoint(args.operation)
    try:
        settings = OPaySettings.from_env()
    except RuntimeError as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2
    client = ConnectionClient(settings, raise_on_provider_error=args.strict)

    if args.dry:
        try:
            req = client.prepare(params, spec)
        except OPayError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"{req.method} {req.url}")
        print(json.dumps(req.redacted_headers(), indent=2))
        if req.body is not None:
            print(req.body)
        if req.params:
            print(json.dumps(dict(req.params), ensure_ascii=False))
        return 0

    try:
        resp = client.send(params, spec)
    except OPayError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(resp, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
