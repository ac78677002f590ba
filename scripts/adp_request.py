#!/usr/bin/env python
"""Perform a single authenticated ADP API request and write the JSON result.

Examples:
  python scripts/adp_request.py --method get --path events/time/v1/data-collection-entries.process/123 --out data/entry.json
  python scripts/adp_request.py --method post --path events/time/v1/data-collection-entries.process --data punch.json --out data/punch_result.json
  python scripts/adp_request.py --method delete --path events/time/v1/data-collection-entries.process/123 --out data/deleted.json

Settings are read from ADP_API_HOST, ADP_CLIENT_ID, ADP_CLIENT_SECRET and
ADP_SSL_CERT_PATH (a local .env file is honoured).
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from adp_client import AdpClient, ApiRequestError, ClientConfig


# Values already present in the environment win over .env
def load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Call the ADP API')
    p.add_argument('--method', required=True, choices=['get', 'post', 'delete'])
    p.add_argument('--path', required=True, help='Resource path relative to ADP_API_HOST')
    p.add_argument('--data', help='JSON file with the POST body')
    p.add_argument('--out', help='Output JSON file path (stdout when omitted)')
    p.add_argument('--env-file', default='.env')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='[%(levelname)s] %(message)s')
    load_env_file(Path(args.env_file))

    body = None
    if args.method == 'post':
        if not args.data:
            raise SystemExit('--data required for post')
        try:
            body = json.loads(Path(args.data).read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            print(f'[error] Cannot read --data {args.data}: {e}', file=sys.stderr)
            return 1

    try:
        client = AdpClient(ClientConfig.from_env(required=True))
        if args.method == 'get':
            result = client.get(args.path)
        elif args.method == 'post':
            result = client.post(args.path, body)
        else:
            response = client.delete(args.path)
            result = {'status_code': response.status_code, 'body': response.body}
    except ApiRequestError as e:
        print(f'[error] {type(e).__name__}: {e.message}', file=sys.stderr)
        return 1

    text = json.dumps(result, ensure_ascii=False, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding='utf-8')
        if args.verbose:
            print(f'[done] Wrote {out_path}')
    else:
        print(text)
    return 0

if __name__ == '__main__':
    sys.exit(main())
