#!/usr/bin/env python3
"""
Exercita a API de registros: lista tudo e busca alguns IDs.

Uso:
  python scripts/demo_client.py [--base-url http://localhost:8080] [--token robel] [--ids 1 2 999]
"""
from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

import httpx

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_IDS = (1, 2, 999)


def fetch(client: httpx.Client, path: str, out: TextIO) -> httpx.Response:
    resp = client.get(path)
    out.write(f"Status Code: {resp.status_code}\n")
    out.write(f"Body: {resp.text}\n")
    return resp


def run(client: httpx.Client, ids: Iterable[int], out: TextIO = sys.stdout) -> list[httpx.Response]:
    responses = []
    out.write("Fetching all records:\n")
    responses.append(fetch(client, "/data", out))
    for record_id in ids:
        out.write(f"\nFetching record with ID {record_id}:\n")
        responses.append(fetch(client, f"/data/{record_id}", out))
    return responses


def build_client(base_url: str, token: str, header: str = "Authorization", **kwargs) -> httpx.Client:
    return httpx.Client(base_url=base_url, headers={header: token}, timeout=10.0, **kwargs)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Cliente de demonstracao da API de registros")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL, help=f"URL da API (default: {DEFAULT_BASE_URL})")
    ap.add_argument("--token", default="robel", help="Segredo compartilhado enviado no header")
    ap.add_argument("--header", default="Authorization", help="Header da credencial")
    ap.add_argument("--ids", type=int, nargs="*", default=list(DEFAULT_IDS), help="IDs a consultar")
    args = ap.parse_args(argv)

    with build_client(args.base_url, args.token, args.header) as client:
        run(client, args.ids)


if __name__ == "__main__":
    try:
        main()
    except httpx.HTTPError as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
