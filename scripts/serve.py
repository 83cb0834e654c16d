#!/usr/bin/env python3
"""
Sobe a API de registros com uvicorn.

Uso:
  python scripts/serve.py [--host 0.0.0.0] [--port 8080] [--reload]
"""
from __future__ import annotations

import argparse

import uvicorn

from api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Servir a API de registros")
    ap.add_argument("--host", default=settings.host, help=f"Interface (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Porta (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Recarregar ao editar o codigo")
    args = ap.parse_args()

    print(f"Server is running on port {args.port}")
    uvicorn.run(
        "api.app_factory:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
