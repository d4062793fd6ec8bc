#!/usr/bin/env python3
"""
Subir a Todo API localmente com uvicorn.

Uso:
  python scripts/serve.py [--host 127.0.0.1] [--port 8000] [--reload] [--seed]
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import uvicorn

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    ap = argparse.ArgumentParser(description="Servir a Todo API")
    ap.add_argument("--host", default="127.0.0.1", help="Interface (default: 127.0.0.1)")
    ap.add_argument("--port", type=int, default=8000, help="Porta (default: 8000)")
    ap.add_argument("--reload", action="store_true", help="Recarregar ao editar arquivos")
    ap.add_argument("--seed", action="store_true", help="Popular com todos de exemplo")
    args = ap.parse_args()

    if not (1 <= args.port <= 65535):
        raise SystemExit(f"Porta invalida: {args.port}")
    if args.seed:
        os.environ["SEED_TODOS"] = "1"

    uvicorn.run(
        "api.app_factory:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=(os.getenv("LOG_LEVEL") or "info").lower(),
    )


if __name__ == "__main__":
    main()
