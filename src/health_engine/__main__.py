"""Punto de entrada: python -m health_engine."""

from __future__ import annotations

from health_engine.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
