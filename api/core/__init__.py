"""
Core utilities shared across the records API.

This package hosts:
- configuration helpers (env vars, backing file path, shared secret)
- cross-cutting concerns such as logging setup, the error taxonomy and the
  shared-secret gate.

Routers and services depend on these primitives instead of reading the
environment or building HTTP responses themselves.
"""
