"""
Core utilities shared across the Todo API.

This package hosts:
- configuration helpers (env vars, feature flags)
- logging setup used by the app factory and scripts
"""
