"""
Core utilities shared across the PokeHunter API.

This package hosts configuration helpers (env vars, backend selection).
Routers and repositories depend on these primitives instead of reading the
environment themselves.
"""
