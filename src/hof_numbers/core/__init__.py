"""
Core domain models, arithmetic primitives, and contracts.

Modules here are pure: no I/O beyond loading bundled JSON schemas.
"""
