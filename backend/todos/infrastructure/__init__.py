"""Infrastructure Layer — Redis client, typed store, and logging setup.

Invariants:
    - Every Redis failure surfaces as StoreUnavailableError (core/errors.py)
"""
