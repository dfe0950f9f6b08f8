"""Service Layer — the four Todo operations over an EntityStore.

Invariants:
    - Services never touch HTTP types; routes never touch the store directly
"""
