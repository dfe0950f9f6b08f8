"""Core Layer — domain types, error hierarchy and store contracts. No IO.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
"""
