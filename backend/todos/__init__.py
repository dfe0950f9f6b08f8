"""Todos API Package — REST CRUD service for Todo items backed by Redis.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
