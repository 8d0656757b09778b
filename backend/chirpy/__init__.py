"""Chirpy Application Package — short-post social backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
