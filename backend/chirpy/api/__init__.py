"""API Layer — FastAPI routes, response envelope and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every JSON response (success and error) goes through api/envelope.py

Design Decisions:
    - Thin routes delegate to services
"""
