"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint returns the {success, message, data} envelope

Design Decisions:
    - Thin routes delegate to services
"""
