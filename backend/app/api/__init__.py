"""API Layer — FastAPI routes, permission checks and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the success/error envelope

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
