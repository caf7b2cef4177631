"""API Layer: FastAPI routes, rule-chain dependency and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies
"""
