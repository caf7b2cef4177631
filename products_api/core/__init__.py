"""Core Layer: pure request rules and the error hierarchy. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Every predicate is pure and deterministic
"""
