"""Products REST API: CRUD service for products with declarative request rules.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
