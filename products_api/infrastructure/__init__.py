"""Infrastructure Layer: database engine lifecycle and structured logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy failures are mapped to DatabaseError before they leave this layer
"""
