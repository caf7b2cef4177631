"""Services: resource handlers that own the lookup, existence check and mutation.

Invariants:
    - Handlers receive the AsyncSession explicitly (no hidden global state)
    - Handlers trust their input: rule chains have already run
"""
