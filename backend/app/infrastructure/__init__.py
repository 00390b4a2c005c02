"""Infrastructure Layer: database session management and cross-cutting concerns.

Invariants:
    - Infrastructure maps driver exceptions to core errors (DatabaseError)

Design Decisions:
    - Session manager and logging setup live here, initialized once by the lifespan
"""
