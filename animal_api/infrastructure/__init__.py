"""Infrastructure Layer - MongoDB access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All driver failures mapped to DatabaseError / DatabaseTimeoutError (core/errors.py)
"""
