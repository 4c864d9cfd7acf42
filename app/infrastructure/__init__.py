"""Infrastructure Layer — database, document store, security primitives, logging.

Invariants:
    - Only this layer talks to SQLAlchemy, passlib and python-jose directly
    - Library exceptions are mapped to core/errors.py types before leaving the layer
"""
