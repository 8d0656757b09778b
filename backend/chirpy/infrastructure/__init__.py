"""Infrastructure Layer — database, hashing and logging adapters.

Invariants:
    - Infrastructure implements core/ Protocols; core never imports from here
    - Driver exceptions are mapped to core/errors.py types at this boundary
"""
