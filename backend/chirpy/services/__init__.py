"""Services Layer — orchestration between routes, core rules and stores.

Invariants:
    - Services depend on core/ Protocols, never on SQLAlchemy or route objects
    - Domain failures are raised as ChirpyError subclasses; routes never
      build error responses themselves

Design Decisions:
    - One service class per resource, stores injected in __init__ so tests
      pass in-memory fakes
"""
