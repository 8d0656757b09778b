"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure and deterministic (VisitCounter is the one stateful
      object, and it does no IO)

Design Decisions:
    - Functional core separated from imperative shell (services/, api/)
"""
