"""Core Layer: pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or schemas/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: pagination, filtering and
      statistics are testable without a database
"""
