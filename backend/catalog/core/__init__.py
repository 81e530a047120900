"""Core Layer — pure catalog logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core (join + filter) separated from the imperative shell that
      loads files and serves HTTP
"""
