"""Core Layer — pure domain logic: movie fields, rules, snapshots, parsing.

Invariants:
    - No module in core/ imports from services/, cli/, or infrastructure/
    - No IO in core/ (the CSV reader lives in services/)

Design Decisions:
    - Functional core separated from imperative shell
"""
