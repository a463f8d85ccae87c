"""Services Layer — the in-memory movie store and CSV ingestion.

Invariants:
    - The store is the only owner of managed Movie instances
    - Public operations return bool / None / LoadReport, never raise for bad input
"""
