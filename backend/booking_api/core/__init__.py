"""Core Layer: pure booking rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Eligibility checks are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (services/ orchestrates IO)
"""
